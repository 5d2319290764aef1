"""GetProfileQuery - load a profile by id."""

from dataclasses import dataclass

from vitaltrack.domain.profile.core.entities.user_profile import UserProfile
from vitaltrack.domain.profile.core.ports.repository import IUserProfileRepository
from vitaltrack.domain.shared.errors import ProfileNotFoundError


@dataclass(frozen=True)
class GetProfileQuery:
    profile_id: str


class GetProfileHandler:
    """Handler for GetProfileQuery."""

    def __init__(self, repository: IUserProfileRepository):
        self._repository = repository

    async def handle(self, query: GetProfileQuery) -> UserProfile:
        """
        Raises:
            ProfileNotFoundError: If the profile does not exist
        """
        profile = await self._repository.find_by_id(query.profile_id)
        if profile is None:
            raise ProfileNotFoundError(query.profile_id)
        return profile
