"""DeleteProfileCommand."""

from dataclasses import dataclass

import structlog

from vitaltrack.domain.profile.core.ports.repository import IUserProfileRepository
from vitaltrack.domain.shared.errors import ProfileNotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DeleteProfileCommand:
    profile_id: str


class DeleteProfileHandler:
    """Handler for DeleteProfileCommand.

    Measurements and food entries of the user are left untouched.
    """

    def __init__(self, repository: IUserProfileRepository):
        self._repository = repository

    async def handle(self, command: DeleteProfileCommand) -> bool:
        """
        Raises:
            ProfileNotFoundError: If the profile does not exist
        """
        if not await self._repository.delete(command.profile_id):
            raise ProfileNotFoundError(command.profile_id)

        logger.info("Profile deleted", profile_id=command.profile_id)
        return True
