"""In-memory implementation of IUserProfileRepository."""

from copy import deepcopy
from typing import Optional

from vitaltrack.domain.profile.core.entities.user_profile import UserProfile
from vitaltrack.domain.profile.core.ports.repository import IUserProfileRepository


class InMemoryUserProfileRepository(IUserProfileRepository):
    """
    Dictionary-backed profile repository.

    Profiles are deep-copied on save and on read, so callers never share
    state with the store. Not thread-safe; data is lost on restart.
    """

    def __init__(self) -> None:
        self._profiles: dict[str, UserProfile] = {}

    async def save(self, profile: UserProfile) -> None:
        self._profiles[profile.id] = deepcopy(profile)

    async def find_by_id(self, profile_id: str) -> Optional[UserProfile]:
        """
        Returns:
            Deep copy of profile if found, None otherwise
        """
        profile = self._profiles.get(profile_id)
        return deepcopy(profile) if profile else None

    async def find_all(self) -> list[UserProfile]:
        return [deepcopy(p) for p in self._profiles.values()]

    async def delete(self, profile_id: str) -> bool:
        return self._profiles.pop(profile_id, None) is not None

    def clear(self) -> None:
        """Remove all profiles (test helper)."""
        self._profiles.clear()

    def count(self) -> int:
        return len(self._profiles)
