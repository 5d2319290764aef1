"""IUserProfileRepository port - repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from ..entities.user_profile import UserProfile


class IUserProfileRepository(ABC):
    """Port for user profile persistence.

    Infrastructure adapters implement it; application handlers depend on
    this abstraction only.
    """

    @abstractmethod
    async def save(self, profile: UserProfile) -> None:
        """Save profile (create or update).

        Args:
            profile: Profile to save
        """
        pass

    @abstractmethod
    async def find_by_id(self, profile_id: str) -> Optional[UserProfile]:
        """Find profile by ID.

        Args:
            profile_id: Profile identifier

        Returns:
            Optional[UserProfile]: Profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> list[UserProfile]:
        pass

    @abstractmethod
    async def delete(self, profile_id: str) -> bool:
        """Delete profile.

        Returns:
            bool: True if a profile was removed
        """
        pass
