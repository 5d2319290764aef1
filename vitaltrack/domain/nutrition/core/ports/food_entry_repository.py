"""Food entry repository port (interface)."""

from datetime import datetime
from typing import Optional, Protocol

from ..entities.food_entry import FoodEntry
from ..value_objects.food_category import FoodCategory


class IFoodEntryRepository(Protocol):
    """
    Interface for food entry persistence.

    Range queries are inclusive on both ends and ordered by timestamp
    ascending.
    """

    async def save(self, entry: FoodEntry) -> None:
        ...

    async def find_by_id(self, entry_id: str) -> Optional[FoodEntry]:
        ...

    async def find_by_user(self, user_id: str) -> list[FoodEntry]:
        ...

    async def find_by_user_and_range(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[FoodEntry]:
        ...

    async def find_by_user_and_category(
        self, user_id: str, category: FoodCategory
    ) -> list[FoodEntry]:
        """Get a user's entries of one category."""
        ...

    async def delete(self, entry_id: str) -> bool:
        ...
