"""In-memory food entry repository."""

from typing import Union

from vitaltrack.domain.nutrition.core.entities.food_entry import FoodEntry
from vitaltrack.domain.nutrition.core.value_objects.food_category import FoodCategory

from .record_store import InMemoryRecordStore


class InMemoryFoodEntryRepository(InMemoryRecordStore[FoodEntry]):
    """In-memory implementation of IFoodEntryRepository."""

    async def find_by_user_and_category(
        self, user_id: str, category: Union[str, FoodCategory]
    ) -> list[FoodEntry]:
        """
        Raises:
            InvalidFoodEntryError: If category is unknown
        """
        wanted = FoodCategory.parse(category)
        return self._select(lambda e: e.user_id == user_id and e.category == wanted)
