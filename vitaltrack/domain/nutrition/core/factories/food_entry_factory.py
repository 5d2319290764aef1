"""FoodEntryFactory - builds food entries."""

from datetime import datetime
from typing import Optional, Union

from vitaltrack.domain.shared.outcome import CreationOutcome, attempt
from vitaltrack.domain.shared.time import utc_now

from ..entities.food_entry import FoodEntry
from ..value_objects.food_category import FoodCategory


class FoodEntryFactory:
    """Factory for FoodEntry entities."""

    @staticmethod
    def create(
        entry_id: str,
        user_id: str,
        description: str,
        quantity: float,
        category: Optional[Union[str, FoodCategory]] = None,
        timestamp: Optional[datetime] = None,
    ) -> FoodEntry:
        """
        Create a food entry, categorizing it from the description if needed.

        Args:
            entry_id: Injected identifier
            user_id: Owner profile id
            description: Free text description
            quantity: Grams
            category: Explicit category (default: derived from description)
            timestamp: Intake time (default: now UTC)

        Raises:
            InvalidFoodEntryError: If quantity is not positive or category unknown

        Example:
            >>> entry = FoodEntryFactory.create("f1", "u1", "Pollo", 150)
            >>> entry.category, entry.calculate_calories()
            (<FoodCategory.PROTEINS: 'proteins'>, 225)
        """
        return FoodEntry(
            id=entry_id,
            user_id=user_id,
            description=description,
            quantity=quantity,
            category=category,
            timestamp=timestamp or utc_now(),
        )

    @staticmethod
    def try_create(**kwargs) -> CreationOutcome[FoodEntry]:
        return attempt(lambda: FoodEntryFactory.create(**kwargs))
