"""FoodEntry entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Union

from vitaltrack.domain.shared.errors import InvalidFoodEntryError
from vitaltrack.domain.shared.time import to_naive_utc, utc_now

from ..rules.calories import estimate_calories
from ..rules.categorization import categorize_food
from ..value_objects.food_category import FoodCategory


@dataclass
class FoodEntry:
    """A logged food intake.

    When no category is given it is derived from the description. The
    glyph always follows the category unless one is passed explicitly
    at construction.

    Attributes:
        id: Entry identifier
        user_id: Owner profile id
        description: Free text (e.g. "Pan integral")
        quantity: Grams (> 0)
        category: Food category
        glyph: Display glyph
        timestamp: Intake time (naive UTC)
    """

    id: str
    user_id: str
    description: str
    quantity: float
    category: Optional[FoodCategory] = None
    glyph: Optional[str] = None
    timestamp: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        """Validate and fill derived fields.

        Raises:
            InvalidFoodEntryError: If quantity is not positive or category unknown
        """
        self._check_quantity(self.quantity)
        if self.category:
            self.category = FoodCategory.parse(self.category)
        else:
            self.category = categorize_food(self.description)
        if not self.glyph:
            self.glyph = self.category.glyph
        self.timestamp = to_naive_utc(self.timestamp)

    @staticmethod
    def _check_quantity(quantity: float) -> None:
        if quantity is None or quantity <= 0:
            raise InvalidFoodEntryError("Quantity must be positive", code="quantity_not_positive")

    def update_category(self, new_category: Union[str, FoodCategory]) -> None:
        """Set the category and its glyph together.

        Raises:
            InvalidFoodEntryError: If new_category is unknown
        """
        category = FoodCategory.parse(new_category)
        self.category = category
        self.glyph = category.glyph

    def update_description(self, new_description: str, recategorize: bool = False) -> None:
        """Set the description, optionally re-deriving category and glyph from it."""
        self.description = new_description
        if recategorize:
            self.update_category(categorize_food(new_description))

    def update_quantity(self, new_quantity: float) -> None:
        self._check_quantity(new_quantity)
        self.quantity = new_quantity

    def update_timestamp(self, timestamp: datetime) -> None:
        self.timestamp = to_naive_utc(timestamp)

    def calculate_calories(self) -> int:
        return estimate_calories(self.quantity, self.category)

    def export(self) -> "FoodEntryRecord":
        from vitaltrack.domain.shared.records import FoodEntryRecord

        return FoodEntryRecord.from_entity(self)

    def __str__(self) -> str:
        return f"{self.glyph} {self.description} ({self.quantity}g)"
