"""FoodCategory value object - coarse food grouping."""

from enum import Enum
from typing import Union

from vitaltrack.domain.shared.errors import InvalidFoodEntryError

_CALORIES_PER_GRAM = {
    "carbohydrates": 1.3,
    "proteins": 1.5,
    "vegetables": 0.3,
    "eggs": 1.5,
    "dairy": 1.0,
}

_GLYPHS = {
    "carbohydrates": "🍞",
    "proteins": "🍗",
    "vegetables": "🥦",
    "eggs": "🥚",
    "dairy": "🥛",
}


class FoodCategory(str, Enum):
    """Food category with its calorie density and display glyph.

    Example:
        >>> FoodCategory.PROTEINS.calories_per_gram
        1.5
        >>> FoodCategory.parse("dairy").glyph
        '🥛'
    """

    CARBOHYDRATES = "carbohydrates"
    PROTEINS = "proteins"
    VEGETABLES = "vegetables"
    EGGS = "eggs"
    DAIRY = "dairy"

    @property
    def calories_per_gram(self) -> float:
        return _CALORIES_PER_GRAM[self.value]

    @property
    def glyph(self) -> str:
        return _GLYPHS[self.value]

    @classmethod
    def parse(cls, value: Union[str, "FoodCategory"]) -> "FoodCategory":
        """Parse a category value.

        Raises:
            InvalidFoodEntryError: If value is not a known category
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidFoodEntryError("Invalid food type", code="invalid_food_type") from e
