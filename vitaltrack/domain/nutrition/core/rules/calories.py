"""Calorie estimate from quantity and category."""

import math

from ..value_objects.food_category import FoodCategory


def estimate_calories(quantity_grams: float, category: FoodCategory) -> int:
    """Estimate calories as quantity x category density, rounded half up.

    Example:
        >>> estimate_calories(100, FoodCategory.CARBOHYDRATES)
        130
        >>> estimate_calories(150, FoodCategory.PROTEINS)
        225
    """
    # builtin round() is half-to-even
    return int(math.floor(quantity_grams * category.calories_per_gram + 0.5))
