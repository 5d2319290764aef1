"""Value objects for nutrition domain."""

from .food_category import FoodCategory

__all__ = ["FoodCategory"]
