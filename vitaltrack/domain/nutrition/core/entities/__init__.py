"""Entities for nutrition domain."""

from .food_entry import FoodEntry

__all__ = ["FoodEntry"]
