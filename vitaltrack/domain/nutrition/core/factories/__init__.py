"""Factories for nutrition domain."""

from .food_entry_factory import FoodEntryFactory

__all__ = ["FoodEntryFactory"]
