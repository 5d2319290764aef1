"""Ports for nutrition domain."""

from .food_entry_repository import IFoodEntryRepository

__all__ = ["IFoodEntryRepository"]
