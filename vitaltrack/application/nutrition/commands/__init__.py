"""Commands for food entries."""

from .delete_food_entry import DeleteFoodEntryCommand, DeleteFoodEntryHandler
from .log_food_entry import LogFoodEntryCommand, LogFoodEntryHandler
from .update_food_entry import UpdateFoodEntryCommand, UpdateFoodEntryHandler

__all__ = [
    "LogFoodEntryCommand",
    "LogFoodEntryHandler",
    "UpdateFoodEntryCommand",
    "UpdateFoodEntryHandler",
    "DeleteFoodEntryCommand",
    "DeleteFoodEntryHandler",
]
