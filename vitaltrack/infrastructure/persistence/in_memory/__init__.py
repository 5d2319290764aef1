"""In-memory repository adapters."""

from .food_entry_repository import InMemoryFoodEntryRepository
from .measurement_repositories import (
    InMemoryGlucoseMeasurementRepository,
    InMemoryPressureMeasurementRepository,
)
from .profile_repository import InMemoryUserProfileRepository

__all__ = [
    "InMemoryUserProfileRepository",
    "InMemoryGlucoseMeasurementRepository",
    "InMemoryPressureMeasurementRepository",
    "InMemoryFoodEntryRepository",
]
