"""Shared domain building blocks."""

from .errors import (
    DomainError,
    FoodEntryNotFoundError,
    InvalidFoodEntryError,
    InvalidLimitsError,
    InvalidMeasurementError,
    InvalidPeriodError,
    InvalidProfileError,
    MeasurementNotFoundError,
    NotFoundError,
    ProfileNotFoundError,
    ValidationError,
)
from .outcome import Created, CreationOutcome, Rejected, attempt
from .time import DateRange, to_naive_utc, utc_now
from .types import MeasurementKind, MeasurementStatus

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "InvalidProfileError",
    "InvalidLimitsError",
    "InvalidMeasurementError",
    "InvalidFoodEntryError",
    "InvalidPeriodError",
    "ProfileNotFoundError",
    "MeasurementNotFoundError",
    "FoodEntryNotFoundError",
    "Created",
    "Rejected",
    "CreationOutcome",
    "attempt",
    "DateRange",
    "to_naive_utc",
    "utc_now",
    "MeasurementKind",
    "MeasurementStatus",
]
