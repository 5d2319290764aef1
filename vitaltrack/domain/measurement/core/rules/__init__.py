"""Classification rules for glucose and pressure readings."""

from .classification import (
    categorize_pressure,
    determine_glucose_status,
    determine_pressure_status,
)

__all__ = [
    "categorize_pressure",
    "determine_glucose_status",
    "determine_pressure_status",
]
