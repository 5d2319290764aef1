"""Domain services for user profile domain."""

from .default_limits import (
    calculate_default_glucose_limits,
    calculate_default_pressure_limits,
)

__all__ = [
    "calculate_default_glucose_limits",
    "calculate_default_pressure_limits",
]
