"""Value objects for user profile domain."""

from .limits import GlucoseLimits, LimitRange, MeasurementFrequency, PressureLimits

__all__ = [
    "LimitRange",
    "GlucoseLimits",
    "PressureLimits",
    "MeasurementFrequency",
]
