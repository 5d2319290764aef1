"""Value objects for measurement domain."""

from .glucose_context import GlucoseContext
from .pressure_category import PressureCategory

__all__ = [
    "GlucoseContext",
    "PressureCategory",
]
