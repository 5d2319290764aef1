"""Entities for measurement domain."""

from .glucose_measurement import GlucoseMeasurement
from .pressure_measurement import PressureMeasurement

__all__ = ["GlucoseMeasurement", "PressureMeasurement"]
