"""Factories for measurement domain."""

from .measurement_factory import MeasurementFactory

__all__ = ["MeasurementFactory"]
