"""Ports for measurement domain."""

from .repositories import IGlucoseMeasurementRepository, IPressureMeasurementRepository

__all__ = ["IGlucoseMeasurementRepository", "IPressureMeasurementRepository"]
