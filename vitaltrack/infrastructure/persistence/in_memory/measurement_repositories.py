"""In-memory glucose and pressure measurement repositories."""

from vitaltrack.domain.measurement.core.entities.glucose_measurement import GlucoseMeasurement
from vitaltrack.domain.measurement.core.entities.pressure_measurement import PressureMeasurement

from .record_store import InMemoryRecordStore


class InMemoryGlucoseMeasurementRepository(InMemoryRecordStore[GlucoseMeasurement]):
    """
    In-memory implementation of IGlucoseMeasurementRepository.

    Example:
        >>> repository = InMemoryGlucoseMeasurementRepository()
        >>> await repository.save(measurement)
        >>> await repository.find_by_user_and_range("u1", start, end)
    """


class InMemoryPressureMeasurementRepository(InMemoryRecordStore[PressureMeasurement]):
    """In-memory implementation of IPressureMeasurementRepository."""
