"""Measurement repository ports (interfaces).

The domain defines the contract; infrastructure provides the adapters.
Range queries are inclusive on both ends and return readings ordered by
timestamp ascending.
"""

from datetime import datetime
from typing import Optional, Protocol

from ..entities.glucose_measurement import GlucoseMeasurement
from ..entities.pressure_measurement import PressureMeasurement


class IGlucoseMeasurementRepository(Protocol):
    """
    Interface for glucose measurement persistence.

    Example usage (application layer):
        >>> class RecordGlucoseCommandHandler:
        ...     def __init__(self, repository: IGlucoseMeasurementRepository):
        ...         self._repository = repository
        ...
        ...     async def handle(self, command):
        ...         measurement = MeasurementFactory.create_glucose(...)
        ...         await self._repository.save(measurement)
        ...         return measurement
    """

    async def save(self, measurement: GlucoseMeasurement) -> None:
        """Save or update a measurement."""
        ...

    async def find_by_id(self, measurement_id: str) -> Optional[GlucoseMeasurement]:
        ...

    async def find_by_user(self, user_id: str) -> list[GlucoseMeasurement]:
        ...

    async def find_by_user_and_range(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[GlucoseMeasurement]:
        """
        Get a user's readings inside [start, end].

        Args:
            user_id: Owner profile id
            start: Start of range (inclusive)
            end: End of range (inclusive)

        Returns:
            Readings ordered by timestamp ascending
        """
        ...

    async def delete(self, measurement_id: str) -> bool:
        ...


class IPressureMeasurementRepository(Protocol):
    """Interface for blood pressure measurement persistence."""

    async def save(self, measurement: PressureMeasurement) -> None:
        ...

    async def find_by_id(self, measurement_id: str) -> Optional[PressureMeasurement]:
        ...

    async def find_by_user(self, user_id: str) -> list[PressureMeasurement]:
        ...

    async def find_by_user_and_range(
        self, user_id: str, start: datetime, end: datetime
    ) -> list[PressureMeasurement]:
        ...

    async def delete(self, measurement_id: str) -> bool:
        ...
