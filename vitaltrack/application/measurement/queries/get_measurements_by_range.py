"""GetMeasurementsByRangeQuery - glucose and pressure readings of a period."""

from dataclasses import dataclass

from vitaltrack.domain.measurement.core.entities.glucose_measurement import GlucoseMeasurement
from vitaltrack.domain.measurement.core.entities.pressure_measurement import PressureMeasurement
from vitaltrack.domain.measurement.core.ports.repositories import (
    IGlucoseMeasurementRepository,
    IPressureMeasurementRepository,
)
from vitaltrack.domain.shared.time import DateRange


@dataclass(frozen=True)
class GetMeasurementsByRangeQuery:
    user_id: str
    period: DateRange


@dataclass(frozen=True)
class MeasurementsInRange:
    glucose_measurements: list[GlucoseMeasurement]
    pressure_measurements: list[PressureMeasurement]


class GetMeasurementsByRangeHandler:
    """Handler for GetMeasurementsByRangeQuery. Bounds are inclusive."""

    def __init__(
        self,
        glucose_repository: IGlucoseMeasurementRepository,
        pressure_repository: IPressureMeasurementRepository,
    ):
        self._glucose_repository = glucose_repository
        self._pressure_repository = pressure_repository

    async def handle(self, query: GetMeasurementsByRangeQuery) -> MeasurementsInRange:
        start, end = query.period.start, query.period.end
        return MeasurementsInRange(
            glucose_measurements=await self._glucose_repository.find_by_user_and_range(
                query.user_id, start, end
            ),
            pressure_measurements=await self._pressure_repository.find_by_user_and_range(
                query.user_id, start, end
            ),
        )
