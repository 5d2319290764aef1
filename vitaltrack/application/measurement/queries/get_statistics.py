"""GetMeasurementStatisticsQuery - status counts and averages of a user's readings."""

from dataclasses import dataclass
from typing import Optional, Union

from vitaltrack.domain.measurement.core.ports.repositories import (
    IGlucoseMeasurementRepository,
    IPressureMeasurementRepository,
)
from vitaltrack.domain.medical_view.core.aggregation import average
from vitaltrack.domain.shared.time import DateRange
from vitaltrack.domain.shared.types import MeasurementKind, MeasurementStatus


@dataclass(frozen=True)
class GetMeasurementStatisticsQuery:
    """
    Attributes:
        user_id: Owner profile id
        kind: Glucose or pressure
        period: Restrict to a period (default: all readings)
    """

    user_id: str
    kind: Union[MeasurementKind, str]
    period: Optional[DateRange] = None


@dataclass(frozen=True)
class MeasurementStatistics:
    """Statistics for one measurement kind.

    average_value is set for glucose; average_systolic and
    average_diastolic for pressure. Averages are 0 without readings.
    """

    kind: MeasurementKind
    total_measurements: int
    normal_count: int
    warning_count: int
    critical_count: int
    average_value: Optional[float] = None
    average_systolic: Optional[float] = None
    average_diastolic: Optional[float] = None


class GetMeasurementStatisticsHandler:
    """Handler for GetMeasurementStatisticsQuery."""

    def __init__(
        self,
        glucose_repository: IGlucoseMeasurementRepository,
        pressure_repository: IPressureMeasurementRepository,
    ):
        self._glucose_repository = glucose_repository
        self._pressure_repository = pressure_repository

    async def handle(self, query: GetMeasurementStatisticsQuery) -> MeasurementStatistics:
        kind = MeasurementKind.parse(query.kind)
        repository = (
            self._glucose_repository
            if kind == MeasurementKind.GLUCOSE
            else self._pressure_repository
        )
        if query.period is None:
            readings = await repository.find_by_user(query.user_id)
        else:
            readings = await repository.find_by_user_and_range(
                query.user_id, query.period.start, query.period.end
            )

        statuses = [m.status for m in readings]
        counts = dict(
            kind=kind,
            total_measurements=len(readings),
            normal_count=statuses.count(MeasurementStatus.NORMAL),
            warning_count=statuses.count(MeasurementStatus.WARNING),
            critical_count=statuses.count(MeasurementStatus.CRITICAL),
        )
        if kind == MeasurementKind.GLUCOSE:
            return MeasurementStatistics(
                **counts, average_value=average([m.value for m in readings])
            )
        return MeasurementStatistics(
            **counts,
            average_systolic=average([m.systolic for m in readings]),
            average_diastolic=average([m.diastolic for m in readings]),
        )
