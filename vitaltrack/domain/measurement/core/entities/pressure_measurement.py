"""PressureMeasurement entity."""

from dataclasses import dataclass, field
from datetime import datetime

from vitaltrack.domain.profile.core.value_objects.limits import PressureLimits
from vitaltrack.domain.shared.errors import InvalidMeasurementError
from vitaltrack.domain.shared.time import to_naive_utc, utc_now
from vitaltrack.domain.shared.types import MeasurementStatus

from ..rules.classification import categorize_pressure, determine_pressure_status
from ..value_objects.pressure_category import PressureCategory


@dataclass
class PressureMeasurement:
    """A single blood pressure reading (systolic/diastolic pair).

    Invariants:
    - systolic > 0 and diastolic > 0
    - diastolic <= systolic

    Attributes:
        id: Measurement identifier
        user_id: Owner profile id
        systolic: Systolic pressure in mmHg
        diastolic: Diastolic pressure in mmHg
        status: Classification against the user's pressure limits
        timestamp: When the reading was taken (naive UTC)
    """

    id: str
    user_id: str
    systolic: float
    diastolic: float
    status: MeasurementStatus
    timestamp: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        self._check_pair(self.systolic, self.diastolic)
        self.status = MeasurementStatus(self.status)
        self.timestamp = to_naive_utc(self.timestamp)

    @staticmethod
    def _check_pair(systolic: float, diastolic: float) -> None:
        """Validate a systolic/diastolic pair.

        Raises:
            InvalidMeasurementError: If a component is not positive or
                diastolic exceeds systolic
        """
        if systolic is None or systolic <= 0:
            raise InvalidMeasurementError(
                "Systolic pressure must be positive", code="systolic_not_positive"
            )
        if diastolic is None or diastolic <= 0:
            raise InvalidMeasurementError(
                "Diastolic pressure must be positive", code="diastolic_not_positive"
            )
        if diastolic > systolic:
            raise InvalidMeasurementError(
                "Diastolic pressure cannot be higher than systolic",
                code="diastolic_above_systolic",
            )

    def update_values(self, systolic: float, diastolic: float, limits: PressureLimits) -> None:
        """Replace both components and reclassify.

        The pair is validated before either field is assigned.
        """
        self._check_pair(systolic, diastolic)
        self.systolic = systolic
        self.diastolic = diastolic
        self.status = determine_pressure_status(systolic, diastolic, limits)

    def reclassify(self, limits: PressureLimits) -> None:
        self.status = determine_pressure_status(self.systolic, self.diastolic, limits)

    @property
    def category(self) -> PressureCategory:
        return categorize_pressure(self.systolic, self.diastolic)

    def get_category(self) -> PressureCategory:
        return self.category

    def update_timestamp(self, timestamp: datetime) -> None:
        self.timestamp = to_naive_utc(timestamp)

    def export(self) -> "PressureMeasurementRecord":
        from vitaltrack.domain.shared.records import PressureMeasurementRecord

        return PressureMeasurementRecord.from_entity(self)

    def __str__(self) -> str:
        return f"Pressure {self.systolic}/{self.diastolic} ({self.status.value})"
