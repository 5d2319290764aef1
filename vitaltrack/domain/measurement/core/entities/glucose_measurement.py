"""GlucoseMeasurement entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Union

from vitaltrack.domain.profile.core.value_objects.limits import LimitRange
from vitaltrack.domain.shared.errors import InvalidMeasurementError
from vitaltrack.domain.shared.time import to_naive_utc, utc_now
from vitaltrack.domain.shared.types import MeasurementStatus

from ..rules.classification import determine_glucose_status
from ..value_objects.glucose_context import GlucoseContext


@dataclass
class GlucoseMeasurement:
    """A single blood glucose reading.

    Status is stored, not derived on read: it reflects the limits that
    were in force when the reading was recorded or last reclassified.

    Attributes:
        id: Measurement identifier
        user_id: Owner profile id
        value: Glucose in mg/dL (> 0)
        context: Circumstance of the reading
        status: Classification against the context limits
        timestamp: When the reading was taken (naive UTC)
    """

    id: str
    user_id: str
    value: float
    context: GlucoseContext
    status: MeasurementStatus
    timestamp: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        """Validate and normalize fields.

        Raises:
            InvalidMeasurementError: If value is not positive or context unknown
        """
        self._check_value(self.value)
        self.context = GlucoseContext.parse(self.context)
        self.status = MeasurementStatus(self.status)
        self.timestamp = to_naive_utc(self.timestamp)

    @staticmethod
    def _check_value(value: float) -> None:
        if value is None or value <= 0:
            raise InvalidMeasurementError(
                "Glucose value must be positive", code="glucose_not_positive"
            )

    def update_value(self, new_value: float, limits: LimitRange) -> None:
        """Set a corrected value and reclassify it.

        Args:
            new_value: Corrected glucose value
            limits: Range for the current context

        Raises:
            InvalidMeasurementError: If new_value is not positive
        """
        self._check_value(new_value)
        self.value = new_value
        self.status = determine_glucose_status(new_value, limits)

    def update_context(
        self, new_context: Union[str, GlucoseContext], limits: LimitRange
    ) -> None:
        """Move the reading to another context and classify it against that context's range."""
        context = GlucoseContext.parse(new_context)
        self.context = context
        self.status = determine_glucose_status(self.value, limits)

    def reclassify(self, limits: LimitRange) -> None:
        self.status = determine_glucose_status(self.value, limits)

    def update_timestamp(self, timestamp: datetime) -> None:
        self.timestamp = to_naive_utc(timestamp)

    def export(self) -> "GlucoseMeasurementRecord":
        from vitaltrack.domain.shared.records import GlucoseMeasurementRecord

        return GlucoseMeasurementRecord.from_entity(self)

    def __str__(self) -> str:
        return f"Glucose {self.value} ({self.context.value}, {self.status.value})"
