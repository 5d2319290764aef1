"""MeasurementFactory - builds classified glucose and pressure readings."""

from datetime import datetime
from typing import Optional, Union

from vitaltrack.domain.profile.core.entities.user_profile import UserProfile
from vitaltrack.domain.shared.outcome import CreationOutcome, attempt
from vitaltrack.domain.shared.time import utc_now

from ..entities.glucose_measurement import GlucoseMeasurement
from ..entities.pressure_measurement import PressureMeasurement
from ..rules.classification import determine_glucose_status, determine_pressure_status
from ..value_objects.glucose_context import GlucoseContext


class MeasurementFactory:
    """Factory for measurement entities.

    Status is computed from the owner profile's limits at creation time.
    The factory does not check that profile.id matches user_id.
    """

    @staticmethod
    def create_glucose(
        measurement_id: str,
        user_id: str,
        value: float,
        context: Union[str, GlucoseContext],
        profile: UserProfile,
        timestamp: Optional[datetime] = None,
    ) -> GlucoseMeasurement:
        """
        Create a glucose reading classified against its context range.

        Args:
            measurement_id: Injected identifier
            user_id: Owner profile id
            value: Glucose in mg/dL
            context: fasting, postPrandial or custom
            profile: Profile whose limits classify the reading
            timestamp: Reading time (default: now UTC)

        Returns:
            GlucoseMeasurement with computed status

        Raises:
            InvalidMeasurementError: If value is not positive or context unknown

        Example:
            >>> m = MeasurementFactory.create_glucose("g1", "u1", 95, "fasting", profile)
            >>> m.status
            <MeasurementStatus.NORMAL: 'normal'>
        """
        GlucoseMeasurement._check_value(value)
        parsed = GlucoseContext.parse(context)
        limits = profile.glucose_limits.for_context(parsed)
        return GlucoseMeasurement(
            id=measurement_id,
            user_id=user_id,
            value=value,
            context=parsed,
            status=determine_glucose_status(value, limits),
            timestamp=timestamp or utc_now(),
        )

    @staticmethod
    def create_pressure(
        measurement_id: str,
        user_id: str,
        systolic: float,
        diastolic: float,
        profile: UserProfile,
        timestamp: Optional[datetime] = None,
    ) -> PressureMeasurement:
        """Create a pressure reading classified against the profile's pressure limits.

        Raises:
            InvalidMeasurementError: If the pair is invalid
        """
        PressureMeasurement._check_pair(systolic, diastolic)
        return PressureMeasurement(
            id=measurement_id,
            user_id=user_id,
            systolic=systolic,
            diastolic=diastolic,
            status=determine_pressure_status(systolic, diastolic, profile.pressure_limits),
            timestamp=timestamp or utc_now(),
        )

    @staticmethod
    def try_create_glucose(**kwargs) -> CreationOutcome[GlucoseMeasurement]:
        return attempt(lambda: MeasurementFactory.create_glucose(**kwargs))

    @staticmethod
    def try_create_pressure(**kwargs) -> CreationOutcome[PressureMeasurement]:
        return attempt(lambda: MeasurementFactory.create_pressure(**kwargs))
