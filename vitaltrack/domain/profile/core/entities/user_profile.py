"""UserProfile entity - aggregate root for personal health settings."""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from vitaltrack.domain.shared.errors import InvalidProfileError
from vitaltrack.domain.shared.time import age_on, utc_now

from ..value_objects.limits import (
    GlucoseLimits,
    LimitRange,
    MeasurementFrequency,
    PressureLimits,
)


@dataclass
class UserProfile:
    """User profile aggregate root.

    Holds the identity, biometrics and the personalized limits used to
    classify every glucose and pressure reading of the user.

    Invariants:
    - name is not blank
    - weight and height are strictly positive
    - birth_date is present
    - every limit range has min < max (enforced by LimitRange)

    State changes go through the update_* methods, which validate the
    new value before touching any field.

    Attributes:
        id: Profile identifier (also the owning user id of measurements)
        name: Display name
        birth_date: Date of birth
        weight: Body weight in kg
        height: Height in cm
        medical_conditions: Free-form condition tags (e.g. "diabetes")
        glucose_limits: Glucose ranges per context
        pressure_limits: Systolic/diastolic ranges
        measurement_frequency: Daily measurement targets
        created_at: Creation timestamp (naive UTC)
        updated_at: Last update timestamp (naive UTC)
    """

    id: str
    name: str
    birth_date: date
    weight: float
    height: float
    glucose_limits: GlucoseLimits
    pressure_limits: PressureLimits
    medical_conditions: list[str] = field(default_factory=list)
    measurement_frequency: MeasurementFrequency = field(default_factory=MeasurementFrequency)
    created_at: datetime = field(default_factory=utc_now)
    updated_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        """Validate profile invariants.

        Raises:
            InvalidProfileError: If any invariant is violated
        """
        self._check_name(self.name)
        self._check_positive("Weight", self.weight)
        self._check_positive("Height", self.height)
        if not self.birth_date:
            raise InvalidProfileError("Birth date is required", code="birth_date_required")
        self.medical_conditions = list(self.medical_conditions)

    @staticmethod
    def _check_name(name: str) -> None:
        if not name or not name.strip():
            raise InvalidProfileError("Name is required", code="name_required")

    @staticmethod
    def _check_positive(label: str, value: float) -> None:
        if value is None or value <= 0:
            raise InvalidProfileError(
                f"{label} must be positive", code=f"{label.lower()}_not_positive"
            )

    def _touch(self) -> None:
        self.updated_at = utc_now()

    # ── biometrics ──────────────────────────────────────────

    def update_name(self, new_name: str) -> None:
        self._check_name(new_name)
        self.name = new_name
        self._touch()

    def update_weight(self, new_weight: float) -> None:
        """Update body weight in kg.

        Raises:
            InvalidProfileError: If weight is not positive
        """
        self._check_positive("Weight", new_weight)
        self.weight = new_weight
        self._touch()

    def update_height(self, new_height: float) -> None:
        """Update height in cm.

        Raises:
            InvalidProfileError: If height is not positive
        """
        self._check_positive("Height", new_height)
        self.height = new_height
        self._touch()

    def update_medical_conditions(self, conditions: list[str]) -> None:
        self.medical_conditions = [c.strip() for c in conditions if c and c.strip()]
        self._touch()

    def has_condition(self, condition: str) -> bool:
        return condition.lower() in (c.lower() for c in self.medical_conditions)

    # ── limits and targets ──────────────────────────────────

    def update_glucose_limits(self, context: str, limits: LimitRange) -> None:
        """Replace the glucose range of one context.

        Args:
            context: "fasting" or "postPrandial"
            limits: New range (already validated by LimitRange)

        Raises:
            InvalidLimitsError: If context is unknown
        """
        self.glucose_limits = self.glucose_limits.with_context(context, limits)
        self._touch()

    def add_custom_glucose_limits(self, limits: LimitRange) -> None:
        self.glucose_limits = self.glucose_limits.with_custom(limits)
        self._touch()

    def update_pressure_limits(
        self,
        systolic: Optional[LimitRange] = None,
        diastolic: Optional[LimitRange] = None,
    ) -> None:
        """Replace one or both pressure ranges."""
        self.pressure_limits = PressureLimits(
            systolic=systolic or self.pressure_limits.systolic,
            diastolic=diastolic or self.pressure_limits.diastolic,
        )
        self._touch()

    def update_measurement_frequency(self, kind: str, frequency: int) -> None:
        """Update the daily target for "glucose" or "pressure".

        Raises:
            InvalidProfileError: If frequency is not positive or kind unknown
        """
        self.measurement_frequency = self.measurement_frequency.with_target(kind, frequency)
        self._touch()

    # ── derived values ──────────────────────────────────────

    def bmi(self) -> float:
        """Calculate Body Mass Index.

        Returns:
            float: BMI = weight (kg) / (height (m))^2

        Example:
            >>> profile.weight, profile.height = 80.0, 180.0
            >>> round(profile.bmi(), 2)
            24.69
        """
        height_m = self.height / 100.0
        return self.weight / (height_m**2)

    def age(self, on: Optional[date] = None) -> int:
        """Age in whole years at a given date (defaults to today)."""
        return age_on(self.birth_date, on)

    def export(self) -> "UserProfileRecord":
        from vitaltrack.domain.shared.records import UserProfileRecord

        return UserProfileRecord.from_entity(self)

    def __str__(self) -> str:
        return f"Profile {self.id} - {self.name}"
