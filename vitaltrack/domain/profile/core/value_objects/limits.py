"""Personalized limit ranges used to classify measurements."""

from dataclasses import dataclass, field
from typing import Any

from vitaltrack.domain.shared.errors import InvalidLimitsError, InvalidProfileError


@dataclass(frozen=True)
class LimitRange:
    """Closed interval [min, max] of acceptable values.

    Attributes:
        min: Lower bound (inclusive)
        max: Upper bound (inclusive), strictly greater than min
    """

    min: float
    max: float

    def __post_init__(self) -> None:
        """Validate ordering.

        Raises:
            InvalidLimitsError: If min is not strictly below max
        """
        if self.min >= self.max:
            raise InvalidLimitsError(
                "Min value must be less than max value", code="min_not_below_max"
            )

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def to_dict(self) -> dict[str, float]:
        return {"min": self.min, "max": self.max}


@dataclass(frozen=True)
class GlucoseLimits:
    """Glucose ranges per measurement context.

    Attributes:
        fasting: Range for fasting readings
        post_prandial: Range for post-meal readings
        custom: Extra ranges for custom contexts (may be empty)
    """

    fasting: LimitRange
    post_prandial: LimitRange
    custom: tuple[LimitRange, ...] = field(default_factory=tuple)

    def for_context(self, context: Any) -> LimitRange:
        """Select the range matching a glucose context.

        Falls back to the fasting range when the context has no
        specific range (custom context without custom ranges).

        Args:
            context: GlucoseContext or its string value

        Returns:
            LimitRange: Range used for classification
        """
        key = getattr(context, "value", context)
        if key == "postPrandial":
            return self.post_prandial
        if key == "custom" and self.custom:
            return self.custom[0]
        return self.fasting

    def with_context(self, context: str, limits: LimitRange) -> "GlucoseLimits":
        """Return a copy with one context range replaced.

        Raises:
            InvalidLimitsError: If context is not fasting or postPrandial
        """
        if context == "fasting":
            return GlucoseLimits(fasting=limits, post_prandial=self.post_prandial, custom=self.custom)
        if context == "postPrandial":
            return GlucoseLimits(fasting=self.fasting, post_prandial=limits, custom=self.custom)
        raise InvalidLimitsError(
            f"Unknown glucose limit context: {context}", code="unknown_limit_context"
        )

    def with_custom(self, limits: LimitRange) -> "GlucoseLimits":
        return GlucoseLimits(
            fasting=self.fasting,
            post_prandial=self.post_prandial,
            custom=self.custom + (limits,),
        )


@dataclass(frozen=True)
class PressureLimits:
    """Blood pressure ranges for systolic and diastolic components."""

    systolic: LimitRange
    diastolic: LimitRange


@dataclass(frozen=True)
class MeasurementFrequency:
    """Daily measurement targets.

    Attributes:
        glucose: Glucose readings per day
        pressure: Pressure readings per day
    """

    glucose: int = 3
    pressure: int = 2

    def __post_init__(self) -> None:
        if self.glucose <= 0 or self.pressure <= 0:
            raise InvalidProfileError("Frequency must be positive", code="frequency_not_positive")

    def with_target(self, kind: str, frequency: int) -> "MeasurementFrequency":
        """Return a copy with one target replaced.

        Args:
            kind: "glucose" or "pressure"
            frequency: New daily target (> 0)
        """
        if kind == "glucose":
            return MeasurementFrequency(glucose=frequency, pressure=self.pressure)
        if kind == "pressure":
            return MeasurementFrequency(glucose=self.glucose, pressure=frequency)
        raise InvalidProfileError(
            f"Unknown measurement kind: {kind}", code="unknown_measurement_kind"
        )
