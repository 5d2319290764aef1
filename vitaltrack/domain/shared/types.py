"""Shared domain types used across multiple domains."""

from enum import Enum
from typing import Union

from .errors import ValidationError


class MeasurementStatus(str, Enum):
    """Three-level clinical flag derived from personalized limits."""

    NORMAL = "normal"
    WARNING = "warning"
    CRITICAL = "critical"


class MeasurementKind(str, Enum):
    """Measurement families tracked for a user."""

    GLUCOSE = "glucose"
    PRESSURE = "pressure"

    @classmethod
    def parse(cls, value: Union[str, "MeasurementKind"]) -> "MeasurementKind":
        """Parse a kind value.

        Raises:
            ValidationError: If value is not a known measurement kind
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise ValidationError(
                f"Unknown measurement kind: {value}", code="unknown_measurement_kind"
            ) from e
