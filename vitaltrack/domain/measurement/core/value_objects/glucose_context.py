"""GlucoseContext value object - circumstance of a glucose reading."""

from enum import Enum
from typing import Union

from vitaltrack.domain.shared.errors import InvalidMeasurementError


class GlucoseContext(str, Enum):
    """Circumstance of measurement, selects which limit range applies.

    - FASTING: before eating
    - POST_PRANDIAL: after a meal
    - CUSTOM: user-defined context (custom range or fasting fallback)
    """

    FASTING = "fasting"
    POST_PRANDIAL = "postPrandial"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, value: Union[str, "GlucoseContext"]) -> "GlucoseContext":
        """Parse a context value.

        Raises:
            InvalidMeasurementError: If value is not a known context
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidMeasurementError(
                "Invalid context value", code="invalid_context"
            ) from e
