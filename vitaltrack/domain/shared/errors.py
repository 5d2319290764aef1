"""
Domain exceptions.

Every failure the domain can signal derives from DomainError.
Validation errors are caller-input problems and are never retryable.
"""

from __future__ import annotations


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """Base exception for all domain errors."""

    pass


class ValidationError(DomainError):
    """
    Input rejected by an entity or value object invariant.

    Raised before any state change, so the receiver is never left
    partially updated.

    Attributes:
        message: Human readable, stable message
        code: Machine readable error code

    Example:
        >>> raise ValidationError("Quantity must be positive", code="quantity_not_positive")
    """

    default_code = "validation_error"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code


class NotFoundError(DomainError):
    """Base exception for missing records (raised by the application layer)."""

    def __init__(self, kind: str, identifier: str):
        super().__init__(f"{kind} not found: {identifier}")
        self.kind = kind
        self.identifier = identifier


# ═══════════════════════════════════════════════════════════
# VALIDATION ERRORS PER CONTEXT
# ═══════════════════════════════════════════════════════════


class InvalidProfileError(ValidationError):
    """Raised when user profile data validation fails."""

    default_code = "invalid_profile"


class InvalidLimitsError(ValidationError):
    """Raised when a limit range is not strictly increasing."""

    default_code = "invalid_limits"


class InvalidMeasurementError(ValidationError):
    """Raised when glucose or pressure measurement data is invalid."""

    default_code = "invalid_measurement"


class InvalidFoodEntryError(ValidationError):
    """Raised when food entry data is invalid."""

    default_code = "invalid_food_entry"


class InvalidPeriodError(ValidationError):
    """Raised when a date range starts after it ends."""

    default_code = "invalid_period"


# ═══════════════════════════════════════════════════════════
# NOT FOUND ERRORS
# ═══════════════════════════════════════════════════════════


class ProfileNotFoundError(NotFoundError):
    """User profile does not exist."""

    def __init__(self, profile_id: str):
        super().__init__("User profile", profile_id)
        self.profile_id = profile_id


class MeasurementNotFoundError(NotFoundError):
    """Glucose or pressure measurement does not exist."""

    def __init__(self, kind: str, measurement_id: str):
        super().__init__(f"{kind.capitalize()} measurement", measurement_id)
        self.measurement_id = measurement_id


class FoodEntryNotFoundError(NotFoundError):
    """Food entry does not exist."""

    def __init__(self, entry_id: str):
        super().__init__("Food entry", entry_id)
        self.entry_id = entry_id
