"""UserProfileFactory - factory for creating profiles."""

from datetime import date
from typing import Optional

from vitaltrack.domain.shared.errors import InvalidProfileError
from vitaltrack.domain.shared.outcome import CreationOutcome, attempt
from vitaltrack.domain.shared.time import age_on

from ..entities.user_profile import UserProfile
from ..services.default_limits import (
    calculate_default_glucose_limits,
    calculate_default_pressure_limits,
)
from ..value_objects.limits import GlucoseLimits, MeasurementFrequency, PressureLimits


class UserProfileFactory:
    """Factory for creating UserProfile entities.

    Identifiers are supplied by the caller; the factory never generates them.
    """

    @staticmethod
    def create(
        profile_id: str,
        name: str,
        birth_date: date,
        weight: float,
        height: float,
        glucose_limits: GlucoseLimits,
        pressure_limits: PressureLimits,
        medical_conditions: Optional[list[str]] = None,
        measurement_frequency: Optional[MeasurementFrequency] = None,
    ) -> UserProfile:
        """Create a profile with explicit limits.

        Raises:
            InvalidProfileError: If any profile invariant fails
        """
        return UserProfile(
            id=profile_id,
            name=name,
            birth_date=birth_date,
            weight=weight,
            height=height,
            glucose_limits=glucose_limits,
            pressure_limits=pressure_limits,
            medical_conditions=list(medical_conditions or []),
            measurement_frequency=measurement_frequency or MeasurementFrequency(),
        )

    @staticmethod
    def create_with_defaults(
        profile_id: str,
        name: str,
        birth_date: date,
        weight: float,
        height: float,
        medical_conditions: Optional[list[str]] = None,
        today: Optional[date] = None,
    ) -> UserProfile:
        """Create a profile whose limits derive from age, weight and height.

        Biometrics are checked before the defaults are computed so a bad
        height surfaces as a profile error, not a division error.

        Args:
            profile_id: Injected identifier
            name: Display name
            birth_date: Date of birth
            weight: Weight in kg
            height: Height in cm
            medical_conditions: Optional condition tags
            today: Reference date for the age computation

        Returns:
            UserProfile: New profile with default limits and frequency

        Raises:
            InvalidProfileError: If any profile invariant fails
        """
        if not birth_date:
            raise InvalidProfileError("Birth date is required", code="birth_date_required")
        UserProfile._check_name(name)
        UserProfile._check_positive("Weight", weight)
        UserProfile._check_positive("Height", height)

        age = age_on(birth_date, today)

        return UserProfileFactory.create(
            profile_id=profile_id,
            name=name,
            birth_date=birth_date,
            weight=weight,
            height=height,
            glucose_limits=calculate_default_glucose_limits(age, weight, height),
            pressure_limits=calculate_default_pressure_limits(age, weight, height),
            medical_conditions=medical_conditions,
        )

    @staticmethod
    def try_create(**kwargs) -> CreationOutcome[UserProfile]:
        """Tagged variant of create(); never raises on validation failure."""
        return attempt(lambda: UserProfileFactory.create(**kwargs))

    @staticmethod
    def try_create_with_defaults(**kwargs) -> CreationOutcome[UserProfile]:
        """Tagged variant of create_with_defaults()."""
        return attempt(lambda: UserProfileFactory.create_with_defaults(**kwargs))
