"""CreateProfileCommand - register a profile with default limits."""

from dataclasses import dataclass
from datetime import date
from typing import Optional

import structlog

from vitaltrack.application.shared.id_generator import IdGenerator
from vitaltrack.domain.profile.core.entities.user_profile import UserProfile
from vitaltrack.domain.profile.core.factories.profile_factory import UserProfileFactory
from vitaltrack.domain.profile.core.ports.repository import IUserProfileRepository

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CreateProfileCommand:
    """Command to create a user profile.

    Glucose and pressure limits are derived from age, weight and height;
    measurement frequency defaults to 3 glucose and 2 pressure readings
    per day.

    Attributes:
        name: Display name
        birth_date: Date of birth
        weight: Weight in kg
        height: Height in cm
        medical_conditions: Condition tags (e.g. "diabetes")
        today: Reference date for the age computation (default: today)
    """

    name: str
    birth_date: date
    weight: float
    height: float
    medical_conditions: tuple[str, ...] = ()
    today: Optional[date] = None


class CreateProfileHandler:
    """Handler for CreateProfileCommand."""

    def __init__(self, repository: IUserProfileRepository, id_generator: IdGenerator):
        self._repository = repository
        self._id_generator = id_generator

    async def handle(self, command: CreateProfileCommand) -> UserProfile:
        """
        Create and persist the profile.

        Returns:
            UserProfile: The saved profile

        Raises:
            InvalidProfileError: If name, weight, height or birth date is invalid
        """
        profile = UserProfileFactory.create_with_defaults(
            profile_id=self._id_generator.new_id(),
            name=command.name,
            birth_date=command.birth_date,
            weight=command.weight,
            height=command.height,
            medical_conditions=list(command.medical_conditions),
            today=command.today,
        )

        await self._repository.save(profile)

        logger.info(
            "Profile created",
            profile_id=profile.id,
            conditions=len(profile.medical_conditions),
        )
        return profile
