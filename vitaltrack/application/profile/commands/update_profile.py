"""UpdateProfileCommand - apply explicit field updates to a profile."""

from copy import deepcopy
from dataclasses import dataclass
from typing import Optional

import structlog

from vitaltrack.domain.profile.core.entities.user_profile import UserProfile
from vitaltrack.domain.profile.core.ports.repository import IUserProfileRepository
from vitaltrack.domain.profile.core.value_objects.limits import LimitRange
from vitaltrack.domain.shared.errors import ProfileNotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class UpdateProfileCommand:
    """Command to update a user profile.

    Every field left as None is kept unchanged.

    Attributes:
        profile_id: Profile to update
        name: New display name
        weight: New weight in kg
        height: New height in cm
        medical_conditions: Replacement list of condition tags
        fasting_limits: New fasting glucose range
        post_prandial_limits: New post-meal glucose range
        systolic_limits: New systolic range
        diastolic_limits: New diastolic range
        glucose_frequency: New daily glucose target
        pressure_frequency: New daily pressure target
    """

    profile_id: str
    name: Optional[str] = None
    weight: Optional[float] = None
    height: Optional[float] = None
    medical_conditions: Optional[tuple[str, ...]] = None
    fasting_limits: Optional[LimitRange] = None
    post_prandial_limits: Optional[LimitRange] = None
    systolic_limits: Optional[LimitRange] = None
    diastolic_limits: Optional[LimitRange] = None
    glucose_frequency: Optional[int] = None
    pressure_frequency: Optional[int] = None


class UpdateProfileHandler:
    """Handler for UpdateProfileCommand.

    Updates are applied to a working copy of the stored profile; the copy
    is saved only if every update passed validation.
    """

    def __init__(self, repository: IUserProfileRepository):
        self._repository = repository

    async def handle(self, command: UpdateProfileCommand) -> UserProfile:
        """
        Apply the requested updates.

        Raises:
            ProfileNotFoundError: If the profile does not exist
            InvalidProfileError: If a biometric or frequency is invalid
        """
        stored = await self._repository.find_by_id(command.profile_id)
        if stored is None:
            raise ProfileNotFoundError(command.profile_id)

        profile = deepcopy(stored)
        updated_fields = self._apply(profile, command)

        await self._repository.save(profile)

        logger.info(
            "Profile updated",
            profile_id=profile.id,
            updated_fields=updated_fields,
        )
        return profile

    @staticmethod
    def _apply(profile: UserProfile, command: UpdateProfileCommand) -> list[str]:
        updated: list[str] = []
        if command.name is not None:
            profile.update_name(command.name)
            updated.append("name")
        if command.weight is not None:
            profile.update_weight(command.weight)
            updated.append("weight")
        if command.height is not None:
            profile.update_height(command.height)
            updated.append("height")
        if command.medical_conditions is not None:
            profile.update_medical_conditions(list(command.medical_conditions))
            updated.append("medical_conditions")
        if command.fasting_limits is not None:
            profile.update_glucose_limits("fasting", command.fasting_limits)
            updated.append("fasting_limits")
        if command.post_prandial_limits is not None:
            profile.update_glucose_limits("postPrandial", command.post_prandial_limits)
            updated.append("post_prandial_limits")
        if command.systolic_limits is not None or command.diastolic_limits is not None:
            profile.update_pressure_limits(
                systolic=command.systolic_limits, diastolic=command.diastolic_limits
            )
            updated.append("pressure_limits")
        if command.glucose_frequency is not None:
            profile.update_measurement_frequency("glucose", command.glucose_frequency)
            updated.append("glucose_frequency")
        if command.pressure_frequency is not None:
            profile.update_measurement_frequency("pressure", command.pressure_frequency)
            updated.append("pressure_frequency")
        return updated
