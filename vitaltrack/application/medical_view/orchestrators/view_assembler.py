"""MedicalViewAssembler - loads a profile and its records for a period."""

import asyncio
from typing import Optional

from vitaltrack.domain.measurement.core.ports.repositories import (
    IGlucoseMeasurementRepository,
    IPressureMeasurementRepository,
)
from vitaltrack.domain.medical_view.core.entities.medical_view import MedicalView
from vitaltrack.domain.nutrition.core.ports.food_entry_repository import IFoodEntryRepository
from vitaltrack.domain.profile.core.entities.user_profile import UserProfile
from vitaltrack.domain.profile.core.ports.repository import IUserProfileRepository
from vitaltrack.domain.shared.errors import ProfileNotFoundError
from vitaltrack.domain.shared.time import DateRange


class MedicalViewAssembler:
    """
    Builds MedicalView aggregates from the repositories.

    Flow:
    1. Load the profile (ProfileNotFoundError if missing)
    2. Fetch glucose, pressure and food records of the period concurrently
    3. Bind them into a MedicalView
    """

    def __init__(
        self,
        profile_repository: IUserProfileRepository,
        glucose_repository: IGlucoseMeasurementRepository,
        pressure_repository: IPressureMeasurementRepository,
        food_repository: IFoodEntryRepository,
    ):
        self._profile_repository = profile_repository
        self._glucose_repository = glucose_repository
        self._pressure_repository = pressure_repository
        self._food_repository = food_repository

    async def load_profile(self, user_id: str) -> UserProfile:
        profile = await self._profile_repository.find_by_id(user_id)
        if profile is None:
            raise ProfileNotFoundError(user_id)
        return profile

    async def assemble(
        self,
        user_id: str,
        period: DateRange,
        view_id: Optional[str] = None,
        profile: Optional[UserProfile] = None,
    ) -> MedicalView:
        """
        Build the view of one period.

        Args:
            user_id: Owner profile id
            period: Inclusive period
            view_id: Optional identifier for the view
            profile: Already loaded profile (skips the lookup)

        Returns:
            MedicalView over the period's records

        Raises:
            ProfileNotFoundError: If the profile does not exist
        """
        if profile is None:
            profile = await self.load_profile(user_id)

        glucose, pressure, food = await asyncio.gather(
            self._glucose_repository.find_by_user_and_range(user_id, period.start, period.end),
            self._pressure_repository.find_by_user_and_range(user_id, period.start, period.end),
            self._food_repository.find_by_user_and_range(user_id, period.start, period.end),
        )
        return MedicalView(
            user_profile=profile,
            glucose_measurements=glucose,
            pressure_measurements=pressure,
            food_entries=food,
            period=period,
            id=view_id,
        )

    async def assemble_with_previous(
        self, user_id: str, period: DateRange
    ) -> tuple[MedicalView, MedicalView]:
        """Views of the period and of the equal-length window ending at its start."""
        profile = await self.load_profile(user_id)
        current = await self.assemble(user_id, period, profile=profile)
        previous = await self.assemble(user_id, period.preceding(), profile=profile)
        return current, previous
