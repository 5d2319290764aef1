"""LogFoodEntryCommand - record a food intake."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import structlog

from vitaltrack.application.shared.id_generator import IdGenerator
from vitaltrack.domain.nutrition.core.entities.food_entry import FoodEntry
from vitaltrack.domain.nutrition.core.factories.food_entry_factory import FoodEntryFactory
from vitaltrack.domain.nutrition.core.ports.food_entry_repository import IFoodEntryRepository
from vitaltrack.domain.profile.core.ports.repository import IUserProfileRepository
from vitaltrack.domain.shared.errors import ProfileNotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class LogFoodEntryCommand:
    """Command to log a food entry.

    Attributes:
        user_id: Owner profile id
        description: Free text (e.g. "Pollo a la plancha")
        quantity: Grams
        category: Explicit category; derived from description when None
        timestamp: Intake time (default: now UTC)
    """

    user_id: str
    description: str
    quantity: float
    category: Optional[str] = None
    timestamp: Optional[datetime] = None


class LogFoodEntryHandler:
    """Handler for LogFoodEntryCommand."""

    def __init__(
        self,
        repository: IFoodEntryRepository,
        profile_repository: IUserProfileRepository,
        id_generator: IdGenerator,
    ):
        self._repository = repository
        self._profile_repository = profile_repository
        self._id_generator = id_generator

    async def handle(self, command: LogFoodEntryCommand) -> FoodEntry:
        """
        Build, check the owner exists, then persist.

        Input is validated before the profile lookup, so an invalid
        quantity is reported even for an unknown user.

        Raises:
            InvalidFoodEntryError: If quantity or category is invalid
            ProfileNotFoundError: If the profile does not exist
        """
        entry = FoodEntryFactory.create(
            entry_id=self._id_generator.new_id(),
            user_id=command.user_id,
            description=command.description,
            quantity=command.quantity,
            category=command.category,
            timestamp=command.timestamp,
        )

        if await self._profile_repository.find_by_id(command.user_id) is None:
            raise ProfileNotFoundError(command.user_id)

        await self._repository.save(entry)

        logger.info(
            "Food entry logged",
            entry_id=entry.id,
            user_id=entry.user_id,
            category=entry.category.value,
            calories=entry.calculate_calories(),
        )
        return entry
