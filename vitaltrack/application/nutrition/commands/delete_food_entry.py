"""DeleteFoodEntryCommand."""

from dataclasses import dataclass

import structlog

from vitaltrack.domain.nutrition.core.ports.food_entry_repository import IFoodEntryRepository
from vitaltrack.domain.shared.errors import FoodEntryNotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DeleteFoodEntryCommand:
    entry_id: str


class DeleteFoodEntryHandler:
    def __init__(self, repository: IFoodEntryRepository):
        self._repository = repository

    async def handle(self, command: DeleteFoodEntryCommand) -> bool:
        if not await self._repository.delete(command.entry_id):
            raise FoodEntryNotFoundError(command.entry_id)

        logger.info("Food entry deleted", entry_id=command.entry_id)
        return True
