"""UpdateFoodEntryCommand."""

from copy import deepcopy
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import structlog

from vitaltrack.domain.nutrition.core.entities.food_entry import FoodEntry
from vitaltrack.domain.nutrition.core.ports.food_entry_repository import IFoodEntryRepository
from vitaltrack.domain.shared.errors import FoodEntryNotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class UpdateFoodEntryCommand:
    """Command to update a food entry. None fields are kept.

    Attributes:
        entry_id: Entry to update
        category: New category (glyph follows)
        description: New description
        quantity: New quantity in grams
        timestamp: New intake time
        recategorize: Re-derive category from the new description
            (ignored when category is given)
    """

    entry_id: str
    category: Optional[str] = None
    description: Optional[str] = None
    quantity: Optional[float] = None
    timestamp: Optional[datetime] = None
    recategorize: bool = False


class UpdateFoodEntryHandler:
    """Handler for UpdateFoodEntryCommand."""

    def __init__(self, repository: IFoodEntryRepository):
        self._repository = repository

    async def handle(self, command: UpdateFoodEntryCommand) -> FoodEntry:
        """
        Raises:
            FoodEntryNotFoundError: If the entry does not exist
            InvalidFoodEntryError: If category or quantity is invalid
        """
        stored = await self._repository.find_by_id(command.entry_id)
        if stored is None:
            raise FoodEntryNotFoundError(command.entry_id)

        entry = deepcopy(stored)
        if command.category is not None:
            entry.update_category(command.category)
        if command.description is not None:
            entry.update_description(
                command.description,
                recategorize=command.recategorize and command.category is None,
            )
        if command.quantity is not None:
            entry.update_quantity(command.quantity)
        if command.timestamp is not None:
            entry.update_timestamp(command.timestamp)

        await self._repository.save(entry)

        logger.info(
            "Food entry updated",
            entry_id=entry.id,
            category=entry.category.value,
        )
        return entry
