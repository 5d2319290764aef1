"""GetDailyNutritionQuery - nutritional summary of one calendar day."""

from dataclasses import dataclass
from datetime import date

from vitaltrack.domain.medical_view.core.aggregation import summarize_nutrition
from vitaltrack.domain.medical_view.core.models.summaries import NutritionalSummary
from vitaltrack.domain.nutrition.core.ports.food_entry_repository import IFoodEntryRepository
from vitaltrack.domain.shared.time import DateRange


@dataclass(frozen=True)
class GetDailyNutritionQuery:
    user_id: str
    day: date


class GetDailyNutritionHandler:
    """Handler for GetDailyNutritionQuery."""

    def __init__(self, repository: IFoodEntryRepository):
        self._repository = repository

    async def handle(self, query: GetDailyNutritionQuery) -> NutritionalSummary:
        period = DateRange.for_day(query.day)
        entries = await self._repository.find_by_user_and_range(
            query.user_id, period.start, period.end
        )
        return summarize_nutrition(entries)
