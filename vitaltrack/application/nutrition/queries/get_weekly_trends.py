"""GetWeeklyNutritionTrendsQuery - intake habits over a period."""

from dataclasses import dataclass
from functools import reduce

from vitaltrack.domain.nutrition.core.ports.food_entry_repository import IFoodEntryRepository
from vitaltrack.domain.nutrition.core.value_objects.food_category import FoodCategory
from vitaltrack.domain.shared.time import DateRange


@dataclass(frozen=True)
class GetWeeklyNutritionTrendsQuery:
    user_id: str
    period: DateRange


@dataclass(frozen=True)
class WeeklyNutritionTrends:
    """
    Attributes:
        total_days: Calendar days with at least one entry (minimum 1)
        average_calories_per_day: Total calories / total_days
        most_consumed_category: Category with most entries
        least_consumed_category: Consumed category with fewest entries
    """

    total_days: int
    average_calories_per_day: float
    most_consumed_category: FoodCategory
    least_consumed_category: FoodCategory


def _most_consumed(counts: list[tuple[FoodCategory, int]]) -> FoodCategory:
    # on a tie the later category wins
    return reduce(lambda a, b: a if a[1] > b[1] else b, counts)[0]


def _least_consumed(counts: list[tuple[FoodCategory, int]]) -> FoodCategory:
    return min(counts, key=lambda item: (item[1], item[0].value))[0]


class GetWeeklyNutritionTrendsHandler:
    """Handler for GetWeeklyNutritionTrendsQuery.

    Only categories with at least one entry compete for most/least
    consumed. Without entries both fall back to carbohydrates.
    """

    def __init__(self, repository: IFoodEntryRepository):
        self._repository = repository

    async def handle(self, query: GetWeeklyNutritionTrendsQuery) -> WeeklyNutritionTrends:
        entries = await self._repository.find_by_user_and_range(
            query.user_id, query.period.start, query.period.end
        )

        total_days = max(1, len({entry.timestamp.date() for entry in entries}))
        total_calories = sum(entry.calculate_calories() for entry in entries)

        counts = [
            (category, sum(1 for entry in entries if entry.category == category))
            for category in FoodCategory
        ]
        consumed = [item for item in counts if item[1] > 0]
        if consumed:
            most, least = _most_consumed(consumed), _least_consumed(consumed)
        else:
            most = least = FoodCategory.CARBOHYDRATES

        return WeeklyNutritionTrends(
            total_days=total_days,
            average_calories_per_day=total_calories / total_days,
            most_consumed_category=most,
            least_consumed_category=least,
        )
