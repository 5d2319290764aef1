"""Unit tests for food entry commands and nutrition queries."""

from datetime import date, datetime

import pytest

from vitaltrack.application.nutrition.commands import (
    DeleteFoodEntryCommand,
    DeleteFoodEntryHandler,
    LogFoodEntryCommand,
    LogFoodEntryHandler,
    UpdateFoodEntryCommand,
    UpdateFoodEntryHandler,
)
from vitaltrack.application.nutrition.queries import (
    GetDailyNutritionHandler,
    GetDailyNutritionQuery,
    GetFoodRecommendationsHandler,
    GetFoodRecommendationsQuery,
    GetWeeklyNutritionTrendsHandler,
    GetWeeklyNutritionTrendsQuery,
)
from vitaltrack.domain.nutrition.core.value_objects.food_category import FoodCategory
from vitaltrack.domain.shared.errors import (
    FoodEntryNotFoundError,
    InvalidFoodEntryError,
    ProfileNotFoundError,
)
from vitaltrack.domain.shared.time import DateRange

WEEK = DateRange.for_days(date(2025, 1, 13), date(2025, 1, 19))


@pytest.fixture
def log_food(food_repository, profile_repository, id_generator):
    return LogFoodEntryHandler(food_repository, profile_repository, id_generator)


async def _log(handler, description, quantity, when, category=None):
    return await handler.handle(
        LogFoodEntryCommand(
            user_id="user-1",
            description=description,
            quantity=quantity,
            category=category,
            timestamp=when,
        )
    )


class TestLogFoodEntryHandler:
    """Test LogFoodEntryHandler."""

    @pytest.mark.asyncio
    async def test_log_categorizes_from_description(
        self, log_food, food_repository, stored_profile
    ):
        entry = await _log(log_food, "Pollo a la plancha", 150, datetime(2025, 1, 15, 13, 0))

        assert entry.id == "id-1"
        assert entry.category == FoodCategory.PROTEINS
        assert entry.glyph == "🍗"
        stored = await food_repository.find_by_id("id-1")
        assert stored.calculate_calories() == 225

    @pytest.mark.asyncio
    async def test_explicit_category(self, log_food, stored_profile):
        entry = await _log(log_food, "Batido", 300, datetime(2025, 1, 15), category="dairy")
        assert entry.category == FoodCategory.DAIRY

    @pytest.mark.asyncio
    async def test_invalid_quantity_reported_before_profile_lookup(self, log_food):
        with pytest.raises(InvalidFoodEntryError, match="Quantity must be positive"):
            await log_food.handle(
                LogFoodEntryCommand(user_id="ghost", description="Pan", quantity=0)
            )

    @pytest.mark.asyncio
    async def test_unknown_profile(self, log_food, food_repository):
        with pytest.raises(ProfileNotFoundError):
            await log_food.handle(
                LogFoodEntryCommand(user_id="ghost", description="Pan", quantity=50)
            )
        assert food_repository.count() == 0


class TestUpdateAndDeleteFoodEntry:
    """Test UpdateFoodEntryHandler and DeleteFoodEntryHandler."""

    @pytest.mark.asyncio
    async def test_update_description_with_recategorize(
        self, log_food, food_repository, stored_profile
    ):
        entry = await _log(log_food, "Pan", 100, datetime(2025, 1, 15, 8, 0))
        handler = UpdateFoodEntryHandler(food_repository)

        updated = await handler.handle(
            UpdateFoodEntryCommand(entry.id, description="Yogur natural", recategorize=True)
        )

        assert updated.category == FoodCategory.DAIRY
        assert updated.glyph == "🥛"

    @pytest.mark.asyncio
    async def test_explicit_category_overrides_recategorize(
        self, log_food, food_repository, stored_profile
    ):
        entry = await _log(log_food, "Pan", 100, datetime(2025, 1, 15, 8, 0))
        handler = UpdateFoodEntryHandler(food_repository)

        updated = await handler.handle(
            UpdateFoodEntryCommand(
                entry.id, category="eggs", description="Yogur natural", recategorize=True
            )
        )

        assert updated.category == FoodCategory.EGGS
        assert updated.description == "Yogur natural"

    @pytest.mark.asyncio
    async def test_invalid_update_keeps_stored_entry(
        self, log_food, food_repository, stored_profile
    ):
        entry = await _log(log_food, "Pan", 100, datetime(2025, 1, 15, 8, 0))
        handler = UpdateFoodEntryHandler(food_repository)

        with pytest.raises(InvalidFoodEntryError):
            await handler.handle(UpdateFoodEntryCommand(entry.id, category="dairy", quantity=-5))

        stored = await food_repository.find_by_id(entry.id)
        assert stored.category == FoodCategory.CARBOHYDRATES
        assert stored.quantity == 100

    @pytest.mark.asyncio
    async def test_update_unknown_entry(self, food_repository):
        with pytest.raises(FoodEntryNotFoundError, match="Food entry not found: f9"):
            await UpdateFoodEntryHandler(food_repository).handle(
                UpdateFoodEntryCommand("f9", quantity=10)
            )

    @pytest.mark.asyncio
    async def test_delete(self, log_food, food_repository, stored_profile):
        entry = await _log(log_food, "Pan", 100, datetime(2025, 1, 15, 8, 0))
        handler = DeleteFoodEntryHandler(food_repository)

        assert await handler.handle(DeleteFoodEntryCommand(entry.id)) is True
        with pytest.raises(FoodEntryNotFoundError):
            await handler.handle(DeleteFoodEntryCommand(entry.id))


class TestDailyNutrition:
    """Test GetDailyNutritionHandler."""

    @pytest.mark.asyncio
    async def test_only_the_requested_day(self, log_food, food_repository, stored_profile):
        await _log(log_food, "Pan integral", 100, datetime(2025, 1, 15, 8, 0))
        await _log(log_food, "Pollo", 150, datetime(2025, 1, 15, 13, 0))
        await _log(log_food, "Brócoli", 200, datetime(2025, 1, 15, 23, 59, 59))
        await _log(log_food, "Queso", 100, datetime(2025, 1, 16, 0, 0))

        summary = await GetDailyNutritionHandler(food_repository).handle(
            GetDailyNutritionQuery("user-1", date(2025, 1, 15))
        )

        assert summary.total_entries == 3
        assert summary.total_calories == 415
        assert summary.by_type["dairy"] == []


class TestWeeklyNutritionTrends:
    """Test GetWeeklyNutritionTrendsHandler."""

    @pytest.mark.asyncio
    async def test_trends(self, log_food, food_repository, stored_profile):
        await _log(log_food, "Pan", 100, datetime(2025, 1, 14, 8, 0))
        await _log(log_food, "Pollo", 150, datetime(2025, 1, 14, 13, 0))
        await _log(log_food, "Brócoli", 200, datetime(2025, 1, 15, 13, 0))
        await _log(log_food, "Arroz", 50, datetime(2025, 1, 15, 20, 0))

        trends = await GetWeeklyNutritionTrendsHandler(food_repository).handle(
            GetWeeklyNutritionTrendsQuery("user-1", WEEK)
        )

        # 130 + 225 + 60 + 65 calories over two days
        assert trends.total_days == 2
        assert trends.average_calories_per_day == 240.0
        assert trends.most_consumed_category == FoodCategory.CARBOHYDRATES
        assert trends.least_consumed_category == FoodCategory.PROTEINS

    @pytest.mark.asyncio
    async def test_tie_for_most_consumed_goes_to_later_category(
        self, log_food, food_repository, stored_profile
    ):
        await _log(log_food, "Pan", 100, datetime(2025, 1, 14, 8, 0))
        await _log(log_food, "Pollo", 100, datetime(2025, 1, 14, 13, 0))

        trends = await GetWeeklyNutritionTrendsHandler(food_repository).handle(
            GetWeeklyNutritionTrendsQuery("user-1", WEEK)
        )

        assert trends.total_days == 1
        assert trends.most_consumed_category == FoodCategory.PROTEINS
        assert trends.least_consumed_category == FoodCategory.CARBOHYDRATES

    @pytest.mark.asyncio
    async def test_no_entries(self, food_repository):
        trends = await GetWeeklyNutritionTrendsHandler(food_repository).handle(
            GetWeeklyNutritionTrendsQuery("user-1", WEEK)
        )

        assert trends.total_days == 1
        assert trends.average_calories_per_day == 0
        assert trends.most_consumed_category == FoodCategory.CARBOHYDRATES
        assert trends.least_consumed_category == FoodCategory.CARBOHYDRATES


class TestFoodRecommendations:
    """Test GetFoodRecommendationsHandler."""

    @pytest.mark.asyncio
    async def test_diabetes_recommendations_first(self, profile_repository, stored_profile):
        recommendations = await GetFoodRecommendationsHandler(profile_repository).handle(
            GetFoodRecommendationsQuery("user-1")
        )

        assert len(recommendations) == 5
        assert recommendations[0].category == FoodCategory.VEGETABLES
        assert recommendations[0].priority == "high"
        assert recommendations[-1].category == FoodCategory.DAIRY

    @pytest.mark.asyncio
    async def test_general_recommendations_only(self, profile_repository, profile):
        profile.update_medical_conditions([])
        await profile_repository.save(profile)

        recommendations = await GetFoodRecommendationsHandler(profile_repository).handle(
            GetFoodRecommendationsQuery("user-1")
        )

        assert [r.priority for r in recommendations] == ["low", "low"]

    @pytest.mark.asyncio
    async def test_unknown_profile(self, profile_repository):
        with pytest.raises(ProfileNotFoundError):
            await GetFoodRecommendationsHandler(profile_repository).handle(
                GetFoodRecommendationsQuery("ghost")
            )
