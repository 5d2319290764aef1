"""Queries for food intake."""

from .get_daily_nutrition import GetDailyNutritionHandler, GetDailyNutritionQuery
from .get_food_recommendations import (
    FoodRecommendation,
    GetFoodRecommendationsHandler,
    GetFoodRecommendationsQuery,
)
from .get_weekly_trends import (
    GetWeeklyNutritionTrendsHandler,
    GetWeeklyNutritionTrendsQuery,
    WeeklyNutritionTrends,
)

__all__ = [
    "GetDailyNutritionQuery",
    "GetDailyNutritionHandler",
    "GetWeeklyNutritionTrendsQuery",
    "GetWeeklyNutritionTrendsHandler",
    "WeeklyNutritionTrends",
    "GetFoodRecommendationsQuery",
    "GetFoodRecommendationsHandler",
    "FoodRecommendation",
]
