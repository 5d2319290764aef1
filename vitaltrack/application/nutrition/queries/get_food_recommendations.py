"""GetFoodRecommendationsQuery - food suggestions for a profile."""

from dataclasses import dataclass

from vitaltrack.domain.nutrition.core.value_objects.food_category import FoodCategory
from vitaltrack.domain.profile.core.ports.repository import IUserProfileRepository
from vitaltrack.domain.shared.errors import ProfileNotFoundError


@dataclass(frozen=True)
class GetFoodRecommendationsQuery:
    user_id: str


@dataclass(frozen=True)
class FoodRecommendation:
    category: FoodCategory
    description: str
    reason: str
    priority: str


DIABETES_RECOMMENDATIONS = (
    FoodRecommendation(
        category=FoodCategory.VEGETABLES,
        description="Brócoli, espinaca, lechuga",
        reason="Vegetables help control blood sugar levels",
        priority="high",
    ),
    FoodRecommendation(
        category=FoodCategory.PROTEINS,
        description="Pollo, pescado, huevos",
        reason="Lean proteins help maintain stable glucose",
        priority="medium",
    ),
    FoodRecommendation(
        category=FoodCategory.CARBOHYDRATES,
        description="Granos enteros, arroz integral",
        reason="Complex carbohydrates are better for diabetes management",
        priority="medium",
    ),
)

GENERAL_RECOMMENDATIONS = (
    FoodRecommendation(
        category=FoodCategory.VEGETABLES,
        description="Variedad de vegetales coloridos",
        reason="Essential vitamins and minerals for overall health",
        priority="low",
    ),
    FoodRecommendation(
        category=FoodCategory.DAIRY,
        description="Leche, yogur, queso bajo en grasa",
        reason="Important source of calcium and protein",
        priority="low",
    ),
)


class GetFoodRecommendationsHandler:
    """Handler for GetFoodRecommendationsQuery.

    Condition-specific suggestions come first, then the general ones.
    """

    def __init__(self, profile_repository: IUserProfileRepository):
        self._profile_repository = profile_repository

    async def handle(self, query: GetFoodRecommendationsQuery) -> list[FoodRecommendation]:
        profile = await self._profile_repository.find_by_id(query.user_id)
        if profile is None:
            raise ProfileNotFoundError(query.user_id)

        recommendations: list[FoodRecommendation] = []
        if profile.has_condition("diabetes"):
            recommendations.extend(DIABETES_RECOMMENDATIONS)
        recommendations.extend(GENERAL_RECOMMENDATIONS)
        return recommendations
