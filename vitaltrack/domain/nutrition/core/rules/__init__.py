"""Food categorization and calorie rules."""

from .categorization import FOOD_KEYWORD_RULES, KeywordRule, categorize_food
from .calories import estimate_calories

__all__ = ["FOOD_KEYWORD_RULES", "KeywordRule", "categorize_food", "estimate_calories"]
