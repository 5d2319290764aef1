"""Keyword-based food categorization.

Rules are plain data: an ordered tuple of (category, keywords). The first
rule with a keyword contained in the lower-cased description wins, so
"pollo y pan" is carbohydrates. Pass a different rule table to localize.
"""

from typing import Sequence

from ..value_objects.food_category import FoodCategory

KeywordRule = tuple[FoodCategory, tuple[str, ...]]

FOOD_KEYWORD_RULES: tuple[KeywordRule, ...] = (
    (
        FoodCategory.CARBOHYDRATES,
        ("pan", "arroz", "pasta", "papas", "tortilla", "galleta", "dulce", "postre"),
    ),
    (FoodCategory.PROTEINS, ("pollo", "pescado", "carne", "cerdo", "pavo")),
    (FoodCategory.VEGETABLES, ("brócoli", "espinaca", "lechuga", "zanahoria", "tomate")),
    (FoodCategory.EGGS, ("huevo", "huevos", "omelette")),
    (FoodCategory.DAIRY, ("leche", "queso", "yogur", "mantequilla")),
)

DEFAULT_CATEGORY = FoodCategory.CARBOHYDRATES


def categorize_food(
    description: str,
    rules: Sequence[KeywordRule] = FOOD_KEYWORD_RULES,
) -> FoodCategory:
    """Guess the category of a free-text food description.

    Args:
        description: Free text, any case
        rules: Ordered (category, keywords) table

    Returns:
        FoodCategory of the first matching rule, carbohydrates if none match

    Example:
        >>> categorize_food("Pollo asado")
        <FoodCategory.PROTEINS: 'proteins'>
        >>> categorize_food("unknown")
        <FoodCategory.CARBOHYDRATES: 'carbohydrates'>
    """
    lowered = (description or "").lower()
    for category, keywords in rules:
        if any(keyword in lowered for keyword in keywords):
            return category
    return DEFAULT_CATEGORY
