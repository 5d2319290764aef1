"""Unit tests for FoodEntry entity and FoodEntryFactory."""

import pytest

from vitaltrack.domain.nutrition.core.factories.food_entry_factory import FoodEntryFactory
from vitaltrack.domain.nutrition.core.value_objects.food_category import FoodCategory
from vitaltrack.domain.shared.errors import InvalidFoodEntryError
from vitaltrack.domain.shared.outcome import Created, Rejected


class TestFoodEntry:
    """Test FoodEntry entity."""

    def test_category_and_glyph_derived_from_description(self, make_food):
        entry = make_food("f1", "Pollo asado", 150)

        assert entry.category == FoodCategory.PROTEINS
        assert entry.glyph == "🍗"
        assert entry.calculate_calories() == 225

    def test_explicit_category_wins(self, make_food):
        entry = make_food("f1", "Pollo asado", 100, category="dairy")

        assert entry.category == FoodCategory.DAIRY
        assert entry.glyph == "🥛"

    @pytest.mark.parametrize("quantity", [0, -10])
    def test_non_positive_quantity_rejected(self, make_food, quantity):
        with pytest.raises(InvalidFoodEntryError, match="Quantity must be positive"):
            make_food("f1", "Pan", quantity)

    def test_unknown_category_rejected(self, make_food):
        with pytest.raises(InvalidFoodEntryError, match="Invalid food type"):
            make_food("f1", "Pan", 100, category="snacks")

    def test_update_category_moves_glyph(self, make_food):
        entry = make_food("f1", "Pan", 100)

        entry.update_category("vegetables")

        assert entry.category == FoodCategory.VEGETABLES
        assert entry.glyph == "🥦"
        assert entry.calculate_calories() == 30

    def test_invalid_category_update_leaves_entry_unchanged(self, make_food):
        entry = make_food("f1", "Pan", 100)

        with pytest.raises(InvalidFoodEntryError):
            entry.update_category("snacks")

        assert entry.category == FoodCategory.CARBOHYDRATES
        assert entry.glyph == "🍞"

    def test_update_description_keeps_category_by_default(self, make_food):
        entry = make_food("f1", "Pan", 100)

        entry.update_description("Leche entera")

        assert entry.description == "Leche entera"
        assert entry.category == FoodCategory.CARBOHYDRATES

    def test_update_description_with_recategorize(self, make_food):
        entry = make_food("f1", "Pan", 100)

        entry.update_description("Leche entera", recategorize=True)

        assert entry.category == FoodCategory.DAIRY
        assert entry.glyph == "🥛"

    def test_update_quantity_validates(self, make_food):
        entry = make_food("f1", "Pan", 100)

        with pytest.raises(InvalidFoodEntryError):
            entry.update_quantity(0)
        entry.update_quantity(200)

        assert entry.quantity == 200

    def test_export(self, make_food):
        record = make_food("f1", "Huevo duro", 50).export()

        assert record.food_type == "eggs"
        assert record.calories == 75
        assert record.glyph == "🥚"

    def test_str(self, make_food):
        assert str(make_food("f1", "Pan", 100)) == "🍞 Pan (100g)"


class TestFoodEntryFactory:
    """Test FoodEntryFactory."""

    def test_create(self):
        entry = FoodEntryFactory.create("f1", "user-1", "Ensalada de lechuga", 80)

        assert entry.category == FoodCategory.VEGETABLES
        assert entry.timestamp is not None

    def test_try_create(self):
        created = FoodEntryFactory.try_create(
            entry_id="f1", user_id="user-1", description="Yogur", quantity=125
        )
        rejected = FoodEntryFactory.try_create(
            entry_id="f2", user_id="user-1", description="Yogur", quantity=-1
        )

        assert isinstance(created, Created)
        assert created.value.category == FoodCategory.DAIRY
        assert isinstance(rejected, Rejected)
        assert rejected.code == "quantity_not_positive"
