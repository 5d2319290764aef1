"""Unit tests for summary computations."""

from vitaltrack.domain.medical_view.core.aggregation import (
    average,
    percentage,
    status_counts,
    summarize_glucose,
    summarize_nutrition,
    summarize_pressure,
)
from vitaltrack.domain.shared.types import MeasurementStatus as S


class TestHelpers:
    """Test percentage, average and status_counts."""

    def test_percentage_of_empty_total_is_zero(self):
        assert percentage(0, 0) == 0.0
        assert percentage(1, 4) == 25.0

    def test_average(self):
        assert average([]) == 0.0
        assert average([100, 150]) == 125.0

    def test_status_counts(self):
        assert status_counts([S.NORMAL, S.CRITICAL, S.NORMAL]) == (2, 0, 1)


class TestSummaries:
    """Test the per-kind summaries."""

    def test_glucose_groups_ids_by_context(self, make_glucose):
        summary = summarize_glucose(
            [
                make_glucose("g1", 95),
                make_glucose("g2", 150, S.CRITICAL, context="postPrandial", minutes=90),
            ]
        )

        assert summary.by_context["fasting"] == ["g1"]
        assert summary.by_context["postPrandial"] == ["g2"]
        assert summary.context_counts["custom"] == 0
        assert summary.normal_percentage + summary.critical_percentage == 100.0

    def test_empty_glucose(self):
        summary = summarize_glucose([])

        assert summary.total_measurements == 0
        assert summary.min_value == 0.0
        assert summary.critical_percentage == 0.0

    def test_pressure_counts_categories(self, make_pressure):
        summary = summarize_pressure(
            [
                make_pressure("p1", 115, 75),
                make_pressure("p2", 125, 85, S.WARNING, minutes=60),
                make_pressure("p3", 160, 105, S.CRITICAL, minutes=120),
            ]
        )

        assert summary.by_category["normal"] == 1
        assert summary.by_category["prehypertension"] == 1
        assert summary.by_category["stage2_hypertension"] == 1
        assert summary.min_systolic == 115
        assert summary.max_diastolic == 105

    def test_nutrition_totals_per_category(self, make_food):
        summary = summarize_nutrition(
            [
                make_food("f1", "Pan", 100),
                make_food("f2", "Pollo", 150, minutes=5),
                make_food("f3", "Brócoli", 200, minutes=10),
            ]
        )

        assert summary.total_calories == 415
        assert summary.calories_by_type == {
            "carbohydrates": 130,
            "proteins": 225,
            "vegetables": 60,
            "eggs": 0,
            "dairy": 0,
        }
        assert summary.by_type["eggs"] == []
        assert summary.quantities_by_type["vegetables"] == 200.0
