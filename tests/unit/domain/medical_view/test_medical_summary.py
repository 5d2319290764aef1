"""Unit tests for generate_medical_summary."""

from datetime import date

from vitaltrack.domain.medical_view.core.entities.medical_view import MedicalView
from vitaltrack.domain.medical_view.core.services.summary import generate_medical_summary
from vitaltrack.domain.shared.time import DateRange
from vitaltrack.domain.shared.types import MeasurementStatus as S


class TestGenerateMedicalSummary:
    """Test summary content and recommendation ordering."""

    def test_full_day(self, profile, make_glucose, make_pressure, make_food):
        view = MedicalView(
            profile,
            glucose_measurements=[
                make_glucose("g1", 95, S.NORMAL),
                make_glucose("g2", 120, S.WARNING, "postPrandial", minutes=60),
                make_glucose("g3", 150, S.CRITICAL, "postPrandial", minutes=120),
            ],
            pressure_measurements=[
                make_pressure("p1", 120, 80, S.NORMAL),
                make_pressure("p2", 135, 85, S.WARNING, minutes=60),
            ],
            food_entries=[
                make_food("f1", "Pan integral", 100),
                make_food("f2", "Pollo", 150),
                make_food("f3", "Brócoli", 200),
            ],
            period=DateRange.for_day(date(2025, 1, 15)),
        )

        summary = generate_medical_summary(view)

        assert summary.date == date(2025, 1, 15)
        assert summary.patient_name == "María García"
        assert summary.health_score == 60
        assert summary.overall_status == "fair"
        assert [(r.priority, r.description) for r in summary.recommendations] == [
            ("high", "Critical glucose level: 150"),
            ("medium", "1 glucose measurements in warning range"),
            ("medium", "1 blood pressure measurements in warning range"),
            ("low", "Low daily calorie intake"),
        ]
        assert summary.recommendations[0].action == "Immediate medical attention required"

    def test_empty_view_recommends_food(self, profile):
        summary = generate_medical_summary(MedicalView(profile))

        assert summary.date is None
        assert summary.health_score == 100
        assert summary.alerts == []
        assert [r.description for r in summary.recommendations] == [
            "Low daily calorie intake",
            "No vegetables recorded today",
        ]
        assert all(r.priority == "low" for r in summary.recommendations)

    def test_critical_pressure_recommendation(self, profile, make_pressure):
        view = MedicalView(
            profile, pressure_measurements=[make_pressure("p1", 160, 100, S.CRITICAL)]
        )

        summary = generate_medical_summary(view)

        assert summary.recommendations[0].description == "Critical blood pressure: 160"
        assert summary.alerts[0].type == "pressure"

    def test_alert_values_are_written_in_full(self, profile, make_glucose):
        view = MedicalView(
            profile,
            glucose_measurements=[
                make_glucose("g1", 172.5, S.CRITICAL, "postPrandial"),
                make_glucose("g2", 1234567, S.CRITICAL, minutes=30),
            ],
        )

        summary = generate_medical_summary(view)

        assert [r.description for r in summary.recommendations[:2]] == [
            "Critical glucose level: 172.5",
            "Critical glucose level: 1234567",
        ]

    def test_enough_calories_and_vegetables(self, profile, make_food):
        view = MedicalView(
            profile,
            food_entries=[
                make_food("f1", "Arroz", 500),
                make_food("f2", "Carne", 400),
                make_food("f3", "Espinaca", 100),
            ],
        )

        summary = generate_medical_summary(view)

        # 650 + 600 + 30 calories
        assert summary.nutritional_summary.total_calories == 1280
        assert summary.recommendations == []

    def test_fractional_values_are_kept(self, profile, make_glucose):
        view = MedicalView(
            profile, glucose_measurements=[make_glucose("g1", 45.5, S.CRITICAL)]
        )

        summary = generate_medical_summary(view)

        assert summary.recommendations[0].description == "Critical glucose level: 45.5"
