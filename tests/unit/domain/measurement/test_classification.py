"""Unit tests for status and category classification rules."""

import pytest

from vitaltrack.domain.measurement.core.rules import (
    categorize_pressure,
    determine_glucose_status,
    determine_pressure_status,
)
from vitaltrack.domain.measurement.core.value_objects.pressure_category import PressureCategory
from vitaltrack.domain.profile.core.value_objects.limits import LimitRange, PressureLimits
from vitaltrack.domain.shared.types import MeasurementStatus

FASTING = LimitRange(min=70, max=100)
PRESSURE = PressureLimits(
    systolic=LimitRange(min=110, max=120),
    diastolic=LimitRange(min=70, max=80),
)


class TestGlucoseStatus:
    """Test determine_glucose_status against 70-100 mg/dL."""

    @pytest.mark.parametrize("value", [70, 85, 100])
    def test_inside_range_is_normal(self, value):
        assert determine_glucose_status(value, FASTING) == MeasurementStatus.NORMAL

    @pytest.mark.parametrize("value", [63, 64, 69, 101, 119, 120])
    def test_near_range_is_warning(self, value):
        """Test up to 10% below min and 20% above max, both edges included."""
        assert determine_glucose_status(value, FASTING) == MeasurementStatus.WARNING

    @pytest.mark.parametrize("value", [40, 62, 62.9, 120.1, 121, 250])
    def test_far_from_range_is_critical(self, value):
        assert determine_glucose_status(value, FASTING) == MeasurementStatus.CRITICAL


class TestPressureStatus:
    """Test determine_pressure_status against 110-120/70-80 mmHg."""

    def test_both_inside_is_normal(self):
        assert determine_pressure_status(115, 75, PRESSURE) == MeasurementStatus.NORMAL
        assert determine_pressure_status(120, 80, PRESSURE) == MeasurementStatus.NORMAL

    def test_both_in_warning_band(self):
        assert determine_pressure_status(135, 85, PRESSURE) == MeasurementStatus.WARNING
        assert determine_pressure_status(100, 65, PRESSURE) == MeasurementStatus.WARNING

    def test_one_normal_one_warning_is_warning(self):
        assert determine_pressure_status(115, 90, PRESSURE) == MeasurementStatus.WARNING

    def test_one_component_out_of_band_is_critical(self):
        assert determine_pressure_status(150, 85, PRESSURE) == MeasurementStatus.CRITICAL
        assert determine_pressure_status(118, 97, PRESSURE) == MeasurementStatus.CRITICAL

    @pytest.mark.parametrize(
        "systolic, diastolic",
        [(99, 75), (144, 75), (115, 63), (115, 96), (99, 63), (144, 96)],
    )
    def test_band_edges_are_warning(self, systolic, diastolic):
        """Test 0.9 x 110 = 99, 1.2 x 120 = 144, 0.9 x 70 = 63, 1.2 x 80 = 96."""
        status = determine_pressure_status(systolic, diastolic, PRESSURE)
        assert status == MeasurementStatus.WARNING

    @pytest.mark.parametrize(
        "systolic, diastolic",
        [(98, 75), (145, 75), (115, 62), (115, 97), (98, 63), (144, 97)],
    )
    def test_one_unit_past_an_edge_is_critical(self, systolic, diastolic):
        status = determine_pressure_status(systolic, diastolic, PRESSURE)
        assert status == MeasurementStatus.CRITICAL


class TestPressureCategory:
    """Test categorize_pressure staging."""

    @pytest.mark.parametrize(
        "systolic, diastolic, expected",
        [
            (115, 75, PressureCategory.NORMAL),
            (119, 79, PressureCategory.NORMAL),
            (120, 79, PressureCategory.PREHYPERTENSION),
            (125, 75, PressureCategory.PREHYPERTENSION),
            (135, 75, PressureCategory.STAGE1_HYPERTENSION),
            (115, 85, PressureCategory.STAGE1_HYPERTENSION),
            (145, 75, PressureCategory.STAGE1_HYPERTENSION),
            (145, 85, PressureCategory.STAGE1_HYPERTENSION),
            (115, 95, PressureCategory.STAGE1_HYPERTENSION),
            (150, 100, PressureCategory.STAGE2_HYPERTENSION),
            (180, 70, PressureCategory.STAGE2_HYPERTENSION),
        ],
    )
    def test_categories(self, systolic, diastolic, expected):
        assert categorize_pressure(systolic, diastolic) == expected

    @pytest.mark.parametrize("systolic, diastolic", [(125, 85), (120, 80), (129, 89)])
    def test_elevated_systolic_with_high_diastolic_stays_prehypertension(
        self, systolic, diastolic
    ):
        assert categorize_pressure(systolic, diastolic) == PressureCategory.PREHYPERTENSION

    def test_category_ignores_personal_limits(self):
        """Test 135/85 is stage 1 even though it is only a warning for the user."""
        assert determine_pressure_status(135, 85, PRESSURE) == MeasurementStatus.WARNING
        assert categorize_pressure(135, 85) == PressureCategory.STAGE1_HYPERTENSION
