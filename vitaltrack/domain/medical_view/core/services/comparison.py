"""Comparison of a period with the preceding one."""

from ..entities.medical_view import MedicalView
from ..models.report import PeriodComparison
from ..models.trends import PeriodTrend
from .trends import compare_periods, overall_period_trend


def compare_views(current: MedicalView, previous: MedicalView) -> PeriodComparison:
    """
    Trend of each metric between two views of equal length.

    Glucose compares mean values and pressure compares mean systolic.
    Nutrition has no comparison rule and is always stable.

    Example:
        >>> comparison = compare_views(this_week, last_week)
        >>> comparison.overall_trend
        <PeriodTrend.IMPROVING: 'improving'>
    """
    glucose = compare_periods(
        [m.value for m in current.glucose_measurements],
        [m.value for m in previous.glucose_measurements],
    )
    pressure = compare_periods(
        [m.systolic for m in current.pressure_measurements],
        [m.systolic for m in previous.pressure_measurements],
    )
    nutrition = PeriodTrend.STABLE
    return PeriodComparison(
        glucose_trend=glucose,
        pressure_trend=pressure,
        nutritional_trend=nutrition,
        overall_trend=overall_period_trend([glucose, pressure, nutrition]),
    )
