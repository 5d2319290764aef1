"""Domain services for medical view."""

from .comparison import compare_views
from .report import build_medical_report
from .summary import generate_medical_summary
from .trends import (
    analyze_glucose_trend,
    analyze_pressure_trend,
    compare_periods,
    overall_period_trend,
)

__all__ = [
    "analyze_glucose_trend",
    "analyze_pressure_trend",
    "build_medical_report",
    "compare_views",
    "compare_periods",
    "generate_medical_summary",
    "overall_period_trend",
]
