"""Read models produced by the medical view."""

from .report import MedicalReport, PeriodComparison
from .summaries import (
    CriticalAlert,
    GlucoseSummary,
    MedicalSummary,
    NutritionalSummary,
    PressureSummary,
    Recommendation,
    ViewSnapshot,
)
from .trends import GlucoseTrend, PeriodTrend, PressureTrend, TrendDirection

__all__ = [
    "CriticalAlert",
    "GlucoseSummary",
    "GlucoseTrend",
    "MedicalReport",
    "MedicalSummary",
    "NutritionalSummary",
    "PeriodComparison",
    "PeriodTrend",
    "PressureSummary",
    "PressureTrend",
    "Recommendation",
    "TrendDirection",
    "ViewSnapshot",
]
