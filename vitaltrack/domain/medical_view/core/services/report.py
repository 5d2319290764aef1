"""Medical report assembly."""

from datetime import datetime
from typing import Optional

from vitaltrack.domain.shared.time import utc_now

from ..entities.medical_view import MedicalView
from ..models.report import MedicalReport, PeriodComparison
from ..models.trends import PeriodTrend
from .summary import generate_medical_summary

CONSULT_SCORE_THRESHOLD = 70
MIN_TRACKED_MEALS = 3


def build_medical_report(
    view: MedicalView,
    comparison: PeriodComparison,
    report_date: Optional[datetime] = None,
) -> MedicalReport:
    """
    Assemble a report from a view covering the reported period.

    Args:
        view: View with a period set
        comparison: Trends against the preceding period
        report_date: Generation time (default: now UTC)

    Returns:
        MedicalReport labelled "N days", N being the period span rounded up
    """
    summary = generate_medical_summary(view)
    days = view.period.days() if view.period else 0

    critical_alerts: list[str] = []
    if summary.glucose_summary.critical_count > 0:
        critical_alerts.append(
            f"{summary.glucose_summary.critical_count} critical glucose readings detected"
        )
    if summary.pressure_summary.critical_count > 0:
        critical_alerts.append(
            f"{summary.pressure_summary.critical_count} critical pressure readings detected"
        )

    recommendations: list[str] = []
    if summary.health_score < CONSULT_SCORE_THRESHOLD:
        recommendations.append("Consider consulting with healthcare provider")
    if summary.nutritional_summary.total_entries < MIN_TRACKED_MEALS:
        recommendations.append("Increase meal frequency for better tracking")
    if comparison.overall_trend == PeriodTrend.WORSENING:
        recommendations.append("Review current treatment plan with doctor")

    narrative = (
        f"Health report for {days} days. "
        f"Overall health score: {summary.health_score}/100. "
        f"{summary.glucose_summary.total_measurements} glucose measurements, "
        f"{summary.pressure_summary.total_measurements} pressure measurements, "
        f"and {summary.nutritional_summary.total_entries} food entries recorded."
    )

    return MedicalReport(
        user_id=view.user_id,
        report_date=report_date or utc_now(),
        period=f"{days} days",
        health_summary=summary,
        trends=comparison,
        critical_alerts=critical_alerts,
        recommendations=recommendations,
        medical_summary=narrative,
    )
