"""Period comparison and medical report models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .summaries import MedicalSummary
from .trends import PeriodTrend


class PeriodComparison(BaseModel):
    """Per-metric trend of a period against the preceding one."""

    model_config = ConfigDict(frozen=True)

    glucose_trend: PeriodTrend
    pressure_trend: PeriodTrend
    nutritional_trend: PeriodTrend = PeriodTrend.STABLE
    overall_trend: PeriodTrend


class MedicalReport(BaseModel):
    """
    Medical report for a period.

    Attributes:
        user_id: Profile the report belongs to
        report_date: Generation time (naive UTC)
        period: Human label, e.g. "7 days"
        health_summary: Summary of the period
        trends: Comparison with the preceding period
        critical_alerts: One line per metric with critical readings
        recommendations: Follow-up suggestions
        medical_summary: Narrative text
    """

    model_config = ConfigDict(frozen=True)

    user_id: str
    report_date: datetime
    period: str
    health_summary: MedicalSummary
    trends: PeriodComparison
    critical_alerts: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    medical_summary: str

    def export_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(indent=indent)
