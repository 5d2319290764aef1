"""
Summary models.

Immutable results computed by MedicalView. Collections are referenced by
record id so a summary can be dumped without dragging entities along.
"""

from __future__ import annotations

import datetime as dt
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Summary(BaseModel):
    model_config = ConfigDict(frozen=True)


class GlucoseSummary(_Summary):
    """
    Glucose statistics for a period.

    Percentages are count / total * 100 and 0 when there are no readings.
    Average, min and max are 0 when there are no readings.
    """

    total_measurements: int = Field(..., ge=0)
    normal_count: int = 0
    warning_count: int = 0
    critical_count: int = 0
    normal_percentage: float = 0.0
    warning_percentage: float = 0.0
    critical_percentage: float = 0.0
    average_value: float = 0.0
    min_value: float = 0.0
    max_value: float = 0.0
    by_context: dict[str, list[str]] = Field(
        default_factory=dict, description="Context -> measurement ids"
    )
    context_counts: dict[str, int] = Field(default_factory=dict)


class PressureSummary(_Summary):
    """Blood pressure statistics for a period."""

    total_measurements: int = Field(..., ge=0)
    normal_count: int = 0
    warning_count: int = 0
    critical_count: int = 0
    normal_percentage: float = 0.0
    warning_percentage: float = 0.0
    critical_percentage: float = 0.0
    average_systolic: float = 0.0
    average_diastolic: float = 0.0
    min_systolic: float = 0.0
    max_systolic: float = 0.0
    min_diastolic: float = 0.0
    max_diastolic: float = 0.0
    by_category: dict[str, int] = Field(
        default_factory=dict, description="Clinical category -> count"
    )


class NutritionalSummary(_Summary):
    """Food intake totals, broken down per food category."""

    total_entries: int = Field(..., ge=0)
    total_calories: int = Field(0, ge=0)
    by_type: dict[str, list[str]] = Field(
        default_factory=dict, description="Category -> entry ids"
    )
    calories_by_type: dict[str, int] = Field(default_factory=dict)
    quantities_by_type: dict[str, float] = Field(default_factory=dict)


class CriticalAlert(_Summary):
    """A reading classified critical. For pressure, value is the systolic."""

    type: Literal["glucose", "pressure"]
    value: float
    severity: str = "critical"
    measurement_id: str
    timestamp: datetime


class Recommendation(_Summary):
    priority: Literal["high", "medium", "low"]
    description: str
    action: str


class MedicalSummary(_Summary):
    """Clinical summary of a medical view with prioritized recommendations."""

    date: Optional[dt.date] = None
    patient_name: str
    glucose_summary: GlucoseSummary
    pressure_summary: PressureSummary
    nutritional_summary: NutritionalSummary
    health_score: int = Field(..., ge=0, le=100)
    overall_status: Literal["excellent", "good", "fair", "poor"]
    alerts: list[CriticalAlert] = Field(default_factory=list)
    recommendations: list[Recommendation] = Field(default_factory=list)


class ViewSnapshot(_Summary):
    """Exportable snapshot of everything a MedicalView computes."""

    user_id: str
    period_start: Optional[datetime] = None
    period_end: Optional[datetime] = None
    glucose_summary: GlucoseSummary
    pressure_summary: PressureSummary
    nutritional_summary: NutritionalSummary
    health_score: int
    alerts: list[CriticalAlert] = Field(default_factory=list)
