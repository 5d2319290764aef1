"""MedicalView aggregate - per-period health summaries."""

from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional

from vitaltrack.domain.measurement.core.entities.glucose_measurement import GlucoseMeasurement
from vitaltrack.domain.measurement.core.entities.pressure_measurement import PressureMeasurement
from vitaltrack.domain.measurement.core.value_objects.glucose_context import GlucoseContext
from vitaltrack.domain.nutrition.core.entities.food_entry import FoodEntry
from vitaltrack.domain.nutrition.core.value_objects.food_category import FoodCategory
from vitaltrack.domain.profile.core.entities.user_profile import UserProfile
from vitaltrack.domain.shared.time import DateRange
from vitaltrack.domain.shared.types import MeasurementStatus

from ..aggregation import (
    status_counts,
    summarize_glucose,
    summarize_nutrition,
    summarize_pressure,
)
from ..models.summaries import (
    CriticalAlert,
    GlucoseSummary,
    NutritionalSummary,
    PressureSummary,
    ViewSnapshot,
)

CRITICAL_PENALTY = 20
WARNING_PENALTY = 10


@dataclass(frozen=True)
class MedicalView:
    """
    Read-oriented aggregate binding a profile to one period of records.

    Nothing is cached: every summary is recomputed from the collections.
    The collections are stored as tuples, so later changes to the caller's
    lists do not leak in. Records are expected to belong to the profile's
    user; this is not checked.

    Attributes:
        user_profile: Owner profile (name, limits, conditions)
        glucose_measurements: Glucose readings of the period
        pressure_measurements: Pressure readings of the period
        food_entries: Food entries of the period
        period: Period covered, if known
        id: Optional view identifier

    Example:
        >>> view = MedicalView(profile, glucose, pressure, food)
        >>> view.health_score()
        70
        >>> view.overall_status()
        'good'
    """

    user_profile: UserProfile
    glucose_measurements: tuple[GlucoseMeasurement, ...] = ()
    pressure_measurements: tuple[PressureMeasurement, ...] = ()
    food_entries: tuple[FoodEntry, ...] = ()
    period: Optional[DateRange] = None
    id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "glucose_measurements", tuple(self.glucose_measurements))
        object.__setattr__(self, "pressure_measurements", tuple(self.pressure_measurements))
        object.__setattr__(self, "food_entries", tuple(self.food_entries))

    @property
    def user_id(self) -> str:
        return self.user_profile.id

    @property
    def date(self) -> Optional[date]:
        return self.period.start.date() if self.period else None

    # ── summaries ───────────────────────────────────────────

    def glucose_summary(self) -> GlucoseSummary:
        return summarize_glucose(self.glucose_measurements)

    def pressure_summary(self) -> PressureSummary:
        return summarize_pressure(self.pressure_measurements)

    def nutritional_summary(self) -> NutritionalSummary:
        return summarize_nutrition(self.food_entries)

    def glucose_by_context(self) -> dict[str, list[GlucoseMeasurement]]:
        """Readings grouped by context value; every context is present."""
        groups: dict[str, list[GlucoseMeasurement]] = {c.value: [] for c in GlucoseContext}
        for m in self.glucose_measurements:
            groups[m.context.value].append(m)
        return groups

    def food_by_category(self) -> dict[str, list[FoodEntry]]:
        groups: dict[str, list[FoodEntry]] = {c.value: [] for c in FoodCategory}
        for entry in self.food_entries:
            groups[entry.category.value].append(entry)
        return groups

    # ── scoring ─────────────────────────────────────────────

    def health_score(self) -> int:
        """Score 0-100: -20 per critical and -10 per warning reading, floored at 0."""
        statuses = [m.status for m in self.glucose_measurements]
        statuses += [m.status for m in self.pressure_measurements]
        _, warning, critical = status_counts(statuses)
        return max(0, 100 - critical * CRITICAL_PENALTY - warning * WARNING_PENALTY)

    def overall_status(self) -> str:
        score = self.health_score()
        if score >= 90:
            return "excellent"
        if score >= 70:
            return "good"
        if score >= 50:
            return "fair"
        return "poor"

    def critical_alerts(self) -> list[CriticalAlert]:
        """Alerts for critical readings: glucose first, then pressure, in input order."""
        alerts = [
            CriticalAlert(
                type="glucose",
                value=m.value,
                measurement_id=m.id,
                timestamp=m.timestamp,
            )
            for m in self.glucose_measurements
            if m.status == MeasurementStatus.CRITICAL
        ]
        alerts += [
            CriticalAlert(
                type="pressure",
                value=m.systolic,
                measurement_id=m.id,
                timestamp=m.timestamp,
            )
            for m in self.pressure_measurements
            if m.status == MeasurementStatus.CRITICAL
        ]
        return alerts

    # ── slicing and export ──────────────────────────────────

    def measurements_in_range(self, period: DateRange) -> "MedicalView":
        """New view over the records whose timestamp falls inside period (inclusive)."""
        return MedicalView(
            user_profile=self.user_profile,
            glucose_measurements=_within(self.glucose_measurements, period),
            pressure_measurements=_within(self.pressure_measurements, period),
            food_entries=_within(self.food_entries, period),
            period=period,
            id=self.id,
        )

    def export_summary(self) -> ViewSnapshot:
        return ViewSnapshot(
            user_id=self.user_id,
            period_start=self.period.start if self.period else None,
            period_end=self.period.end if self.period else None,
            glucose_summary=self.glucose_summary(),
            pressure_summary=self.pressure_summary(),
            nutritional_summary=self.nutritional_summary(),
            health_score=self.health_score(),
            alerts=self.critical_alerts(),
        )


def _within(records: Iterable, period: DateRange) -> tuple:
    return tuple(r for r in records if period.contains(r.timestamp))
