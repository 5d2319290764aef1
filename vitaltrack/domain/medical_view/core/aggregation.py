"""Summary computations over record collections.

Pure functions shared by MedicalView and the application queries that
summarize records without a profile (daily nutrition).
"""

from typing import Iterable

from vitaltrack.domain.measurement.core.entities.glucose_measurement import GlucoseMeasurement
from vitaltrack.domain.measurement.core.entities.pressure_measurement import PressureMeasurement
from vitaltrack.domain.measurement.core.value_objects.glucose_context import GlucoseContext
from vitaltrack.domain.measurement.core.value_objects.pressure_category import PressureCategory
from vitaltrack.domain.nutrition.core.entities.food_entry import FoodEntry
from vitaltrack.domain.nutrition.core.value_objects.food_category import FoodCategory
from vitaltrack.domain.shared.types import MeasurementStatus

from .models.summaries import GlucoseSummary, NutritionalSummary, PressureSummary


def percentage(count: int, total: int) -> float:
    return count / total * 100 if total > 0 else 0.0


def average(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def status_counts(statuses: Iterable[MeasurementStatus]) -> tuple[int, int, int]:
    """Count (normal, warning, critical)."""
    statuses = list(statuses)
    return (
        statuses.count(MeasurementStatus.NORMAL),
        statuses.count(MeasurementStatus.WARNING),
        statuses.count(MeasurementStatus.CRITICAL),
    )


def summarize_glucose(readings: Iterable[GlucoseMeasurement]) -> GlucoseSummary:
    readings = list(readings)
    total = len(readings)
    normal, warning, critical = status_counts(m.status for m in readings)
    values = [m.value for m in readings]

    by_context: dict[str, list[str]] = {c.value: [] for c in GlucoseContext}
    for m in readings:
        by_context[m.context.value].append(m.id)

    return GlucoseSummary(
        total_measurements=total,
        normal_count=normal,
        warning_count=warning,
        critical_count=critical,
        normal_percentage=percentage(normal, total),
        warning_percentage=percentage(warning, total),
        critical_percentage=percentage(critical, total),
        average_value=average(values),
        min_value=min(values, default=0.0),
        max_value=max(values, default=0.0),
        by_context=by_context,
        context_counts={key: len(ids) for key, ids in by_context.items()},
    )


def summarize_pressure(readings: Iterable[PressureMeasurement]) -> PressureSummary:
    readings = list(readings)
    total = len(readings)
    normal, warning, critical = status_counts(m.status for m in readings)
    systolic = [m.systolic for m in readings]
    diastolic = [m.diastolic for m in readings]

    by_category = {c.value: 0 for c in PressureCategory}
    for m in readings:
        by_category[m.category.value] += 1

    return PressureSummary(
        total_measurements=total,
        normal_count=normal,
        warning_count=warning,
        critical_count=critical,
        normal_percentage=percentage(normal, total),
        warning_percentage=percentage(warning, total),
        critical_percentage=percentage(critical, total),
        average_systolic=average(systolic),
        average_diastolic=average(diastolic),
        min_systolic=min(systolic, default=0.0),
        max_systolic=max(systolic, default=0.0),
        min_diastolic=min(diastolic, default=0.0),
        max_diastolic=max(diastolic, default=0.0),
        by_category=by_category,
    )


def summarize_nutrition(entries: Iterable[FoodEntry]) -> NutritionalSummary:
    """Totals per food category; every category key is always present.

    Example:
        >>> summary = summarize_nutrition([bread_100g, chicken_150g, broccoli_200g])
        >>> summary.total_calories
        415
    """
    entries = list(entries)
    by_type: dict[str, list[str]] = {c.value: [] for c in FoodCategory}
    calories_by_type = {c.value: 0 for c in FoodCategory}
    quantities_by_type = {c.value: 0.0 for c in FoodCategory}
    for entry in entries:
        key = entry.category.value
        by_type[key].append(entry.id)
        calories_by_type[key] += entry.calculate_calories()
        quantities_by_type[key] += entry.quantity

    return NutritionalSummary(
        total_entries=len(entries),
        total_calories=sum(calories_by_type.values()),
        by_type=by_type,
        calories_by_type=calories_by_type,
        quantities_by_type=quantities_by_type,
    )
