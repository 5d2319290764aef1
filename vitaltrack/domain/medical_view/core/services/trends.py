"""Trend analysis over measurement series.

Readings are sorted by timestamp (stable, so equal timestamps keep their
input order) and split into a first half of ceil(n/2) values and a second
half with the rest. Directions compare the means of both halves.

Usage:
    trend = analyze_glucose_trend(view.glucose_measurements)
    if trend.direction == TrendDirection.INCREASING:
        print(trend.recommendation)
"""

import math
from typing import Iterable, Sequence

import numpy as np

from vitaltrack.domain.measurement.core.entities.glucose_measurement import GlucoseMeasurement
from vitaltrack.domain.measurement.core.entities.pressure_measurement import PressureMeasurement

from ..models.trends import GlucoseTrend, PeriodTrend, PressureTrend, TrendDirection

MIN_TREND_SAMPLES = 2
PRESSURE_DEAD_BAND = 2.0
PERIOD_CHANGE_THRESHOLD = 5.0

INSUFFICIENT_DATA_MESSAGE = "Need more measurements for trend analysis"

GLUCOSE_RECOMMENDATIONS = {
    TrendDirection.INCREASING: (
        "Consider reducing carbohydrate intake and increasing physical activity"
    ),
    TrendDirection.DECREASING: "Glucose levels are improving, maintain current routine",
    TrendDirection.STABLE: "Glucose levels are stable, continue current management",
}

PRESSURE_RISING_MESSAGE = (
    "Consider reducing salt intake, increasing exercise, and stress management"
)
PRESSURE_IMPROVING_MESSAGE = "Pressure levels are improving, maintain current routine"
PRESSURE_STABLE_MESSAGE = "Pressure levels are relatively stable, continue current management"


def _split_halves(values: Sequence[float]) -> tuple[float, float]:
    """Mean of the first ceil(n/2) values and of the remainder."""
    cut = math.ceil(len(values) / 2)
    data = np.asarray(values, dtype=float)
    return float(np.mean(data[:cut])), float(np.mean(data[cut:]))


def _direction(values: Sequence[float], dead_band: float = 0.0) -> TrendDirection:
    first_avg, second_avg = _split_halves(values)
    if second_avg > first_avg + dead_band:
        return TrendDirection.INCREASING
    if second_avg < first_avg - dead_band:
        return TrendDirection.DECREASING
    return TrendDirection.STABLE


def analyze_glucose_trend(measurements: Iterable[GlucoseMeasurement]) -> GlucoseTrend:
    """Direction and volatility of glucose readings.

    Args:
        measurements: Readings in any order

    Returns:
        GlucoseTrend: insufficient_data with volatility 0 for fewer than
        two readings; otherwise the direction of the half means and the
        population standard deviation of all values

    Example:
        >>> trend = analyze_glucose_trend([m100, m140])  # in time order
        >>> trend.direction, trend.volatility
        (<TrendDirection.INCREASING: 'increasing'>, 20.0)
    """
    ordered = sorted(measurements, key=lambda m: m.timestamp)
    if len(ordered) < MIN_TREND_SAMPLES:
        return GlucoseTrend(
            direction=TrendDirection.INSUFFICIENT_DATA,
            volatility=0.0,
            recommendation=INSUFFICIENT_DATA_MESSAGE,
            sample_size=len(ordered),
        )

    values = [m.value for m in ordered]
    direction = _direction(values)
    return GlucoseTrend(
        direction=direction,
        volatility=float(np.std(np.asarray(values, dtype=float))),
        recommendation=GLUCOSE_RECOMMENDATIONS[direction],
        sample_size=len(values),
    )


def analyze_pressure_trend(measurements: Iterable[PressureMeasurement]) -> PressureTrend:
    """Systolic and diastolic directions with a +/-2 mmHg dead band."""
    ordered = sorted(measurements, key=lambda m: m.timestamp)
    if len(ordered) < MIN_TREND_SAMPLES:
        return PressureTrend(
            systolic_direction=TrendDirection.INSUFFICIENT_DATA,
            diastolic_direction=TrendDirection.INSUFFICIENT_DATA,
            recommendation=INSUFFICIENT_DATA_MESSAGE,
            sample_size=len(ordered),
        )

    systolic = _direction([m.systolic for m in ordered], PRESSURE_DEAD_BAND)
    diastolic = _direction([m.diastolic for m in ordered], PRESSURE_DEAD_BAND)

    if TrendDirection.INCREASING in (systolic, diastolic):
        recommendation = PRESSURE_RISING_MESSAGE
    elif systolic == diastolic == TrendDirection.DECREASING:
        recommendation = PRESSURE_IMPROVING_MESSAGE
    else:
        recommendation = PRESSURE_STABLE_MESSAGE

    return PressureTrend(
        systolic_direction=systolic,
        diastolic_direction=diastolic,
        recommendation=recommendation,
        sample_size=len(ordered),
    )


def _mean_or_zero(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(np.asarray(values, dtype=float)))


def compare_periods(
    current_values: Sequence[float],
    previous_values: Sequence[float],
    threshold: float = PERIOD_CHANGE_THRESHOLD,
) -> PeriodTrend:
    """Compare the mean of two periods; lower values count as improvement.

    An empty period has mean 0, so a period with data following an empty
    one reads as worsening.

    Example:
        >>> compare_periods([110, 120], [130, 140])
        <PeriodTrend.IMPROVING: 'improving'>
        >>> compare_periods([120], [118])
        <PeriodTrend.STABLE: 'stable'>
    """
    current = _mean_or_zero(current_values)
    previous = _mean_or_zero(previous_values)
    if abs(current - previous) < threshold:
        return PeriodTrend.STABLE
    if current < previous:
        return PeriodTrend.IMPROVING
    return PeriodTrend.WORSENING


def overall_period_trend(trends: Iterable[PeriodTrend]) -> PeriodTrend:
    """Majority vote between improving and worsening; ties are stable."""
    trends = list(trends)
    improving = trends.count(PeriodTrend.IMPROVING)
    worsening = trends.count(PeriodTrend.WORSENING)
    if improving > worsening:
        return PeriodTrend.IMPROVING
    if worsening > improving:
        return PeriodTrend.WORSENING
    return PeriodTrend.STABLE
