"""Queries for measurements."""

from .get_measurements_by_range import (
    GetMeasurementsByRangeHandler,
    GetMeasurementsByRangeQuery,
    MeasurementsInRange,
)
from .get_statistics import (
    GetMeasurementStatisticsHandler,
    GetMeasurementStatisticsQuery,
    MeasurementStatistics,
)

__all__ = [
    "GetMeasurementStatisticsQuery",
    "GetMeasurementStatisticsHandler",
    "MeasurementStatistics",
    "GetMeasurementsByRangeQuery",
    "GetMeasurementsByRangeHandler",
    "MeasurementsInRange",
]
