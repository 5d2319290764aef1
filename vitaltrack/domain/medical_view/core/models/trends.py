"""Trend result models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TrendDirection(str, Enum):
    """Direction of a series between its first and second half."""

    INCREASING = "increasing"
    DECREASING = "decreasing"
    STABLE = "stable"
    INSUFFICIENT_DATA = "insufficient_data"


class PeriodTrend(str, Enum):
    """Change of a metric between two equal-length periods (lower is better)."""

    IMPROVING = "improving"
    STABLE = "stable"
    WORSENING = "worsening"


class GlucoseTrend(BaseModel):
    model_config = ConfigDict(frozen=True)

    direction: TrendDirection
    volatility: float = Field(0.0, ge=0, description="Population std dev of values")
    recommendation: str
    sample_size: int = Field(0, ge=0)


class PressureTrend(BaseModel):
    model_config = ConfigDict(frozen=True)

    systolic_direction: TrendDirection
    diastolic_direction: TrendDirection
    recommendation: str
    sample_size: int = Field(0, ge=0)
