"""
Export records.

Plain, serializable snapshots of domain entities. Entities stay the
source of truth; these models only carry their state across boundaries
(``model_dump()`` / ``model_dump_json()``).
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class LimitRangeRecord(_Record):
    min: float
    max: float


class UserProfileRecord(_Record):
    """Snapshot of a UserProfile."""

    id: str
    name: str
    birth_date: date
    weight: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    medical_conditions: list[str] = Field(default_factory=list)
    glucose_limits: dict[str, Any]
    pressure_limits: dict[str, LimitRangeRecord]
    measurement_frequency: dict[str, int]

    @classmethod
    def from_entity(cls, profile: Any) -> UserProfileRecord:
        limits = profile.glucose_limits
        return cls(
            id=profile.id,
            name=profile.name,
            birth_date=profile.birth_date,
            weight=profile.weight,
            height=profile.height,
            medical_conditions=list(profile.medical_conditions),
            glucose_limits={
                "fasting": limits.fasting.to_dict(),
                "postPrandial": limits.post_prandial.to_dict(),
                "custom": [r.to_dict() for r in limits.custom],
            },
            pressure_limits={
                "systolic": LimitRangeRecord(**profile.pressure_limits.systolic.to_dict()),
                "diastolic": LimitRangeRecord(**profile.pressure_limits.diastolic.to_dict()),
            },
            measurement_frequency={
                "glucose": profile.measurement_frequency.glucose,
                "pressure": profile.measurement_frequency.pressure,
            },
        )


class GlucoseMeasurementRecord(_Record):
    """Snapshot of a GlucoseMeasurement."""

    id: str
    user_id: str
    timestamp: datetime
    value: float
    context: str
    status: str

    @classmethod
    def from_entity(cls, measurement: Any) -> GlucoseMeasurementRecord:
        return cls(
            id=measurement.id,
            user_id=measurement.user_id,
            timestamp=measurement.timestamp,
            value=measurement.value,
            context=measurement.context.value,
            status=measurement.status.value,
        )


class PressureMeasurementRecord(_Record):
    """Snapshot of a PressureMeasurement, including its clinical category."""

    id: str
    user_id: str
    timestamp: datetime
    systolic: float
    diastolic: float
    status: str
    category: str

    @classmethod
    def from_entity(cls, measurement: Any) -> PressureMeasurementRecord:
        return cls(
            id=measurement.id,
            user_id=measurement.user_id,
            timestamp=measurement.timestamp,
            systolic=measurement.systolic,
            diastolic=measurement.diastolic,
            status=measurement.status.value,
            category=measurement.category.value,
        )


class FoodEntryRecord(_Record):
    """Snapshot of a FoodEntry with its calorie estimate."""

    id: str
    user_id: str
    timestamp: datetime
    description: str
    quantity: float
    food_type: str
    glyph: str
    calories: int

    @classmethod
    def from_entity(cls, entry: Any) -> FoodEntryRecord:
        return cls(
            id=entry.id,
            user_id=entry.user_id,
            timestamp=entry.timestamp,
            description=entry.description,
            quantity=entry.quantity,
            food_type=entry.category.value,
            glyph=entry.glyph,
            calories=entry.calculate_calories(),
        )
