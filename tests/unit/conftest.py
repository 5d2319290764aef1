"""Unit test fixtures.

Builders for a reference profile and records with explicit statuses so
aggregation tests do not depend on the classification rules.
"""

from datetime import date, datetime, timedelta

import pytest

from vitaltrack.domain.measurement.core.entities.glucose_measurement import GlucoseMeasurement
from vitaltrack.domain.measurement.core.entities.pressure_measurement import PressureMeasurement
from vitaltrack.domain.nutrition.core.entities.food_entry import FoodEntry
from vitaltrack.domain.profile.core.entities.user_profile import UserProfile
from vitaltrack.domain.profile.core.factories.profile_factory import UserProfileFactory
from vitaltrack.domain.profile.core.value_objects.limits import (
    GlucoseLimits,
    LimitRange,
    PressureLimits,
)
from vitaltrack.domain.shared.types import MeasurementStatus

BASE_TIME = datetime(2025, 1, 15, 8, 0)


@pytest.fixture
def base_time() -> datetime:
    return BASE_TIME


@pytest.fixture
def profile() -> UserProfile:
    """Diabetic profile with fasting 70-100, post-prandial 100-140, 110-120/70-80 mmHg."""
    return UserProfileFactory.create(
        profile_id="user-1",
        name="María García",
        birth_date=date(1980, 5, 15),
        weight=70.0,
        height=170.0,
        glucose_limits=GlucoseLimits(
            fasting=LimitRange(min=70, max=100),
            post_prandial=LimitRange(min=100, max=140),
        ),
        pressure_limits=PressureLimits(
            systolic=LimitRange(min=110, max=120),
            diastolic=LimitRange(min=70, max=80),
        ),
        medical_conditions=["diabetes"],
    )


@pytest.fixture
def make_glucose():
    def _make(
        measurement_id: str,
        value: float,
        status: MeasurementStatus = MeasurementStatus.NORMAL,
        context: str = "fasting",
        minutes: int = 0,
        user_id: str = "user-1",
    ) -> GlucoseMeasurement:
        return GlucoseMeasurement(
            id=measurement_id,
            user_id=user_id,
            value=value,
            context=context,
            status=status,
            timestamp=BASE_TIME + timedelta(minutes=minutes),
        )

    return _make


@pytest.fixture
def make_pressure():
    def _make(
        measurement_id: str,
        systolic: float,
        diastolic: float,
        status: MeasurementStatus = MeasurementStatus.NORMAL,
        minutes: int = 0,
        user_id: str = "user-1",
    ) -> PressureMeasurement:
        return PressureMeasurement(
            id=measurement_id,
            user_id=user_id,
            systolic=systolic,
            diastolic=diastolic,
            status=status,
            timestamp=BASE_TIME + timedelta(minutes=minutes),
        )

    return _make


@pytest.fixture
def make_food():
    def _make(
        entry_id: str,
        description: str,
        quantity: float,
        category: str | None = None,
        minutes: int = 0,
        user_id: str = "user-1",
    ) -> FoodEntry:
        return FoodEntry(
            id=entry_id,
            user_id=user_id,
            description=description,
            quantity=quantity,
            category=category,
            timestamp=BASE_TIME + timedelta(minutes=minutes),
        )

    return _make
