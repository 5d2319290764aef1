"""Unit tests for measurement commands."""

from datetime import datetime

import pytest

from vitaltrack.application.measurement.commands import (
    DeleteMeasurementCommand,
    DeleteMeasurementHandler,
    RecordGlucoseCommand,
    RecordGlucoseHandler,
    RecordPressureCommand,
    RecordPressureHandler,
    UpdateGlucoseCommand,
    UpdateGlucoseHandler,
    UpdatePressureCommand,
    UpdatePressureHandler,
)
from vitaltrack.domain.measurement.core.value_objects.glucose_context import GlucoseContext
from vitaltrack.domain.shared.errors import (
    InvalidMeasurementError,
    MeasurementNotFoundError,
    ProfileNotFoundError,
    ValidationError,
)
from vitaltrack.domain.shared.types import MeasurementKind, MeasurementStatus


@pytest.fixture
def record_glucose(glucose_repository, profile_repository, id_generator):
    return RecordGlucoseHandler(glucose_repository, profile_repository, id_generator)


@pytest.fixture
def record_pressure(pressure_repository, profile_repository, id_generator):
    return RecordPressureHandler(pressure_repository, profile_repository, id_generator)


class TestRecordGlucoseHandler:
    """Test RecordGlucoseHandler."""

    @pytest.mark.asyncio
    async def test_record_classifies_against_profile(
        self, record_glucose, glucose_repository, stored_profile
    ):
        measurement = await record_glucose.handle(
            RecordGlucoseCommand(
                user_id="user-1",
                value=110,
                context="fasting",
                timestamp=datetime(2025, 1, 15, 7, 0),
            )
        )

        assert measurement.id == "id-1"
        assert measurement.status == MeasurementStatus.WARNING
        stored = await glucose_repository.find_by_id("id-1")
        assert stored.value == 110
        assert stored.timestamp == datetime(2025, 1, 15, 7, 0)

    @pytest.mark.asyncio
    async def test_unknown_profile(self, record_glucose, glucose_repository):
        with pytest.raises(ProfileNotFoundError):
            await record_glucose.handle(
                RecordGlucoseCommand(user_id="ghost", value=95, context="fasting")
            )
        assert glucose_repository.count() == 0

    @pytest.mark.asyncio
    async def test_invalid_value(self, record_glucose, glucose_repository, stored_profile):
        with pytest.raises(InvalidMeasurementError):
            await record_glucose.handle(
                RecordGlucoseCommand(user_id="user-1", value=0, context="fasting")
            )
        assert glucose_repository.count() == 0


class TestRecordPressureHandler:
    """Test RecordPressureHandler."""

    @pytest.mark.asyncio
    async def test_record(self, record_pressure, stored_profile):
        measurement = await record_pressure.handle(
            RecordPressureCommand(user_id="user-1", systolic=150, diastolic=85)
        )
        assert measurement.status == MeasurementStatus.CRITICAL

    @pytest.mark.asyncio
    async def test_invalid_pair(self, record_pressure, pressure_repository, stored_profile):
        with pytest.raises(InvalidMeasurementError, match="cannot be higher than systolic"):
            await record_pressure.handle(
                RecordPressureCommand(user_id="user-1", systolic=80, diastolic=90)
            )
        assert pressure_repository.count() == 0


class TestUpdateGlucoseHandler:
    """Test UpdateGlucoseHandler."""

    @pytest.mark.asyncio
    async def test_context_change_reclassifies(
        self, record_glucose, glucose_repository, profile_repository, stored_profile
    ):
        recorded = await record_glucose.handle(
            RecordGlucoseCommand(user_id="user-1", value=130, context="fasting")
        )
        assert recorded.status == MeasurementStatus.CRITICAL

        handler = UpdateGlucoseHandler(glucose_repository, profile_repository)
        updated = await handler.handle(
            UpdateGlucoseCommand(measurement_id=recorded.id, context="postPrandial")
        )

        assert updated.context == GlucoseContext.POST_PRANDIAL
        assert updated.status == MeasurementStatus.NORMAL
        stored = await glucose_repository.find_by_id(recorded.id)
        assert stored.status == MeasurementStatus.NORMAL

    @pytest.mark.asyncio
    async def test_value_change_uses_current_limits(
        self, record_glucose, glucose_repository, profile_repository, stored_profile
    ):
        recorded = await record_glucose.handle(
            RecordGlucoseCommand(user_id="user-1", value=95, context="fasting")
        )

        handler = UpdateGlucoseHandler(glucose_repository, profile_repository)
        updated = await handler.handle(UpdateGlucoseCommand(recorded.id, value=105))

        assert updated.value == 105
        assert updated.status == MeasurementStatus.WARNING

    @pytest.mark.asyncio
    async def test_invalid_update_keeps_stored_reading(
        self, record_glucose, glucose_repository, profile_repository, stored_profile
    ):
        recorded = await record_glucose.handle(
            RecordGlucoseCommand(user_id="user-1", value=95, context="fasting")
        )
        handler = UpdateGlucoseHandler(glucose_repository, profile_repository)

        with pytest.raises(InvalidMeasurementError):
            await handler.handle(
                UpdateGlucoseCommand(recorded.id, context="postPrandial", value=-1)
            )

        stored = await glucose_repository.find_by_id(recorded.id)
        assert stored.context == GlucoseContext.FASTING
        assert stored.value == 95

    @pytest.mark.asyncio
    async def test_unknown_measurement(self, glucose_repository, profile_repository):
        handler = UpdateGlucoseHandler(glucose_repository, profile_repository)

        with pytest.raises(MeasurementNotFoundError, match="Glucose measurement not found: g9"):
            await handler.handle(UpdateGlucoseCommand("g9", value=100))


class TestUpdatePressureHandler:
    """Test UpdatePressureHandler."""

    @pytest.mark.asyncio
    async def test_missing_component_keeps_current(
        self, record_pressure, pressure_repository, profile_repository, stored_profile
    ):
        recorded = await record_pressure.handle(
            RecordPressureCommand(user_id="user-1", systolic=118, diastolic=78)
        )
        handler = UpdatePressureHandler(pressure_repository, profile_repository)

        updated = await handler.handle(UpdatePressureCommand(recorded.id, systolic=135))

        assert (updated.systolic, updated.diastolic) == (135, 78)
        assert updated.status == MeasurementStatus.WARNING

    @pytest.mark.asyncio
    async def test_partial_update_still_validates_pair(
        self, record_pressure, pressure_repository, profile_repository, stored_profile
    ):
        recorded = await record_pressure.handle(
            RecordPressureCommand(user_id="user-1", systolic=118, diastolic=78)
        )
        handler = UpdatePressureHandler(pressure_repository, profile_repository)

        with pytest.raises(InvalidMeasurementError):
            await handler.handle(UpdatePressureCommand(recorded.id, diastolic=125))


class TestDeleteMeasurementHandler:
    """Test DeleteMeasurementHandler."""

    @pytest.mark.asyncio
    async def test_delete_by_kind(
        self, record_glucose, glucose_repository, pressure_repository, stored_profile
    ):
        recorded = await record_glucose.handle(
            RecordGlucoseCommand(user_id="user-1", value=95, context="fasting")
        )
        handler = DeleteMeasurementHandler(glucose_repository, pressure_repository)

        with pytest.raises(MeasurementNotFoundError):
            await handler.handle(DeleteMeasurementCommand(recorded.id, MeasurementKind.PRESSURE))

        assert await handler.handle(DeleteMeasurementCommand(recorded.id, "glucose")) is True
        assert await glucose_repository.find_by_id(recorded.id) is None

    @pytest.mark.asyncio
    async def test_unknown_kind(self, glucose_repository, pressure_repository):
        handler = DeleteMeasurementHandler(glucose_repository, pressure_repository)

        with pytest.raises(ValidationError) as exc_info:
            await handler.handle(DeleteMeasurementCommand("g1", "weight"))

        assert exc_info.value.code == "unknown_measurement_kind"
