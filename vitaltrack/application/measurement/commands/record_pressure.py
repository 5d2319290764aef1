"""RecordPressureCommand - store a classified blood pressure reading."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import structlog

from vitaltrack.application.shared.id_generator import IdGenerator
from vitaltrack.domain.measurement.core.entities.pressure_measurement import PressureMeasurement
from vitaltrack.domain.measurement.core.factories.measurement_factory import MeasurementFactory
from vitaltrack.domain.measurement.core.ports.repositories import IPressureMeasurementRepository
from vitaltrack.domain.profile.core.ports.repository import IUserProfileRepository
from vitaltrack.domain.shared.errors import ProfileNotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RecordPressureCommand:
    user_id: str
    systolic: float
    diastolic: float
    timestamp: Optional[datetime] = None


class RecordPressureHandler:
    """Handler for RecordPressureCommand."""

    def __init__(
        self,
        repository: IPressureMeasurementRepository,
        profile_repository: IUserProfileRepository,
        id_generator: IdGenerator,
    ):
        self._repository = repository
        self._profile_repository = profile_repository
        self._id_generator = id_generator

    async def handle(self, command: RecordPressureCommand) -> PressureMeasurement:
        """
        Raises:
            ProfileNotFoundError: If the profile does not exist
            InvalidMeasurementError: If the pair is invalid
        """
        profile = await self._profile_repository.find_by_id(command.user_id)
        if profile is None:
            raise ProfileNotFoundError(command.user_id)

        measurement = MeasurementFactory.create_pressure(
            measurement_id=self._id_generator.new_id(),
            user_id=command.user_id,
            systolic=command.systolic,
            diastolic=command.diastolic,
            profile=profile,
            timestamp=command.timestamp,
        )
        await self._repository.save(measurement)

        logger.info(
            "Pressure recorded",
            measurement_id=measurement.id,
            user_id=measurement.user_id,
            status=measurement.status.value,
            category=measurement.category.value,
        )
        return measurement
