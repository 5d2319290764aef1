"""RecordGlucoseCommand - store a classified glucose reading."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import structlog

from vitaltrack.application.shared.id_generator import IdGenerator
from vitaltrack.domain.measurement.core.entities.glucose_measurement import GlucoseMeasurement
from vitaltrack.domain.measurement.core.factories.measurement_factory import MeasurementFactory
from vitaltrack.domain.measurement.core.ports.repositories import IGlucoseMeasurementRepository
from vitaltrack.domain.profile.core.ports.repository import IUserProfileRepository
from vitaltrack.domain.shared.errors import ProfileNotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class RecordGlucoseCommand:
    """Command to record a glucose reading.

    Attributes:
        user_id: Owner profile id
        value: Glucose in mg/dL
        context: "fasting", "postPrandial" or "custom"
        timestamp: Reading time (default: now UTC)
    """

    user_id: str
    value: float
    context: str
    timestamp: Optional[datetime] = None


class RecordGlucoseHandler:
    """Handler for RecordGlucoseCommand."""

    def __init__(
        self,
        repository: IGlucoseMeasurementRepository,
        profile_repository: IUserProfileRepository,
        id_generator: IdGenerator,
    ):
        self._repository = repository
        self._profile_repository = profile_repository
        self._id_generator = id_generator

    async def handle(self, command: RecordGlucoseCommand) -> GlucoseMeasurement:
        """
        Classify the reading against the owner's limits and persist it.

        Flow:
        1. Load the owner profile
        2. Build the measurement (status from the context range)
        3. Persist

        Raises:
            ProfileNotFoundError: If the profile does not exist
            InvalidMeasurementError: If value or context is invalid
        """
        profile = await self._profile_repository.find_by_id(command.user_id)
        if profile is None:
            raise ProfileNotFoundError(command.user_id)

        measurement = MeasurementFactory.create_glucose(
            measurement_id=self._id_generator.new_id(),
            user_id=command.user_id,
            value=command.value,
            context=command.context,
            profile=profile,
            timestamp=command.timestamp,
        )
        await self._repository.save(measurement)

        logger.info(
            "Glucose recorded",
            measurement_id=measurement.id,
            user_id=measurement.user_id,
            context=measurement.context.value,
            status=measurement.status.value,
        )
        return measurement
