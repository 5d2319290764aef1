"""UpdatePressureCommand - correct a blood pressure reading."""

from copy import deepcopy
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import structlog

from vitaltrack.domain.measurement.core.entities.pressure_measurement import PressureMeasurement
from vitaltrack.domain.measurement.core.ports.repositories import IPressureMeasurementRepository
from vitaltrack.domain.profile.core.ports.repository import IUserProfileRepository
from vitaltrack.domain.shared.errors import MeasurementNotFoundError, ProfileNotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class UpdatePressureCommand:
    """Command to update a pressure reading.

    A missing component keeps its current value; the pair is always
    validated and reclassified as a whole.
    """

    measurement_id: str
    systolic: Optional[float] = None
    diastolic: Optional[float] = None
    timestamp: Optional[datetime] = None


class UpdatePressureHandler:
    """Handler for UpdatePressureCommand."""

    def __init__(
        self,
        repository: IPressureMeasurementRepository,
        profile_repository: IUserProfileRepository,
    ):
        self._repository = repository
        self._profile_repository = profile_repository

    async def handle(self, command: UpdatePressureCommand) -> PressureMeasurement:
        stored = await self._repository.find_by_id(command.measurement_id)
        if stored is None:
            raise MeasurementNotFoundError("pressure", command.measurement_id)

        profile = await self._profile_repository.find_by_id(stored.user_id)
        if profile is None:
            raise ProfileNotFoundError(stored.user_id)

        measurement = deepcopy(stored)
        if command.systolic is not None or command.diastolic is not None:
            measurement.update_values(
                systolic=command.systolic if command.systolic is not None else measurement.systolic,
                diastolic=(
                    command.diastolic if command.diastolic is not None else measurement.diastolic
                ),
                limits=profile.pressure_limits,
            )
        if command.timestamp is not None:
            measurement.update_timestamp(command.timestamp)

        await self._repository.save(measurement)

        logger.info(
            "Pressure updated",
            measurement_id=measurement.id,
            status=measurement.status.value,
            category=measurement.category.value,
        )
        return measurement
