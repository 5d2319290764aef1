"""UpdateGlucoseCommand - correct value, context or time of a glucose reading."""

from copy import deepcopy
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import structlog

from vitaltrack.domain.measurement.core.entities.glucose_measurement import GlucoseMeasurement
from vitaltrack.domain.measurement.core.ports.repositories import IGlucoseMeasurementRepository
from vitaltrack.domain.measurement.core.value_objects.glucose_context import GlucoseContext
from vitaltrack.domain.profile.core.ports.repository import IUserProfileRepository
from vitaltrack.domain.shared.errors import MeasurementNotFoundError, ProfileNotFoundError

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class UpdateGlucoseCommand:
    """Command to update a glucose reading. None fields are kept."""

    measurement_id: str
    value: Optional[float] = None
    context: Optional[str] = None
    timestamp: Optional[datetime] = None


class UpdateGlucoseHandler:
    """Handler for UpdateGlucoseCommand.

    The reading is reclassified against the owner's current limits for
    its (possibly new) context whenever value or context changes.
    """

    def __init__(
        self,
        repository: IGlucoseMeasurementRepository,
        profile_repository: IUserProfileRepository,
    ):
        self._repository = repository
        self._profile_repository = profile_repository

    async def handle(self, command: UpdateGlucoseCommand) -> GlucoseMeasurement:
        """
        Raises:
            MeasurementNotFoundError: If the reading does not exist
            ProfileNotFoundError: If its owner profile does not exist
            InvalidMeasurementError: If value or context is invalid
        """
        stored = await self._repository.find_by_id(command.measurement_id)
        if stored is None:
            raise MeasurementNotFoundError("glucose", command.measurement_id)

        profile = await self._profile_repository.find_by_id(stored.user_id)
        if profile is None:
            raise ProfileNotFoundError(stored.user_id)

        measurement = deepcopy(stored)
        limits = profile.glucose_limits
        if command.context is not None:
            context = GlucoseContext.parse(command.context)
            measurement.update_context(context, limits.for_context(context))
        if command.value is not None:
            measurement.update_value(command.value, limits.for_context(measurement.context))
        if command.timestamp is not None:
            measurement.update_timestamp(command.timestamp)

        await self._repository.save(measurement)

        logger.info(
            "Glucose updated",
            measurement_id=measurement.id,
            status=measurement.status.value,
        )
        return measurement
