"""DeleteMeasurementCommand - remove a glucose or pressure reading."""

from dataclasses import dataclass
from typing import Union

import structlog

from vitaltrack.domain.measurement.core.ports.repositories import (
    IGlucoseMeasurementRepository,
    IPressureMeasurementRepository,
)
from vitaltrack.domain.shared.errors import MeasurementNotFoundError
from vitaltrack.domain.shared.types import MeasurementKind

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DeleteMeasurementCommand:
    """
    Attributes:
        measurement_id: Reading to delete
        kind: MeasurementKind.GLUCOSE or MeasurementKind.PRESSURE
    """

    measurement_id: str
    kind: Union[MeasurementKind, str]


class DeleteMeasurementHandler:
    """Handler for DeleteMeasurementCommand."""

    def __init__(
        self,
        glucose_repository: IGlucoseMeasurementRepository,
        pressure_repository: IPressureMeasurementRepository,
    ):
        self._repositories = {
            MeasurementKind.GLUCOSE: glucose_repository,
            MeasurementKind.PRESSURE: pressure_repository,
        }

    async def handle(self, command: DeleteMeasurementCommand) -> bool:
        """
        Raises:
            MeasurementNotFoundError: If no reading of that kind has the id
            ValidationError: If kind is not a measurement kind
        """
        kind = MeasurementKind.parse(command.kind)
        if not await self._repositories[kind].delete(command.measurement_id):
            raise MeasurementNotFoundError(kind.value, command.measurement_id)

        logger.info("Measurement deleted", measurement_id=command.measurement_id, kind=kind.value)
        return True
