"""BuildMedicalViewQuery - bind a profile to one period of records."""

from dataclasses import dataclass

import structlog

from vitaltrack.application.shared.id_generator import IdGenerator
from vitaltrack.domain.medical_view.core.entities.medical_view import MedicalView
from vitaltrack.domain.shared.time import DateRange

from ..orchestrators.view_assembler import MedicalViewAssembler

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class BuildMedicalViewQuery:
    user_id: str
    period: DateRange


class BuildMedicalViewHandler:
    """Handler for BuildMedicalViewQuery. The view gets a fresh identifier."""

    def __init__(self, assembler: MedicalViewAssembler, id_generator: IdGenerator):
        self._assembler = assembler
        self._id_generator = id_generator

    async def handle(self, query: BuildMedicalViewQuery) -> MedicalView:
        """
        Raises:
            ProfileNotFoundError: If the profile does not exist
        """
        view = await self._assembler.assemble(
            query.user_id, query.period, view_id=self._id_generator.new_id()
        )
        logger.info(
            "Medical view built",
            view_id=view.id,
            user_id=view.user_id,
            glucose=len(view.glucose_measurements),
            pressure=len(view.pressure_measurements),
            food=len(view.food_entries),
        )
        return view
