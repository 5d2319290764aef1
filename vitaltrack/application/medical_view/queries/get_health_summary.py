"""GetHealthSummaryQuery - clinical summary of a period."""

from dataclasses import dataclass

import structlog

from vitaltrack.domain.medical_view.core.models.summaries import MedicalSummary
from vitaltrack.domain.medical_view.core.services.summary import generate_medical_summary
from vitaltrack.domain.shared.time import DateRange

from ..orchestrators.view_assembler import MedicalViewAssembler

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GetHealthSummaryQuery:
    user_id: str
    period: DateRange


class GetHealthSummaryHandler:
    """Handler for GetHealthSummaryQuery."""

    def __init__(self, assembler: MedicalViewAssembler):
        self._assembler = assembler

    async def handle(self, query: GetHealthSummaryQuery) -> MedicalSummary:
        view = await self._assembler.assemble(query.user_id, query.period)
        summary = generate_medical_summary(view)
        logger.info(
            "Health summary generated",
            user_id=query.user_id,
            health_score=summary.health_score,
            overall_status=summary.overall_status,
            alerts=len(summary.alerts),
        )
        return summary
