"""GenerateMedicalReportQuery - report for a period."""

from dataclasses import dataclass

import structlog

from vitaltrack.domain.medical_view.core.models.report import MedicalReport
from vitaltrack.domain.medical_view.core.services.comparison import compare_views
from vitaltrack.domain.medical_view.core.services.report import build_medical_report
from vitaltrack.domain.shared.time import DateRange

from ..orchestrators.view_assembler import MedicalViewAssembler

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GenerateMedicalReportQuery:
    user_id: str
    period: DateRange


class GenerateMedicalReportHandler:
    """Handler for GenerateMedicalReportQuery.

    Flow:
    1. Assemble the period and the preceding period
    2. Compare them
    3. Build the report (summary, alerts, recommendations, narrative)

    Use MedicalReport.export_json() for a JSON rendition.
    """

    def __init__(self, assembler: MedicalViewAssembler):
        self._assembler = assembler

    async def handle(self, query: GenerateMedicalReportQuery) -> MedicalReport:
        """
        Raises:
            ProfileNotFoundError: If the profile does not exist
        """
        current, previous = await self._assembler.assemble_with_previous(
            query.user_id, query.period
        )
        report = build_medical_report(current, compare_views(current, previous))

        logger.info(
            "Medical report generated",
            user_id=query.user_id,
            period=report.period,
            health_score=report.health_summary.health_score,
            overall_trend=report.trends.overall_trend.value,
        )
        return report
