"""ComparePeriodsQuery - a period against the preceding window of equal length."""

from dataclasses import dataclass

from vitaltrack.domain.medical_view.core.models.report import PeriodComparison
from vitaltrack.domain.medical_view.core.services.comparison import compare_views
from vitaltrack.domain.shared.time import DateRange

from ..orchestrators.view_assembler import MedicalViewAssembler


@dataclass(frozen=True)
class ComparePeriodsQuery:
    user_id: str
    period: DateRange


class ComparePeriodsHandler:
    def __init__(self, assembler: MedicalViewAssembler):
        self._assembler = assembler

    async def handle(self, query: ComparePeriodsQuery) -> PeriodComparison:
        current, previous = await self._assembler.assemble_with_previous(
            query.user_id, query.period
        )
        return compare_views(current, previous)
