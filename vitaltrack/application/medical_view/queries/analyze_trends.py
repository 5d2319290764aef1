"""AnalyzeTrendsQuery - glucose and pressure directions within a period."""

from dataclasses import dataclass

from vitaltrack.domain.medical_view.core.models.trends import GlucoseTrend, PressureTrend
from vitaltrack.domain.medical_view.core.services.trends import (
    analyze_glucose_trend,
    analyze_pressure_trend,
)
from vitaltrack.domain.shared.time import DateRange

from ..orchestrators.view_assembler import MedicalViewAssembler


@dataclass(frozen=True)
class AnalyzeTrendsQuery:
    user_id: str
    period: DateRange


@dataclass(frozen=True)
class TrendAnalysis:
    glucose: GlucoseTrend
    pressure: PressureTrend


class AnalyzeTrendsHandler:
    """Handler for AnalyzeTrendsQuery.

    Fewer than two readings of a kind yields insufficient_data for that
    kind; the query itself never fails for short input.
    """

    def __init__(self, assembler: MedicalViewAssembler):
        self._assembler = assembler

    async def handle(self, query: AnalyzeTrendsQuery) -> TrendAnalysis:
        view = await self._assembler.assemble(query.user_id, query.period)
        return TrendAnalysis(
            glucose=analyze_glucose_trend(view.glucose_measurements),
            pressure=analyze_pressure_trend(view.pressure_measurements),
        )
