"""Queries for medical views."""

from .analyze_trends import AnalyzeTrendsHandler, AnalyzeTrendsQuery, TrendAnalysis
from .build_medical_view import BuildMedicalViewHandler, BuildMedicalViewQuery
from .compare_periods import ComparePeriodsHandler, ComparePeriodsQuery
from .generate_report import GenerateMedicalReportHandler, GenerateMedicalReportQuery
from .get_health_summary import GetHealthSummaryHandler, GetHealthSummaryQuery

__all__ = [
    "BuildMedicalViewQuery",
    "BuildMedicalViewHandler",
    "GetHealthSummaryQuery",
    "GetHealthSummaryHandler",
    "AnalyzeTrendsQuery",
    "AnalyzeTrendsHandler",
    "TrendAnalysis",
    "ComparePeriodsQuery",
    "ComparePeriodsHandler",
    "GenerateMedicalReportQuery",
    "GenerateMedicalReportHandler",
]
