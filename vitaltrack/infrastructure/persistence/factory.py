"""Repository factory and handler wiring.

Backend selection follows Settings.repository_backend; only the
in-memory backend exists.

Usage:
    from vitaltrack.infrastructure.persistence.factory import build_container

    container = build_container()
    profile = await container.create_profile.handle(CreateProfileCommand(...))
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from vitaltrack.application.measurement.commands import (
    DeleteMeasurementHandler,
    RecordGlucoseHandler,
    RecordPressureHandler,
    UpdateGlucoseHandler,
    UpdatePressureHandler,
)
from vitaltrack.application.measurement.queries import (
    GetMeasurementsByRangeHandler,
    GetMeasurementStatisticsHandler,
)
from vitaltrack.application.medical_view.orchestrators import MedicalViewAssembler
from vitaltrack.application.medical_view.queries import (
    AnalyzeTrendsHandler,
    BuildMedicalViewHandler,
    ComparePeriodsHandler,
    GenerateMedicalReportHandler,
    GetHealthSummaryHandler,
)
from vitaltrack.application.nutrition.commands import (
    DeleteFoodEntryHandler,
    LogFoodEntryHandler,
    UpdateFoodEntryHandler,
)
from vitaltrack.application.nutrition.queries import (
    GetDailyNutritionHandler,
    GetFoodRecommendationsHandler,
    GetWeeklyNutritionTrendsHandler,
)
from vitaltrack.application.profile.commands import (
    CreateProfileHandler,
    DeleteProfileHandler,
    UpdateProfileHandler,
)
from vitaltrack.application.profile.queries import GetProfileHandler
from vitaltrack.application.shared.id_generator import IdGenerator

from ..config import Settings, load_settings
from ..id_generation import create_id_generator
from ..logging import setup_logging
from .in_memory import (
    InMemoryFoodEntryRepository,
    InMemoryGlucoseMeasurementRepository,
    InMemoryPressureMeasurementRepository,
    InMemoryUserProfileRepository,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Repositories:
    profiles: InMemoryUserProfileRepository
    glucose: InMemoryGlucoseMeasurementRepository
    pressure: InMemoryPressureMeasurementRepository
    food: InMemoryFoodEntryRepository


def create_repositories(settings: Settings) -> Repositories:
    """Create one repository per aggregate for the configured backend.

    Raises:
        ValueError: If the backend is not supported
    """
    if settings.repository_backend != "inmemory":
        raise ValueError(f"Unsupported repository backend: {settings.repository_backend}")
    return Repositories(
        profiles=InMemoryUserProfileRepository(),
        glucose=InMemoryGlucoseMeasurementRepository(),
        pressure=InMemoryPressureMeasurementRepository(),
        food=InMemoryFoodEntryRepository(),
    )


@dataclass(frozen=True)
class Container:
    """Wired handlers sharing one set of repositories."""

    repositories: Repositories
    id_generator: IdGenerator
    # profile
    create_profile: CreateProfileHandler
    update_profile: UpdateProfileHandler
    get_profile: GetProfileHandler
    delete_profile: DeleteProfileHandler
    # measurements
    record_glucose: RecordGlucoseHandler
    record_pressure: RecordPressureHandler
    update_glucose: UpdateGlucoseHandler
    update_pressure: UpdatePressureHandler
    delete_measurement: DeleteMeasurementHandler
    measurement_statistics: GetMeasurementStatisticsHandler
    measurements_by_range: GetMeasurementsByRangeHandler
    # nutrition
    log_food_entry: LogFoodEntryHandler
    update_food_entry: UpdateFoodEntryHandler
    delete_food_entry: DeleteFoodEntryHandler
    daily_nutrition: GetDailyNutritionHandler
    weekly_nutrition_trends: GetWeeklyNutritionTrendsHandler
    food_recommendations: GetFoodRecommendationsHandler
    # medical view
    build_medical_view: BuildMedicalViewHandler
    health_summary: GetHealthSummaryHandler
    analyze_trends: AnalyzeTrendsHandler
    compare_periods: ComparePeriodsHandler
    medical_report: GenerateMedicalReportHandler


def build_container(
    settings: Optional[Settings] = None,
    id_generator: Optional[IdGenerator] = None,
) -> Container:
    """
    Wire every handler over a fresh set of repositories.

    Logging is (re)configured from the settings.

    Args:
        settings: Settings to use (default: load_settings())
        id_generator: Override the generator chosen by settings

    Returns:
        Container with all handlers
    """
    settings = settings or load_settings()
    setup_logging(settings.log_level, settings.log_json)
    repos = create_repositories(settings)
    ids = id_generator or create_id_generator(settings)
    assembler = MedicalViewAssembler(repos.profiles, repos.glucose, repos.pressure, repos.food)

    logger.info(
        "Container built",
        backend=settings.repository_backend,
        id_strategy=settings.id_strategy,
    )

    return Container(
        repositories=repos,
        id_generator=ids,
        create_profile=CreateProfileHandler(repos.profiles, ids),
        update_profile=UpdateProfileHandler(repos.profiles),
        get_profile=GetProfileHandler(repos.profiles),
        delete_profile=DeleteProfileHandler(repos.profiles),
        record_glucose=RecordGlucoseHandler(repos.glucose, repos.profiles, ids),
        record_pressure=RecordPressureHandler(repos.pressure, repos.profiles, ids),
        update_glucose=UpdateGlucoseHandler(repos.glucose, repos.profiles),
        update_pressure=UpdatePressureHandler(repos.pressure, repos.profiles),
        delete_measurement=DeleteMeasurementHandler(repos.glucose, repos.pressure),
        measurement_statistics=GetMeasurementStatisticsHandler(repos.glucose, repos.pressure),
        measurements_by_range=GetMeasurementsByRangeHandler(repos.glucose, repos.pressure),
        log_food_entry=LogFoodEntryHandler(repos.food, repos.profiles, ids),
        update_food_entry=UpdateFoodEntryHandler(repos.food),
        delete_food_entry=DeleteFoodEntryHandler(repos.food),
        daily_nutrition=GetDailyNutritionHandler(repos.food),
        weekly_nutrition_trends=GetWeeklyNutritionTrendsHandler(repos.food),
        food_recommendations=GetFoodRecommendationsHandler(repos.profiles),
        build_medical_view=BuildMedicalViewHandler(assembler, ids),
        health_summary=GetHealthSummaryHandler(assembler),
        analyze_trends=AnalyzeTrendsHandler(assembler),
        compare_periods=ComparePeriodsHandler(assembler),
        medical_report=GenerateMedicalReportHandler(assembler),
    )
