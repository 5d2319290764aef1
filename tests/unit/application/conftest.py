"""Application test fixtures: in-memory repositories and deterministic ids."""

import pytest
import pytest_asyncio

from vitaltrack.infrastructure.id_generation import SequentialIdGenerator
from vitaltrack.infrastructure.persistence.in_memory import (
    InMemoryFoodEntryRepository,
    InMemoryGlucoseMeasurementRepository,
    InMemoryPressureMeasurementRepository,
    InMemoryUserProfileRepository,
)


@pytest.fixture
def profile_repository():
    return InMemoryUserProfileRepository()


@pytest.fixture
def glucose_repository():
    return InMemoryGlucoseMeasurementRepository()


@pytest.fixture
def pressure_repository():
    return InMemoryPressureMeasurementRepository()


@pytest.fixture
def food_repository():
    return InMemoryFoodEntryRepository()


@pytest.fixture
def id_generator():
    return SequentialIdGenerator(prefix="id-")


@pytest_asyncio.fixture
async def stored_profile(profile_repository, profile):
    await profile_repository.save(profile)
    return profile
