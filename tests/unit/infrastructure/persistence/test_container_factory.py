"""Unit tests for repository factory and handler wiring."""

from datetime import date

import pytest

from vitaltrack.application.profile.commands import CreateProfileCommand
from vitaltrack.application.profile.queries import GetProfileQuery
from vitaltrack.infrastructure.config import Settings
from vitaltrack.infrastructure.id_generation import SequentialIdGenerator, UuidIdGenerator
from vitaltrack.infrastructure.persistence.factory import build_container, create_repositories
from vitaltrack.infrastructure.persistence.in_memory import InMemoryUserProfileRepository


class TestCreateRepositories:
    """Test create_repositories."""

    def test_in_memory_backend(self):
        repositories = create_repositories(Settings())

        assert isinstance(repositories.profiles, InMemoryUserProfileRepository)
        assert repositories.glucose is not repositories.pressure


class TestBuildContainer:
    """Test build_container wiring."""

    def test_id_strategy_from_settings(self):
        container = build_container(Settings(id_strategy="sequential", log_level="WARNING"))
        assert isinstance(container.id_generator, SequentialIdGenerator)

    def test_explicit_id_generator_wins(self):
        container = build_container(
            Settings(id_strategy="uuid", log_level="WARNING"),
            id_generator=SequentialIdGenerator(prefix="t-"),
        )
        assert not isinstance(container.id_generator, UuidIdGenerator)

    @pytest.mark.asyncio
    async def test_handlers_share_repositories(self):
        container = build_container(Settings(id_strategy="sequential", log_level="WARNING"))

        created = await container.create_profile.handle(
            CreateProfileCommand(
                name="Ana", birth_date=date(1990, 1, 1), weight=60.0, height=165.0
            )
        )
        found = await container.get_profile.handle(GetProfileQuery(created.id))

        assert found.id == "1"
        assert container.repositories.profiles.count() == 1

    def test_containers_do_not_share_state(self):
        first = build_container(Settings(log_level="WARNING"))
        second = build_container(Settings(log_level="WARNING"))

        assert first.repositories.profiles is not second.repositories.profiles
