"""Tests for the application container."""

from unittest.mock import MagicMock

import pytest

from whoisrunning.application.usecases.research_candidates_usecase import (
    ResearchCandidatesUseCase,
)
from whoisrunning.infrastructure.cache.research_cache import CachingResearchService
from whoisrunning.infrastructure.config.settings import Settings
from whoisrunning.infrastructure.di import container as container_module
from whoisrunning.infrastructure.di.container import (
    Container,
    get_container,
    init_container,
    reset_container,
)
from whoisrunning.infrastructure.external.community.webhook_notifier import (
    WebhookCommunityNotifier,
)
from whoisrunning.infrastructure.persistence.contribution_repository_impl import (
    ContributionRepositoryImpl,
)


@pytest.fixture(autouse=True)
def _reset():
    reset_container()
    yield
    reset_container()


class TestContainerLifecycle:
    def test_get_before_init_raises(self) -> None:
        with pytest.raises(RuntimeError, match="not initialized"):
            get_container()

    def test_init_then_get(self) -> None:
        settings = Settings(env={})

        container = init_container(settings)

        assert get_container() is container
        assert container.settings is settings

    def test_reset(self) -> None:
        init_container(Settings(env={}))
        reset_container()

        assert container_module._container is None


class TestContainerWiring:
    def test_research_service_is_shared_and_cached(self) -> None:
        container = Container(Settings(env={}))

        service = container.research_service()

        assert isinstance(service, CachingResearchService)
        assert container.research_service() is service
        assert isinstance(container.research_candidates_usecase(), ResearchCandidatesUseCase)

    def test_database_is_created_once(self) -> None:
        container = Container(Settings(env={}))
        assert container.database() is container.database()

    def test_repository_bound_to_session(self) -> None:
        container = Container(Settings(env={}))
        session = MagicMock()

        repo = container.contribution_repository(session)

        assert isinstance(repo, ContributionRepositoryImpl)

    def test_error_reports_without_webhook(self) -> None:
        container = Container(Settings(env={}))
        assert container.submit_error_report_usecase()._notifier is None

    def test_error_reports_with_webhook(self) -> None:
        container = Container(
            Settings(env={"COMMUNITY_WEBHOOK_URL": "https://hooks.example.com/x"})
        )
        assert isinstance(
            container.submit_error_report_usecase()._notifier, WebhookCommunityNotifier
        )
