"""Application container.

Builds the infrastructure adapters from Settings once per process and hands
out use cases wired to them. The research service is shared so that every
use case reads and fills the same response cache.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from whoisrunning.application.services.quality_gate import QualityGate
from whoisrunning.application.usecases.analyze_policy_impact_usecase import (
    AnalyzePolicyImpactUseCase,
)
from whoisrunning.application.usecases.create_checkout_session_usecase import (
    CreateCheckoutSessionUseCase,
)
from whoisrunning.application.usecases.get_contribution_stats_usecase import (
    GetContributionStatsUseCase,
)
from whoisrunning.application.usecases.handle_payment_webhook_usecase import (
    HandlePaymentWebhookUseCase,
)
from whoisrunning.application.usecases.lookup_location_usecase import (
    LookupLocationUseCase,
)
from whoisrunning.application.usecases.research_candidates_usecase import (
    ResearchCandidatesUseCase,
)
from whoisrunning.application.usecases.submit_error_report_usecase import (
    SubmitErrorReportUseCase,
)
from whoisrunning.domain.repositories.contribution_repository import (
    ContributionRepository,
)
from whoisrunning.domain.services.interfaces.research_service import IResearchService
from whoisrunning.infrastructure.cache.research_cache import (
    CachingResearchService,
    ResearchCache,
)
from whoisrunning.infrastructure.config.settings import Settings, get_settings
from whoisrunning.infrastructure.external.census.client import CensusApiClient
from whoisrunning.infrastructure.external.census.service import (
    CensusLocationDataService,
)
from whoisrunning.infrastructure.external.community.webhook_notifier import (
    WebhookCommunityNotifier,
)
from whoisrunning.infrastructure.external.perplexity.service import (
    PerplexityResearchService,
)
from whoisrunning.infrastructure.external.stripe.client import StripeCheckoutClient
from whoisrunning.infrastructure.persistence.contribution_repository_impl import (
    ContributionRepositoryImpl,
)
from whoisrunning.infrastructure.persistence.database import AsyncDatabase


logger = logging.getLogger(__name__)


class Container:
    """Process-wide wiring of settings, adapters and use cases."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._research_service: IResearchService | None = None
        self._database: AsyncDatabase | None = None

    # -- adapters --------------------------------------------------------

    def research_service(self) -> IResearchService:
        if self._research_service is None:
            self._research_service = CachingResearchService(
                PerplexityResearchService(self.settings.research),
                ResearchCache(ttl_seconds=self.settings.research_cache_ttl_seconds),
            )
        return self._research_service

    def database(self) -> AsyncDatabase:
        if self._database is None:
            self._database = AsyncDatabase(self.settings.get_database_url())
        return self._database

    def contribution_repository(self, session: AsyncSession) -> ContributionRepository:
        return ContributionRepositoryImpl(session)

    # -- use cases -------------------------------------------------------

    def research_candidates_usecase(self) -> ResearchCandidatesUseCase:
        return ResearchCandidatesUseCase(
            self.research_service(),
            trending_gate=QualityGate(self.settings.trending_min_records),
            winners_gate=QualityGate(self.settings.winners_min_records),
        )

    def analyze_policy_impact_usecase(self) -> AnalyzePolicyImpactUseCase:
        return AnalyzePolicyImpactUseCase(self.research_service())

    def lookup_location_usecase(self) -> LookupLocationUseCase:
        client = CensusApiClient(
            base_url=self.settings.census_base_url,
            api_key=self.settings.census_api_key,
        )
        return LookupLocationUseCase(CensusLocationDataService(client))

    def create_checkout_session_usecase(self) -> CreateCheckoutSessionUseCase:
        return CreateCheckoutSessionUseCase(
            StripeCheckoutClient(self.settings.payment),
            site_url=self.settings.payment.site_url,
        )

    def handle_payment_webhook_usecase(
        self, session: AsyncSession
    ) -> HandlePaymentWebhookUseCase:
        return HandlePaymentWebhookUseCase(self.contribution_repository(session))

    def get_contribution_stats_usecase(
        self, session: AsyncSession
    ) -> GetContributionStatsUseCase:
        return GetContributionStatsUseCase(self.contribution_repository(session))

    def submit_error_report_usecase(self) -> SubmitErrorReportUseCase:
        url = self.settings.community_webhook_url
        return SubmitErrorReportUseCase(WebhookCommunityNotifier(url) if url else None)


_container: Container | None = None


def get_container() -> Container:
    """Return the initialised container.

    Raises:
        RuntimeError: init_container() has not been called
    """
    if _container is None:
        raise RuntimeError("Container not initialized. Call init_container() first.")
    return _container


def init_container(settings: Settings | None = None) -> Container:
    """Create the process-wide container."""
    global _container
    _container = Container(settings or get_settings())
    logger.debug("Container initialized")
    return _container


def reset_container() -> None:
    global _container
    _container = None
