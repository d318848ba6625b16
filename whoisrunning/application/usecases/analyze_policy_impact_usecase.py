"""Demographic policy impact analysis use case."""

import logging

from collections.abc import Callable
from datetime import UTC, datetime

from whoisrunning.application.dtos.impact_analysis_dto import ImpactAnalysisResult
from whoisrunning.application.services.prompt_builder import policy_impact_request
from whoisrunning.domain.services.interfaces.research_service import IResearchService
from whoisrunning.domain.services.policy_impact_grouping import (
    group_impacts_by_category,
    summarize_impacts,
)
from whoisrunning.domain.services.policy_impact_parser import parse_policy_impacts
from whoisrunning.domain.value_objects.demographic_profile import DemographicProfile


logger = logging.getLogger(__name__)


class AnalyzePolicyImpactUseCase:
    """Explain how current policy affects one demographic profile."""

    def __init__(
        self,
        research_service: IResearchService,
        clock: Callable[[], datetime] = lambda: datetime.now(UTC),
    ) -> None:
        self._research = research_service
        self._clock = clock

    async def execute(self, profile: DemographicProfile) -> ImpactAnalysisResult:
        """Run the analysis.

        Args:
            profile: Demographics and location to analyse

        Returns:
            ImpactAnalysisResult: Impacts, grouping, summary and citations

        Raises:
            ResearchServiceError: The research backend failed
        """
        logger.info(
            "Analyzing demographics: age=%s income=%s state=%s",
            profile.age_range.value,
            profile.income_range.value,
            profile.location.state,
        )
        response = await self._research.research(policy_impact_request(profile))

        impacts = parse_policy_impacts(response.content, response.citation_urls)
        logger.info("Parsed %d impacts", len(impacts))
        if not impacts:
            logger.warning("No policy impacts parsed for %s", profile.location.display())

        return ImpactAnalysisResult(
            profile=profile,
            impacts=tuple(impacts),
            grouped=group_impacts_by_category(impacts),
            summary=summarize_impacts(profile, impacts),
            citations=response.citations,
            timestamp=self._clock(),
        )
