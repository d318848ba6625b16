"""Candidate research use case.

Turns each research intent (search, detail, trending, winners, officials)
into a prompt, sends it through IResearchService and parses the answer.
Trending and winner lists pass a quality gate and fall back to hardcoded
sets when the answer is unusable.

Failure policy per intent:
    search_candidates       ResearchServiceError propagates
    get_candidate_details   placeholder candidate, is_fallback=True
    get_trending_candidates fallback set, is_fallback=True
    get_recent_winners      fallback set, is_fallback=True
    list_politicians        empty result
"""

import asyncio

from collections.abc import Callable
from datetime import date

import structlog

from whoisrunning.application.dtos.research_result_dto import (
    CandidateDetailResult,
    ResearchResult,
)
from whoisrunning.application.services import prompt_builder
from whoisrunning.application.services.fallback_data import (
    FALLBACK_TRENDING,
    FALLBACK_WINNERS,
    placeholder_candidate,
)
from whoisrunning.application.services.quality_gate import QualityGate
from whoisrunning.domain.dtos.research_dto import (
    CandidateSearchFilters,
    ResearchRequest,
    ResearchResponse,
)
from whoisrunning.domain.services.candidate_detail_parser import parse_candidate_detail
from whoisrunning.domain.services.interfaces.research_service import (
    IResearchService,
    ResearchServiceError,
)
from whoisrunning.domain.services.record_parsers import (
    parse_candidates,
    parse_officials,
    parse_trending,
    parse_winners,
)
from whoisrunning.domain.value_objects.analytics import (
    ElectedOfficial,
    TrendingEntry,
    WinnerEntry,
)
from whoisrunning.domain.value_objects.candidate import Candidate
from whoisrunning.domain.value_objects.demographic_profile import Location


logger = structlog.get_logger(__name__)

DEFAULT_MIN_RECORDS = 2


class ResearchCandidatesUseCase:
    """Research orchestration for candidate and official listings."""

    def __init__(
        self,
        research_service: IResearchService,
        trending_gate: QualityGate | None = None,
        winners_gate: QualityGate | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the use case.

        Args:
            research_service: Research backend (usually cache-wrapped)
            trending_gate: Minimum trending records before falling back
            winners_gate: Minimum winner records before falling back
            today: Reference date for parsed dates
        """
        self._research = research_service
        self._trending_gate = trending_gate or QualityGate(DEFAULT_MIN_RECORDS)
        self._winners_gate = winners_gate or QualityGate(DEFAULT_MIN_RECORDS)
        self._today = today

    async def _ask(self, request: ResearchRequest, intent: str) -> ResearchResponse:
        logger.info("Sending research request", intent=intent)
        return await self._research.research(request)

    # ------------------------------------------------------------------
    # Raw answers
    # ------------------------------------------------------------------

    async def get_candidate_profile(self, name: str) -> ResearchResponse:
        return await self._ask(prompt_builder.profile_request(name), "profile")

    async def get_candidate_ideology(self, name: str) -> ResearchResponse:
        return await self._ask(prompt_builder.ideology_request(name), "ideology")

    async def get_candidate_resources(self, name: str) -> ResearchResponse:
        return await self._ask(prompt_builder.resources_request(name), "resources")

    # ------------------------------------------------------------------
    # Parsed records
    # ------------------------------------------------------------------

    async def search_candidates(
        self, filters: CandidateSearchFilters
    ) -> ResearchResult[Candidate]:
        """Search candidates by name or by office and location.

        Raises:
            ResearchServiceError: The research backend failed
        """
        response = await self._ask(
            prompt_builder.candidate_search_request(filters), "search"
        )
        candidates = parse_candidates(
            response.content,
            state=filters.state,
            county=filters.county,
            city=filters.city,
        )
        if not candidates:
            logger.warning("No candidates parsed from research answer")
        return ResearchResult(records=tuple(candidates), citations=response.citations)

    async def get_candidate_details(self, name: str) -> CandidateDetailResult:
        """Fetch profile, ideology and resources concurrently and combine them.

        All three requests run to completion. Any research failure yields a
        placeholder candidate flagged as fallback; other errors propagate.
        """
        results = await asyncio.gather(
            self.get_candidate_profile(name),
            self.get_candidate_ideology(name),
            self.get_candidate_resources(name),
            return_exceptions=True,
        )
        errors = [r for r in results if isinstance(r, BaseException)]
        for error in errors:
            if not isinstance(error, ResearchServiceError):
                raise error
        if errors:
            logger.error(
                "Candidate detail research failed",
                candidate=name,
                errors=[str(e) for e in errors],
            )
            return CandidateDetailResult(candidate=placeholder_candidate(name), is_fallback=True)

        profile, ideology, resources = results
        candidate = parse_candidate_detail(
            name,
            profile.content,
            ideology.content,
            resources.content,
            today=self._today(),
        )
        return CandidateDetailResult(
            candidate=candidate,
            citations=profile.citations + ideology.citations + resources.citations,
        )

    async def get_trending_candidates(self) -> ResearchResult[TrendingEntry]:
        """Top candidates in the news, or the fallback set."""
        try:
            response = await self._ask(prompt_builder.trending_request(), "trending")
        except ResearchServiceError as e:
            logger.error("Trending research failed", error=str(e))
            return ResearchResult(records=FALLBACK_TRENDING, is_fallback=True)

        parsed = parse_trending(response.content)
        logger.info("Parsed trending candidates", count=len(parsed))
        return self._trending_gate.apply(
            parsed, FALLBACK_TRENDING, "trending", response.citations
        )

    async def get_recent_winners(self) -> ResearchResult[WinnerEntry]:
        """Recent election winners, or the fallback set."""
        try:
            response = await self._ask(prompt_builder.winners_request(), "winners")
        except ResearchServiceError as e:
            logger.error("Winners research failed", error=str(e))
            return ResearchResult(records=FALLBACK_WINNERS, is_fallback=True)

        parsed = parse_winners(response.content, today=self._today())
        logger.info("Parsed recent winners", count=len(parsed))
        return self._winners_gate.apply(
            parsed, FALLBACK_WINNERS, "winner", response.citations
        )

    async def list_politicians(self, location: Location) -> ResearchResult[ElectedOfficial]:
        """Currently serving officials for a location; empty on failure."""
        try:
            response = await self._ask(
                prompt_builder.politicians_request(location.display()), "politicians"
            )
        except ResearchServiceError as e:
            logger.error(
                "Politician research failed", location=location.display(), error=str(e)
            )
            return ResearchResult(records=())

        officials = parse_officials(response.content)
        logger.info(
            "Parsed elected officials", location=location.display(), count=len(officials)
        )
        return ResearchResult(records=tuple(officials), citations=response.citations)
