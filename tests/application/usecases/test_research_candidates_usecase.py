"""Tests for ResearchCandidatesUseCase."""

from datetime import date
from unittest.mock import AsyncMock

import pytest

from whoisrunning.application.services import prompt_builder
from whoisrunning.application.services.fallback_data import (
    FALLBACK_TRENDING,
    FALLBACK_WINNERS,
)
from whoisrunning.application.services.quality_gate import QualityGate
from whoisrunning.application.usecases.research_candidates_usecase import (
    ResearchCandidatesUseCase,
)
from whoisrunning.domain.dtos.research_dto import (
    CandidateSearchFilters,
    Citation,
    ResearchRequest,
    ResearchResponse,
)
from whoisrunning.domain.services.interfaces.research_service import (
    IResearchService,
    ResearchServiceError,
)
from whoisrunning.domain.services.record_parsers import parse_trending, parse_winners
from whoisrunning.domain.value_objects.demographic_profile import Location
from whoisrunning.domain.value_objects.party import Party


CITATION = Citation(url="https://news.example.com/story", title="news.example.com")

TWO_CANDIDATES = (
    "1. **Jane Doe** - Governor (D)\n"
    "2. **John Roe** - Governor (R)\n"
)


def _response(content: str) -> ResearchResponse:
    return ResearchResponse(content=content, citations=(CITATION,))


@pytest.fixture()
def mock_research_service() -> AsyncMock:
    return AsyncMock(spec=IResearchService)


@pytest.fixture()
def usecase(mock_research_service: AsyncMock) -> ResearchCandidatesUseCase:
    return ResearchCandidatesUseCase(
        research_service=mock_research_service,
        today=lambda: date(2024, 6, 1),
    )


class TestSearchCandidates:
    """Tests for search_candidates."""

    @pytest.mark.asyncio
    async def test_parses_answer_with_location_override(
        self, usecase: ResearchCandidatesUseCase, mock_research_service: AsyncMock
    ) -> None:
        mock_research_service.research.return_value = _response(TWO_CANDIDATES)
        filters = CandidateSearchFilters(state="Texas", county="Travis")

        result = await usecase.search_candidates(filters)

        mock_research_service.research.assert_awaited_once_with(
            prompt_builder.candidate_search_request(filters)
        )
        assert [c.name for c in result.records] == ["Jane Doe", "John Roe"]
        assert all(c.state == "Texas" for c in result.records)
        assert result.citations == (CITATION,)
        assert result.is_fallback is False

    @pytest.mark.asyncio
    async def test_research_error_propagates(
        self, usecase: ResearchCandidatesUseCase, mock_research_service: AsyncMock
    ) -> None:
        mock_research_service.research.side_effect = ResearchServiceError("down")

        with pytest.raises(ResearchServiceError):
            await usecase.search_candidates(CandidateSearchFilters(name="Jane Doe"))

    @pytest.mark.asyncio
    async def test_prose_answer_gives_empty_result(
        self, usecase: ResearchCandidatesUseCase, mock_research_service: AsyncMock
    ) -> None:
        mock_research_service.research.return_value = _response("No candidates found.")

        result = await usecase.search_candidates(CandidateSearchFilters(state="Ohio"))

        assert result.records == ()
        assert result.is_fallback is False


class TestTrendingAndWinners:
    @pytest.mark.asyncio
    async def test_trending_parsed(
        self, usecase: ResearchCandidatesUseCase, mock_research_service: AsyncMock
    ) -> None:
        mock_research_service.research.return_value = _response(TWO_CANDIDATES)

        result = await usecase.get_trending_candidates()

        assert result.records == tuple(parse_trending(TWO_CANDIDATES))
        assert [e.name for e in result.records] == ["Jane Doe", "John Roe"]
        assert result.is_fallback is False
        request = mock_research_service.research.await_args.args[0]
        assert request == prompt_builder.trending_request()

    @pytest.mark.asyncio
    async def test_trending_single_record_falls_back(
        self, usecase: ResearchCandidatesUseCase, mock_research_service: AsyncMock
    ) -> None:
        mock_research_service.research.return_value = _response("1. **Jane Doe** - Governor")

        result = await usecase.get_trending_candidates()

        assert result.records == FALLBACK_TRENDING
        assert result.is_fallback is True

    @pytest.mark.asyncio
    async def test_trending_error_falls_back(
        self, usecase: ResearchCandidatesUseCase, mock_research_service: AsyncMock
    ) -> None:
        mock_research_service.research.side_effect = ResearchServiceError("timeout")

        result = await usecase.get_trending_candidates()

        assert result.records == FALLBACK_TRENDING
        assert result.is_fallback is True

    @pytest.mark.asyncio
    async def test_custom_gate_threshold(self, mock_research_service: AsyncMock) -> None:
        usecase = ResearchCandidatesUseCase(
            mock_research_service, trending_gate=QualityGate(1)
        )
        mock_research_service.research.return_value = _response("1. **Jane Doe** - Governor")

        result = await usecase.get_trending_candidates()

        assert [e.name for e in result.records] == ["Jane Doe"]

    @pytest.mark.asyncio
    async def test_winners_use_reference_date(
        self, usecase: ResearchCandidatesUseCase, mock_research_service: AsyncMock
    ) -> None:
        mock_research_service.research.return_value = _response(TWO_CANDIDATES)

        result = await usecase.get_recent_winners()

        assert result.records == tuple(parse_winners(TWO_CANDIDATES, today=date(2024, 6, 1)))
        assert result.is_fallback is False
        assert len(result.records) == 2
        for winner in result.records:
            assert winner.election_date_estimated
            assert date(2024, 3, 1) < date.fromisoformat(winner.election_date) <= date(2024, 6, 1)

    @pytest.mark.asyncio
    async def test_winners_single_record_falls_back(
        self, usecase: ResearchCandidatesUseCase, mock_research_service: AsyncMock
    ) -> None:
        mock_research_service.research.return_value = _response("1. **Jane Doe** - Governor")

        result = await usecase.get_recent_winners()

        assert result.records == FALLBACK_WINNERS
        assert result.is_fallback is True

    @pytest.mark.asyncio
    async def test_winners_error_falls_back(
        self, usecase: ResearchCandidatesUseCase, mock_research_service: AsyncMock
    ) -> None:
        mock_research_service.research.side_effect = ResearchServiceError("down")

        result = await usecase.get_recent_winners()

        assert result.records == FALLBACK_WINNERS
        assert result.is_fallback is True


class TestCandidateDetails:
    PROFILE = "Jane Doe is a Republican serving as Governor of Ohio since 2019."
    IDEOLOGY = "She supports lowering the state income tax for families."
    RESOURCES = "https://www.youtube.com/watch?v=xyz"

    def _answer(self, request: ResearchRequest) -> ResearchResponse:
        answers = {
            prompt_builder.PROFILE_QUERY: self.PROFILE,
            prompt_builder.IDEOLOGY_QUERY: self.IDEOLOGY,
            prompt_builder.RESOURCES_QUERY: self.RESOURCES,
        }
        return _response(answers[request.query])

    @pytest.mark.asyncio
    async def test_combines_three_answers(
        self, usecase: ResearchCandidatesUseCase, mock_research_service: AsyncMock
    ) -> None:
        mock_research_service.research.side_effect = self._answer

        result = await usecase.get_candidate_details("Jane Doe")

        assert mock_research_service.research.await_count == 3
        candidate = result.candidate
        assert candidate.id == "jane-doe"
        assert candidate.party is Party.REPUBLICAN
        assert candidate.office == "Governor of Ohio"
        assert candidate.state == "Ohio"
        assert candidate.key_positions == (
            "She supports lowering the state income tax for families",
        )
        assert len(candidate.resources) == 1
        assert result.is_fallback is False
        assert result.citations == (CITATION, CITATION, CITATION)

    @pytest.mark.asyncio
    async def test_any_failure_gives_placeholder(
        self, usecase: ResearchCandidatesUseCase, mock_research_service: AsyncMock
    ) -> None:
        def answer(request: ResearchRequest) -> ResearchResponse:
            if request.query == prompt_builder.RESOURCES_QUERY:
                raise ResearchServiceError("rate limited", status_code=429)
            return self._answer(request)

        mock_research_service.research.side_effect = answer

        result = await usecase.get_candidate_details("Jane Doe")

        assert result.is_fallback is True
        assert result.candidate.id == "jane-doe"
        assert result.candidate.office == "Political Office"

    @pytest.mark.asyncio
    async def test_every_failure_collected(
        self, usecase: ResearchCandidatesUseCase, mock_research_service: AsyncMock
    ) -> None:
        mock_research_service.research.side_effect = ResearchServiceError("down")

        result = await usecase.get_candidate_details("Jane Doe")

        assert mock_research_service.research.await_count == 3
        assert result.is_fallback is True

    @pytest.mark.asyncio
    async def test_unexpected_error_propagates(
        self, usecase: ResearchCandidatesUseCase, mock_research_service: AsyncMock
    ) -> None:
        def answer(request: ResearchRequest) -> ResearchResponse:
            if request.query == prompt_builder.IDEOLOGY_QUERY:
                raise RuntimeError("bug")
            return self._answer(request)

        mock_research_service.research.side_effect = answer

        with pytest.raises(RuntimeError, match="bug"):
            await usecase.get_candidate_details("Jane Doe")


class TestListPoliticians:
    @pytest.mark.asyncio
    async def test_officials_for_location(
        self, usecase: ResearchCandidatesUseCase, mock_research_service: AsyncMock
    ) -> None:
        mock_research_service.research.return_value = _response(TWO_CANDIDATES)
        location = Location(state="Texas", city="Austin")

        result = await usecase.list_politicians(location)

        request = mock_research_service.research.await_args.args[0]
        assert "serving in Austin, Texas" in request.query
        assert [(o.name, o.office) for o in result.records] == [
            ("Jane Doe", "Governor"),
            ("John Roe", "Governor"),
        ]

    @pytest.mark.asyncio
    async def test_failure_gives_empty_result(
        self, usecase: ResearchCandidatesUseCase, mock_research_service: AsyncMock
    ) -> None:
        mock_research_service.research.side_effect = ResearchServiceError("down")

        result = await usecase.list_politicians(Location(state="Texas"))

        assert result.records == ()
        assert result.is_fallback is False
