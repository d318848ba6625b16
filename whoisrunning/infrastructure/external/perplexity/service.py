"""IResearchService implementation backed by the research API.

Wraps PerplexityApiClient: picks the system prompt and response size for the
request's purpose and converts the API response to domain DTOs.
"""

from __future__ import annotations

from whoisrunning.domain.dtos.research_dto import (
    Citation,
    ResearchPurpose,
    ResearchRequest,
    ResearchResponse,
    TokenUsage,
)
from whoisrunning.domain.services.interfaces.research_service import (
    ResearchServiceError,
)
from whoisrunning.infrastructure.config.settings import ResearchApiSettings
from whoisrunning.infrastructure.external.perplexity.client import (
    PerplexityApiClient,
    PerplexityApiError,
)
from whoisrunning.infrastructure.external.perplexity.types import (
    ChatCompletionResponse,
    ChatMessage,
)


CANDIDATE_SYSTEM_PROMPT = """You are a political research assistant that provides factual, unbiased information about political candidates. Always cite sources and provide balanced perspectives. Focus on:
- Political positions and ideology
- Voting record (if applicable)
- Public statements and quotes
- Campaign promises and platform
- Background and experience
- Recent news and developments

Return information in a structured format with clear bullet points."""

OFFICIALS_SYSTEM_PROMPT = (
    "You are a political research assistant providing factual information "
    "about current elected officials."
)

POLICY_IMPACT_SYSTEM_PROMPT = (
    "You are a policy analysis assistant that provides factual, unbiased "
    "information about how local and state policies affect different demographic "
    "groups. Focus on objective policy impacts without political bias. Always cite "
    "sources when possible. Structure your response with clear category headers "
    "and specific impacts."
)

_SYSTEM_PROMPTS: dict[ResearchPurpose, str] = {
    ResearchPurpose.CANDIDATE: CANDIDATE_SYSTEM_PROMPT,
    ResearchPurpose.OFFICIALS: OFFICIALS_SYSTEM_PROMPT,
    ResearchPurpose.POLICY_IMPACT: POLICY_IMPACT_SYSTEM_PROMPT,
}


def build_user_prompt(request: ResearchRequest) -> str:
    """User message for a request.

    "Research {name} - {query}" when a candidate is named, the bare query
    otherwise, followed by "Context: ..." when context is given.
    """
    prompt = request.query
    if request.candidate_name:
        prompt = f"Research {request.candidate_name} - {request.query}"
    if request.context:
        prompt += f"\n\nContext: {request.context}"
    return prompt


class PerplexityResearchService:
    """IResearchService implementation."""

    def __init__(
        self,
        settings: ResearchApiSettings,
        client: PerplexityApiClient | None = None,
    ) -> None:
        self._settings = settings
        self._client = client or PerplexityApiClient(settings)

    async def research(self, request: ResearchRequest) -> ResearchResponse:
        """Send the request and convert the answer.

        Raises:
            ResearchServiceError: The API call failed
        """
        messages = [
            ChatMessage(role="system", content=_SYSTEM_PROMPTS[request.purpose]),
            ChatMessage(role="user", content=build_user_prompt(request)),
        ]
        is_officials = request.purpose is ResearchPurpose.OFFICIALS
        max_tokens = (
            self._settings.impact_max_tokens
            if request.purpose is ResearchPurpose.POLICY_IMPACT
            else self._settings.max_tokens
        )

        try:
            completion = await self._client.chat(
                messages,
                max_tokens=max_tokens,
                return_citations=not is_officials,
                search_recency_filter=(
                    None if is_officials else self._settings.search_recency_filter
                ),
            )
        except PerplexityApiError as e:
            raise ResearchServiceError(str(e), status_code=e.status_code) from e

        return self._to_response(completion)

    @staticmethod
    def _to_response(completion: ChatCompletionResponse) -> ResearchResponse:
        """API response type → domain DTO."""
        usage = None
        if completion.usage is not None:
            usage = TokenUsage(
                prompt_tokens=completion.usage.prompt_tokens,
                completion_tokens=completion.usage.completion_tokens,
                total_tokens=completion.usage.total_tokens,
            )
        return ResearchResponse(
            content=completion.content,
            citations=tuple(
                Citation(url=c.url, title=c.title, source=c.source)
                for c in completion.citations
            ),
            model=completion.model,
            usage=usage,
        )
