"""Research request/response DTOs

Data passed across the research service port. Plain dataclasses so the
domain layer does not depend on the HTTP client or its response models.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ResearchPurpose(Enum):
    """What a research request is for; selects the system prompt and
    response size on the research API side."""

    CANDIDATE = "candidate"
    OFFICIALS = "officials"
    POLICY_IMPACT = "policy_impact"


@dataclass(frozen=True)
class ResearchRequest:
    """One question to the research API."""

    query: str
    candidate_name: str | None = None
    context: str | None = None
    purpose: ResearchPurpose = ResearchPurpose.CANDIDATE

    def cache_params(self) -> dict[str, Any]:
        """Request parameters in declaration order, as used for cache keys."""
        params: dict[str, Any] = {"query": self.query}
        if self.candidate_name is not None:
            params["candidateName"] = self.candidate_name
        if self.context is not None:
            params["context"] = self.context
        params["purpose"] = self.purpose.value
        return params


@dataclass(frozen=True)
class Citation:
    """A source cited by the research API."""

    url: str
    title: str
    source: str | None = None


@dataclass(frozen=True)
class TokenUsage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True)
class ResearchResponse:
    """Answer text plus its citations."""

    content: str
    citations: tuple[Citation, ...] = ()
    model: str | None = None
    usage: TokenUsage | None = None

    @property
    def citation_urls(self) -> list[str]:
        return [citation.url for citation in self.citations]


@dataclass
class CandidateSearchFilters:
    """Caller-supplied filters for a candidate search."""

    name: str | None = None
    state: str | None = None
    county: str | None = None
    city: str | None = None
    office: str | None = None
