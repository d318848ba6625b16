"""Research service port."""

from typing import Protocol

from whoisrunning.domain.dtos.research_dto import ResearchRequest, ResearchResponse


class ResearchServiceError(Exception):
    """Raised when the research backend cannot answer a request."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class IResearchService(Protocol):
    """Answers free-text research questions with cited prose.

    Implementations raise ResearchServiceError on any backend failure.
    """

    async def research(self, request: ResearchRequest) -> ResearchResponse:
        """Send one research request.

        Args:
            request: Query, optional candidate name and context

        Returns:
            ResearchResponse: Answer text and citations
        """
        ...
