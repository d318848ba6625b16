"""Research API client package."""

from .client import PerplexityApiClient, PerplexityApiError
from .service import PerplexityResearchService
from .types import ApiCitation, ApiUsage, ChatCompletionResponse, ChatMessage


__all__ = [
    "ApiCitation",
    "ApiUsage",
    "ChatCompletionResponse",
    "ChatMessage",
    "PerplexityApiClient",
    "PerplexityApiError",
    "PerplexityResearchService",
]
