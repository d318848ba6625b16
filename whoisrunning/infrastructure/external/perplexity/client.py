"""Research API client.

httpx async client for the Perplexity `/chat/completions` endpoint. One
call sends a system prompt and a user prompt and returns the first choice's
message content with the answer's citations.
"""

from __future__ import annotations

import logging

from typing import Any

import httpx

from whoisrunning.infrastructure.config.settings import ResearchApiSettings
from whoisrunning.infrastructure.exceptions import ExternalServiceError

from .types import ApiCitation, ApiUsage, ChatCompletionResponse, ChatMessage


logger = logging.getLogger(__name__)


class PerplexityApiError(ExternalServiceError):
    """Research API client error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__("research-api", message, status_code)


class PerplexityApiClient:
    """Research API client (httpx async)."""

    ENDPOINT = "chat/completions"

    def __init__(
        self,
        settings: ResearchApiSettings,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._external_client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client, or a new one owned by this call."""
        if self._external_client is not None:
            return self._external_client
        return httpx.AsyncClient(timeout=self._settings.timeout)

    async def chat(
        self,
        messages: list[ChatMessage],
        *,
        max_tokens: int | None = None,
        return_citations: bool = True,
        search_recency_filter: str | None = None,
    ) -> ChatCompletionResponse:
        """Send a chat completion request.

        Args:
            messages: System and user messages
            max_tokens: Response size limit (default from settings)
            return_citations: Ask the API to include citations
            search_recency_filter: Restrict web search to a period such as
                "month"; None omits the filter

        Returns:
            ChatCompletionResponse: First choice content, citations and usage

        Raises:
            PerplexityApiError: API key missing, HTTP error, timeout or an
                unexpected response body
        """
        if not self._settings.api_key:
            raise PerplexityApiError("PERPLEXITY_API_KEY not configured")

        payload: dict[str, Any] = {
            "model": self._settings.model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
            "temperature": self._settings.temperature,
            "max_tokens": max_tokens or self._settings.max_tokens,
        }
        if return_citations:
            payload["return_citations"] = True
        if search_recency_filter:
            payload["search_recency_filter"] = search_recency_filter

        data = await self._request(payload)
        return self._parse_response(data)

    async def _request(self, payload: dict[str, Any]) -> dict[str, Any]:
        """Execute the API request."""
        url = f"{self._settings.base_url.rstrip('/')}/{self.ENDPOINT}"
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {self._settings.api_key}",
        }
        client = await self._get_client()

        try:
            response = await client.post(url, json=payload, headers=headers)
            response.raise_for_status()
            data: dict[str, Any] = response.json()
            return data
        except httpx.HTTPStatusError as e:
            logger.error(
                "Research API error %d: %s",
                e.response.status_code,
                e.response.text[:500],
            )
            raise PerplexityApiError(
                f"API request failed: {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.TimeoutException as e:
            raise PerplexityApiError("API request timed out") from e
        except httpx.HTTPError as e:
            raise PerplexityApiError(f"HTTP error: {e}") from e
        except ValueError as e:
            raise PerplexityApiError("API returned a non-JSON body") from e
        finally:
            if self._owns_client:
                await client.aclose()

    @staticmethod
    def _parse_response(data: dict[str, Any]) -> ChatCompletionResponse:
        """Convert the response JSON to ChatCompletionResponse."""
        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise PerplexityApiError("API response has no message content") from e

        raw_usage = data.get("usage")
        usage = None
        if isinstance(raw_usage, dict):
            usage = ApiUsage(
                prompt_tokens=int(raw_usage.get("prompt_tokens", 0)),
                completion_tokens=int(raw_usage.get("completion_tokens", 0)),
                total_tokens=int(raw_usage.get("total_tokens", 0)),
            )

        return ChatCompletionResponse(
            content=content or "",
            model=data.get("model"),
            citations=[
                c for c in (_parse_citation(raw) for raw in data.get("citations") or []) if c
            ],
            usage=usage,
        )


def _parse_citation(raw: Any) -> ApiCitation | None:
    """Citations arrive either as bare URL strings or as objects."""
    if isinstance(raw, str):
        return ApiCitation(url=raw, title=raw) if raw else None
    if isinstance(raw, dict):
        url = raw.get("url")
        if not url:
            return None
        title = raw.get("title") or raw.get("text") or url
        return ApiCitation(url=url, title=title, source=raw.get("source"))
    return None
