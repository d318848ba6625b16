"""Tests for PerplexityApiClient."""

import json

import httpx
import pytest

from whoisrunning.infrastructure.config.settings import ResearchApiSettings
from whoisrunning.infrastructure.external.perplexity.client import (
    PerplexityApiClient,
    PerplexityApiError,
)
from whoisrunning.infrastructure.external.perplexity.types import ChatMessage


SETTINGS = ResearchApiSettings(api_key="pplx-test", base_url="https://api.example.com/")
MESSAGES = [
    ChatMessage(role="system", content="You are helpful."),
    ChatMessage(role="user", content="Who is running?"),
]


def _make_completion(**overrides: object) -> dict:
    defaults: dict = {
        "model": "sonar",
        "choices": [{"message": {"role": "assistant", "content": "1. **Jane Doe**"}}],
        "citations": ["https://example.com/a"],
        "usage": {"prompt_tokens": 10, "completion_tokens": 20, "total_tokens": 30},
    }
    defaults.update(overrides)
    return defaults


class TestChat:
    """Tests for the chat method."""

    @pytest.mark.asyncio
    async def test_request_payload_and_headers(self) -> None:
        captured: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["auth"] = request.headers["Authorization"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json=_make_completion())

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            api = PerplexityApiClient(SETTINGS, client=client)
            await api.chat(MESSAGES, max_tokens=2500, search_recency_filter="month")

        assert captured["url"] == "https://api.example.com/chat/completions"
        assert captured["auth"] == "Bearer pplx-test"
        assert captured["body"] == {
            "model": "sonar",
            "messages": [
                {"role": "system", "content": "You are helpful."},
                {"role": "user", "content": "Who is running?"},
            ],
            "temperature": 0.2,
            "max_tokens": 2500,
            "return_citations": True,
            "search_recency_filter": "month",
        }

    @pytest.mark.asyncio
    async def test_optional_fields_omitted(self) -> None:
        captured: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured.update(json.loads(request.content))
            return httpx.Response(200, json=_make_completion())

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            api = PerplexityApiClient(SETTINGS, client=client)
            await api.chat(MESSAGES, return_citations=False)

        assert captured["max_tokens"] == 2000
        assert "return_citations" not in captured
        assert "search_recency_filter" not in captured

    @pytest.mark.asyncio
    async def test_parse_response(self) -> None:
        body = _make_completion(
            citations=[
                "https://example.com/a",
                {"url": "https://example.com/b", "title": "Story B", "source": "Example"},
                {"title": "no url"},
                "",
            ]
        )
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=body))
        async with httpx.AsyncClient(transport=transport) as client:
            result = await PerplexityApiClient(SETTINGS, client=client).chat(MESSAGES)

        assert result.content == "1. **Jane Doe**"
        assert result.model == "sonar"
        assert [(c.url, c.title, c.source) for c in result.citations] == [
            ("https://example.com/a", "https://example.com/a", None),
            ("https://example.com/b", "Story B", "Example"),
        ]
        assert result.usage is not None
        assert result.usage.total_tokens == 30

    @pytest.mark.asyncio
    async def test_http_error(self) -> None:
        transport = httpx.MockTransport(
            lambda request: httpx.Response(429, text="rate limited")
        )
        async with httpx.AsyncClient(transport=transport) as client:
            api = PerplexityApiClient(SETTINGS, client=client)
            with pytest.raises(PerplexityApiError) as exc_info:
                await api.chat(MESSAGES)

        assert exc_info.value.status_code == 429
        assert str(exc_info.value) == "research-api: API request failed: 429"

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            api = PerplexityApiClient(SETTINGS, client=client)
            with pytest.raises(PerplexityApiError, match="timed out"):
                await api.chat(MESSAGES)

    @pytest.mark.asyncio
    async def test_missing_content(self) -> None:
        transport = httpx.MockTransport(
            lambda request: httpx.Response(200, json={"choices": []})
        )
        async with httpx.AsyncClient(transport=transport) as client:
            api = PerplexityApiClient(SETTINGS, client=client)
            with pytest.raises(PerplexityApiError, match="no message content"):
                await api.chat(MESSAGES)

    @pytest.mark.asyncio
    async def test_missing_api_key(self) -> None:
        api = PerplexityApiClient(ResearchApiSettings(api_key=None))

        with pytest.raises(PerplexityApiError, match="PERPLEXITY_API_KEY"):
            await api.chat(MESSAGES)
