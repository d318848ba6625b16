"""Tests for WebhookCommunityNotifier."""

import json

import httpx
import pytest

from whoisrunning.infrastructure.external.community import (
    CommunityWebhookError,
    WebhookCommunityNotifier,
)


WEBHOOK_URL = "https://hooks.example.com/channel"


class TestNotify:
    @pytest.mark.asyncio
    async def test_posts_content(self) -> None:
        captured: dict = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["body"] = json.loads(request.content)
            return httpx.Response(204)

        async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
            await WebhookCommunityNotifier(WEBHOOK_URL, client=client).notify("hello")

        assert captured == {"url": WEBHOOK_URL, "body": {"content": "hello"}}

    @pytest.mark.asyncio
    async def test_rejected(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(400))
        async with httpx.AsyncClient(transport=transport) as client:
            notifier = WebhookCommunityNotifier(WEBHOOK_URL, client=client)
            with pytest.raises(CommunityWebhookError) as exc_info:
                await notifier.notify("hello")

        assert exc_info.value.status_code == 400
        assert str(exc_info.value).startswith("community-webhook: ")
