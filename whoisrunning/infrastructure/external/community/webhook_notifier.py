"""Chat webhook notifier (Discord/Slack style `{"content": ...}` payload)."""

import logging

import httpx

from whoisrunning.infrastructure.exceptions import ExternalServiceError


logger = logging.getLogger(__name__)


class CommunityWebhookError(ExternalServiceError):
    """Community webhook delivery error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__("community-webhook", message, status_code)


class WebhookCommunityNotifier:
    """ICommunityNotifier implementation."""

    def __init__(self, webhook_url: str, client: httpx.AsyncClient | None = None) -> None:
        self._webhook_url = webhook_url
        self._external_client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._external_client is not None:
            return self._external_client
        return httpx.AsyncClient(timeout=10.0)

    async def notify(self, content: str) -> None:
        """POST the message.

        Raises:
            CommunityWebhookError: Delivery failed
        """
        client = await self._get_client()
        try:
            response = await client.post(self._webhook_url, json={"content": content})
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise CommunityWebhookError(
                f"Webhook rejected the message: {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise CommunityWebhookError(f"HTTP error: {e}") from e
        finally:
            if self._owns_client:
                await client.aclose()
