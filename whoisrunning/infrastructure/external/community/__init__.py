"""Community channel webhook."""

from whoisrunning.infrastructure.external.community.webhook_notifier import (
    CommunityWebhookError,
    WebhookCommunityNotifier,
)


__all__ = ["CommunityWebhookError", "WebhookCommunityNotifier"]
