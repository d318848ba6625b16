"""Webhook signature verification and event parsing.

The signature header has the form "t=<unix time>,v1=<hex digest>[,v1=...]";
each v1 value is an HMAC-SHA256 of "<t>.<raw body>" keyed with the endpoint
secret.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import time

from collections.abc import Callable

from pydantic import ValidationError

from .types import WebhookEvent


logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE_SECONDS = 300


class WebhookSignatureError(Exception):
    """The webhook payload is unsigned, mis-signed, stale or malformed."""


def compute_signature(payload: str, timestamp: int, secret: str) -> str:
    """Hex HMAC-SHA256 of "<timestamp>.<payload>"."""
    signed = f"{timestamp}.{payload}".encode()
    return hmac.new(secret.encode(), signed, hashlib.sha256).hexdigest()


def _parse_header(header: str) -> tuple[int, list[str]]:
    timestamp: int | None = None
    signatures: list[str] = []
    for item in header.split(","):
        key, _, value = item.strip().partition("=")
        if key == "t":
            try:
                timestamp = int(value)
            except ValueError as e:
                raise WebhookSignatureError("Invalid signature timestamp") from e
        elif key == "v1" and value:
            signatures.append(value)
    if timestamp is None:
        raise WebhookSignatureError("Signature header has no timestamp")
    if not signatures:
        raise WebhookSignatureError("Signature header has no v1 signature")
    return timestamp, signatures


def verify_signature(
    payload: str,
    header: str | None,
    secret: str,
    tolerance_seconds: int = DEFAULT_TOLERANCE_SECONDS,
    clock: Callable[[], float] = time.time,
) -> None:
    """Check a webhook signature header against the raw payload.

    Raises:
        WebhookSignatureError: Header missing, no matching signature, or the
            timestamp is outside the tolerance window
    """
    if not header:
        raise WebhookSignatureError("No signature header")
    timestamp, signatures = _parse_header(header)

    expected = compute_signature(payload, timestamp, secret)
    if not any(hmac.compare_digest(expected, s) for s in signatures):
        raise WebhookSignatureError("No signature matches the payload")

    if abs(clock() - timestamp) > tolerance_seconds:
        raise WebhookSignatureError("Signature timestamp outside tolerance")


def construct_event(
    payload: str,
    header: str | None,
    secret: str | None,
    tolerance_seconds: int = DEFAULT_TOLERANCE_SECONDS,
    clock: Callable[[], float] = time.time,
) -> WebhookEvent:
    """Verify (when a secret is configured) and parse a webhook event.

    Without a secret the payload is parsed unverified and a warning is
    logged; this is only meant for local development.
    """
    if secret:
        verify_signature(payload, header, secret, tolerance_seconds, clock)
    else:
        logger.warning("No webhook secret configured - skipping verification")

    try:
        return WebhookEvent.model_validate_json(payload)
    except ValidationError as e:
        raise WebhookSignatureError(f"Malformed webhook payload: {e}") from e
