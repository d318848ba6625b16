"""Tests for webhook signature verification."""

import json

import pytest

from whoisrunning.infrastructure.external.stripe.webhook import (
    WebhookSignatureError,
    compute_signature,
    construct_event,
    verify_signature,
)


SECRET = "whsec_test"
NOW = 1_700_000_000
PAYLOAD = json.dumps(
    {
        "id": "evt_1",
        "type": "checkout.session.completed",
        "created": NOW,
        "data": {"object": {"id": "cs_1", "mode": "payment", "amount_total": 1000}},
    }
)


def _header(payload: str = PAYLOAD, timestamp: int = NOW, secret: str = SECRET) -> str:
    return f"t={timestamp},v1={compute_signature(payload, timestamp, secret)}"


class TestVerifySignature:
    def test_valid(self) -> None:
        verify_signature(PAYLOAD, _header(), SECRET, clock=lambda: NOW + 10)

    def test_any_matching_v1_accepted(self) -> None:
        header = f"t={NOW},v1=deadbeef,v1={compute_signature(PAYLOAD, NOW, SECRET)}"
        verify_signature(PAYLOAD, header, SECRET, clock=lambda: NOW)

    def test_tampered_payload(self) -> None:
        with pytest.raises(WebhookSignatureError, match="No signature matches"):
            verify_signature(PAYLOAD + " ", _header(), SECRET, clock=lambda: NOW)

    def test_wrong_secret(self) -> None:
        with pytest.raises(WebhookSignatureError):
            verify_signature(PAYLOAD, _header(secret="other"), SECRET, clock=lambda: NOW)

    def test_stale_timestamp(self) -> None:
        with pytest.raises(WebhookSignatureError, match="tolerance"):
            verify_signature(PAYLOAD, _header(), SECRET, clock=lambda: NOW + 301)

    @pytest.mark.parametrize(
        "header", [None, "", "v1=abc", f"t={NOW}", "t=soon,v1=abc"]
    )
    def test_malformed_header(self, header: str | None) -> None:
        with pytest.raises(WebhookSignatureError):
            verify_signature(PAYLOAD, header, SECRET, clock=lambda: NOW)


class TestConstructEvent:
    def test_verified_event(self) -> None:
        event = construct_event(PAYLOAD, _header(), SECRET, clock=lambda: NOW)

        assert event.type == "checkout.session.completed"
        session = event.checkout_session()
        assert session.id == "cs_1"
        assert session.amount_total == 1000
        assert session.is_recurring is False

    def test_without_secret_parses_unverified(self) -> None:
        event = construct_event(PAYLOAD, None, None)
        assert event.id == "evt_1"

    def test_malformed_payload(self) -> None:
        with pytest.raises(WebhookSignatureError, match="Malformed"):
            construct_event('{"id": "evt_1"}', None, None)
