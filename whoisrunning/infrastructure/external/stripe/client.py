"""Payment gateway REST client for hosted checkout sessions."""

from __future__ import annotations

import logging

from typing import Any

import httpx

from whoisrunning.domain.services.interfaces.payment_gateway import CheckoutSession
from whoisrunning.infrastructure.config.settings import PaymentSettings
from whoisrunning.infrastructure.exceptions import ExternalServiceError


logger = logging.getLogger(__name__)

PRODUCT_NAME = "Support WhoIsRunning.org"
PRODUCT_DESCRIPTION = "Keep democracy free, accurate, and accessible for everyone"


class PaymentGatewayError(ExternalServiceError):
    """Payment gateway client error."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__("payment-gateway", message, status_code)


def build_checkout_params(
    amount: float, is_recurring: bool, success_url: str, cancel_url: str
) -> dict[str, Any]:
    """Form parameters for creating a checkout session.

    Raises:
        ValueError: amount is not greater than zero
    """
    if amount <= 0:
        raise ValueError("Invalid amount")

    params: dict[str, Any] = {
        "payment_method_types[0]": "card",
        "line_items[0][quantity]": 1,
        "line_items[0][price_data][currency]": "usd",
        "line_items[0][price_data][product_data][name]": PRODUCT_NAME,
        "line_items[0][price_data][product_data][description]": PRODUCT_DESCRIPTION,
        "line_items[0][price_data][unit_amount]": round(amount * 100),
        "mode": "subscription" if is_recurring else "payment",
        "success_url": success_url,
        "cancel_url": cancel_url,
        "metadata[contributorType]": "monthly" if is_recurring else "one-time",
    }
    if is_recurring:
        params["line_items[0][price_data][recurring][interval]"] = "month"
    return params


class StripeCheckoutClient:
    """IPaymentGateway implementation (httpx async)."""

    CHECKOUT_ENDPOINT = "v1/checkout/sessions"

    def __init__(
        self,
        settings: PaymentSettings,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings
        self._external_client = client
        self._owns_client = client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._external_client is not None:
            return self._external_client
        return httpx.AsyncClient(timeout=30.0)

    async def create_checkout_session(
        self,
        amount: float,
        is_recurring: bool,
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        """Create a hosted checkout session.

        Raises:
            ValueError: amount is not greater than zero
            PaymentGatewayError: Secret key missing or the API call failed
        """
        params = build_checkout_params(amount, is_recurring, success_url, cancel_url)
        if not self._settings.secret_key:
            raise PaymentGatewayError("STRIPE_SECRET_KEY not configured")

        url = f"{self._settings.base_url.rstrip('/')}/{self.CHECKOUT_ENDPOINT}"
        client = await self._get_client()
        try:
            response = await client.post(
                url,
                data=params,
                auth=(self._settings.secret_key, ""),
            )
            response.raise_for_status()
            data: dict[str, Any] = response.json()
        except httpx.HTTPStatusError as e:
            logger.error("Checkout session creation failed: %d", e.response.status_code)
            raise PaymentGatewayError(
                f"Payment creation failed: {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise PaymentGatewayError(f"HTTP error: {e}") from e
        except ValueError as e:
            raise PaymentGatewayError("Gateway returned a non-JSON body") from e
        finally:
            if self._owns_client:
                await client.aclose()

        if "id" not in data:
            raise PaymentGatewayError("Gateway response has no session id")
        return CheckoutSession(id=data["id"], url=data.get("url"))
