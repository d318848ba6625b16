"""Payment gateway package."""

from .client import PaymentGatewayError, StripeCheckoutClient, build_checkout_params
from .types import WebhookEvent
from .webhook import WebhookSignatureError, construct_event, verify_signature


__all__ = [
    "PaymentGatewayError",
    "StripeCheckoutClient",
    "WebhookEvent",
    "WebhookSignatureError",
    "build_checkout_params",
    "construct_event",
    "verify_signature",
]
