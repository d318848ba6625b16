"""Payment gateway (Stripe) webhook event models.

Only the fields the contribution workflow reads are declared; everything
else in the payload is ignored.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


EVENT_CHECKOUT_COMPLETED = "checkout.session.completed"
EVENT_SUBSCRIPTION_DELETED = "customer.subscription.deleted"
EVENT_INVOICE_PAID = "invoice.payment_succeeded"
EVENT_INVOICE_FAILED = "invoice.payment_failed"


def _expandable_id(value: Any) -> Any:
    """Expanded objects ({"id": ...}) collapse to their id."""
    if isinstance(value, dict):
        return value.get("id")
    return value


class _GatewayObject(BaseModel):
    model_config = ConfigDict(extra="ignore")


class CheckoutSessionObject(_GatewayObject):
    id: str
    mode: str = "payment"
    amount_total: int | None = None
    currency: str | None = None
    customer: str | None = None
    customer_email: str | None = None
    subscription: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)

    @field_validator("customer", "subscription", mode="before")
    @classmethod
    def collapse_expanded_ids(cls, value: Any) -> Any:
        return _expandable_id(value)

    @property
    def is_recurring(self) -> bool:
        return self.mode == "subscription"


class SubscriptionObject(_GatewayObject):
    id: str
    customer: str | None = None
    status: str | None = None

    @field_validator("customer", mode="before")
    @classmethod
    def collapse_expanded_ids(cls, value: Any) -> Any:
        return _expandable_id(value)


class InvoiceObject(_GatewayObject):
    id: str
    amount_paid: int = 0
    amount_due: int = 0
    customer: str | None = None
    customer_email: str | None = None
    subscription: str | None = None
    billing_reason: str | None = None

    @field_validator("customer", "subscription", mode="before")
    @classmethod
    def collapse_expanded_ids(cls, value: Any) -> Any:
        return _expandable_id(value)


class EventData(_GatewayObject):
    object: dict[str, Any]


class WebhookEvent(_GatewayObject):
    """A webhook event envelope; `data.object` is validated per event type."""

    id: str
    type: str
    created: int | None = None
    data: EventData

    def checkout_session(self) -> CheckoutSessionObject:
        return CheckoutSessionObject.model_validate(self.data.object)

    def subscription(self) -> SubscriptionObject:
        return SubscriptionObject.model_validate(self.data.object)

    def invoice(self) -> InvoiceObject:
        return InvoiceObject.model_validate(self.data.object)
