"""Contribution entity."""

from datetime import datetime

from whoisrunning.domain.entities.base import BaseEntity


class Contribution(BaseEntity):
    """A supporter payment, one-time or monthly.

    Amounts are stored in cents. Monthly contributions keep the subscription
    id so that cancellations and failed invoices can find them.
    """

    STATUS_ACTIVE = "active"
    STATUS_CANCELLED = "cancelled"
    STATUS_FAILED = "failed"

    CONTRIBUTOR_ONE_TIME = "one-time"
    CONTRIBUTOR_MONTHLY = "monthly"

    def __init__(
        self,
        amount_cents: int,
        is_recurring: bool,
        checkout_session_id: str | None = None,
        invoice_id: str | None = None,
        subscription_id: str | None = None,
        customer_id: str | None = None,
        customer_email: str | None = None,
        status: str = STATUS_ACTIVE,
        created_at: datetime | None = None,
        id: int | None = None,
    ) -> None:
        """Initialize a contribution.

        Args:
            amount_cents: Amount paid in cents
            is_recurring: True for monthly subscriptions
            checkout_session_id: Checkout session that created the payment
            invoice_id: Invoice for a recurring charge
            subscription_id: Subscription for monthly contributions
            customer_id: Payment gateway customer id
            customer_email: Contributor email, when shared
            status: active, cancelled or failed
            created_at: When the payment was recorded
            id: Contribution ID
        """
        super().__init__(id)
        self.amount_cents = amount_cents
        self.is_recurring = is_recurring
        self.checkout_session_id = checkout_session_id
        self.invoice_id = invoice_id
        self.subscription_id = subscription_id
        self.customer_id = customer_id
        self.customer_email = customer_email
        self.status = status
        self.created_at = created_at

    @property
    def amount(self) -> float:
        """Amount in dollars."""
        return self.amount_cents / 100

    @property
    def contributor_type(self) -> str:
        return self.CONTRIBUTOR_MONTHLY if self.is_recurring else self.CONTRIBUTOR_ONE_TIME

    @property
    def is_active(self) -> bool:
        return self.status == self.STATUS_ACTIVE

    def cancel(self) -> None:
        self.status = self.STATUS_CANCELLED

    def mark_failed(self) -> None:
        self.status = self.STATUS_FAILED

    def __str__(self) -> str:
        return f"${self.amount:.2f} ({self.contributor_type}, {self.status})"
