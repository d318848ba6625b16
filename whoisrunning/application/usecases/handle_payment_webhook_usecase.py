"""Payment webhook handling use case.

Maps verified gateway events onto the contributions table:

    checkout.session.completed      record the contribution
    invoice.payment_succeeded       record a renewal charge
    invoice.payment_failed          record the failed charge
    customer.subscription.deleted   cancel the subscription's contributions

Redelivered events are recognised by their session or invoice id and not
recorded twice.
"""

import logging

from whoisrunning.application.dtos.contribution_dto import WebhookHandlingResult
from whoisrunning.domain.entities.contribution import Contribution
from whoisrunning.domain.repositories.contribution_repository import (
    ContributionRepository,
)
from whoisrunning.infrastructure.external.stripe.types import (
    EVENT_CHECKOUT_COMPLETED,
    EVENT_INVOICE_FAILED,
    EVENT_INVOICE_PAID,
    EVENT_SUBSCRIPTION_DELETED,
    WebhookEvent,
)


logger = logging.getLogger(__name__)

# The first invoice of a subscription is already recorded by its checkout
FIRST_INVOICE_REASON = "subscription_create"


class HandlePaymentWebhookUseCase:
    """Apply one payment webhook event to the contribution records."""

    def __init__(self, contribution_repository: ContributionRepository) -> None:
        self._repo = contribution_repository

    async def execute(self, event: WebhookEvent) -> WebhookHandlingResult:
        """Handle an already verified event.

        Returns:
            WebhookHandlingResult: handled=False for event types that are
            not part of the contribution workflow
        """
        if event.type == EVENT_CHECKOUT_COMPLETED:
            ids = await self._record_checkout(event)
        elif event.type == EVENT_INVOICE_PAID:
            ids = await self._record_invoice(event, failed=False)
        elif event.type == EVENT_INVOICE_FAILED:
            ids = await self._record_invoice(event, failed=True)
        elif event.type == EVENT_SUBSCRIPTION_DELETED:
            ids = await self._cancel_subscription(event)
        else:
            logger.info(f"Unhandled event type: {event.type}")
            return WebhookHandlingResult(event_type=event.type, handled=False)

        return WebhookHandlingResult(
            event_type=event.type, handled=True, contribution_ids=tuple(ids)
        )

    async def _record_checkout(self, event: WebhookEvent) -> list[int]:
        session = event.checkout_session()
        existing = await self._repo.get_by_checkout_session_id(session.id)
        if existing is not None:
            logger.info(f"Checkout session {session.id} already recorded")
            return [existing.id] if existing.id else []

        contribution = await self._repo.create(
            Contribution(
                amount_cents=session.amount_total or 0,
                is_recurring=session.is_recurring,
                checkout_session_id=session.id,
                subscription_id=session.subscription,
                customer_id=session.customer,
                customer_email=session.customer_email,
            )
        )
        logger.info(
            f"Payment successful: session={session.id} amount=${contribution.amount:.2f} "
            f"recurring={contribution.is_recurring}"
        )
        return [contribution.id] if contribution.id else []

    async def _record_invoice(self, event: WebhookEvent, failed: bool) -> list[int]:
        invoice = event.invoice()
        if not failed and invoice.billing_reason == FIRST_INVOICE_REASON:
            logger.info(f"Invoice {invoice.id} is the first charge of a checkout")
            return []

        existing = await self._repo.get_by_invoice_id(invoice.id)
        if existing is not None:
            return [existing.id] if existing.id else []

        contribution = Contribution(
            amount_cents=invoice.amount_due if failed else invoice.amount_paid,
            is_recurring=True,
            invoice_id=invoice.id,
            subscription_id=invoice.subscription,
            customer_id=invoice.customer,
            customer_email=invoice.customer_email,
        )
        if failed:
            contribution.mark_failed()
            logger.warning(f"Recurring payment failed: invoice={invoice.id}")

        created = await self._repo.create(contribution)
        return [created.id] if created.id else []

    async def _cancel_subscription(self, event: WebhookEvent) -> list[int]:
        subscription = event.subscription()
        contributions = await self._repo.get_by_subscription_id(subscription.id)
        cancelled: list[int] = []
        for contribution in contributions:
            if not contribution.is_active:
                continue
            contribution.cancel()
            updated = await self._repo.update(contribution)
            if updated.id:
                cancelled.append(updated.id)
        logger.info(
            f"Subscription cancelled: {subscription.id} ({len(cancelled)} contributions)"
        )
        return cancelled
