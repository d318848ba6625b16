"""Checkout session creation use case."""

import logging

from whoisrunning.application.dtos.contribution_dto import CheckoutSessionDTO
from whoisrunning.domain.services.interfaces.payment_gateway import IPaymentGateway


logger = logging.getLogger(__name__)

SUCCESS_PATH = "/payment/success?session_id={CHECKOUT_SESSION_ID}"
CANCEL_PATH = "/#chip-in"


class CreateCheckoutSessionUseCase:
    """Start a one-time or monthly contribution."""

    def __init__(self, payment_gateway: IPaymentGateway, site_url: str) -> None:
        self._gateway = payment_gateway
        self._site_url = site_url.rstrip("/")

    async def execute(self, amount: float, is_recurring: bool) -> CheckoutSessionDTO:
        """Create the hosted checkout session.

        Raises:
            ValueError: amount is not greater than zero
        """
        if amount <= 0:
            raise ValueError("Invalid amount")
        session = await self._gateway.create_checkout_session(
            amount=amount,
            is_recurring=is_recurring,
            success_url=self._site_url + SUCCESS_PATH,
            cancel_url=self._site_url + CANCEL_PATH,
        )
        logger.info(
            "Created checkout session %s (%s)",
            session.id,
            "monthly" if is_recurring else "one-time",
        )
        return CheckoutSessionDTO(session_id=session.id, url=session.url)
