"""Payment gateway port."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class CheckoutSession:
    id: str
    url: str | None = None


class IPaymentGateway(Protocol):
    """Creates hosted checkout sessions for supporter contributions."""

    async def create_checkout_session(
        self,
        amount: float,
        is_recurring: bool,
        success_url: str,
        cancel_url: str,
    ) -> CheckoutSession:
        """Create a checkout session.

        Args:
            amount: Amount in dollars, greater than zero
            is_recurring: Monthly subscription instead of a one-time payment
            success_url: Redirect after payment
            cancel_url: Redirect when the contributor backs out

        Returns:
            CheckoutSession: Session id and hosted page URL
        """
        ...
