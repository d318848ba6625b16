"""Contribution repository interface."""

from abc import abstractmethod

from whoisrunning.domain.entities.contribution import Contribution
from whoisrunning.domain.repositories.base import BaseRepository


class ContributionRepository(BaseRepository[Contribution]):
    """Repository interface for contributions."""

    @abstractmethod
    async def get_by_checkout_session_id(self, session_id: str) -> Contribution | None:
        """Get the contribution created by a checkout session."""
        pass

    @abstractmethod
    async def get_by_invoice_id(self, invoice_id: str) -> Contribution | None:
        """Get the contribution recorded for an invoice."""
        pass

    @abstractmethod
    async def get_by_subscription_id(self, subscription_id: str) -> list[Contribution]:
        """Get every contribution belonging to a subscription.

        Args:
            subscription_id: Payment gateway subscription id

        Returns:
            Contributions ordered by creation time
        """
        pass

    @abstractmethod
    async def get_active(self) -> list[Contribution]:
        """Get contributions whose status is active."""
        pass
