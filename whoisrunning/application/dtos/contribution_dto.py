"""Contribution DTOs."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ContributionStatsDTO:
    """Totals over active contributions, in dollars."""

    contributor_count: int
    total_raised: float
    average_contribution: float


@dataclass(frozen=True)
class WebhookHandlingResult:
    """Outcome of processing one payment webhook event."""

    event_type: str
    handled: bool
    contribution_ids: tuple[int, ...] = ()


@dataclass(frozen=True)
class CheckoutSessionDTO:
    session_id: str
    url: str | None = None
