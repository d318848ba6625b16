"""Trending candidate and recent winner value objects."""

from dataclasses import dataclass
from enum import Enum

from whoisrunning.domain.value_objects.metric_value import MetricValue
from whoisrunning.domain.value_objects.party import (
    OFFICIAL_UNCLASSIFIED_LABEL,
    TRENDING_UNCLASSIFIED_LABEL,
    WINNER_UNCLASSIFIED_LABEL,
    Party,
)


class TrendDirection(Enum):
    """Direction of a trending candidate's popularity change."""

    UP = "up"
    DOWN = "down"
    STABLE = "stable"


@dataclass(frozen=True)
class TrendingEntry:
    """A candidate currently in the news.

    `search_count` is always synthetic. `percentage_change` and
    `trend_direction` are extracted only when the text states a percentage;
    check `percentage_change.provenance` before presenting them as real.
    """

    id: str
    name: str
    office: str
    state: str
    party: Party
    search_count: MetricValue
    percentage_change: MetricValue
    trend_direction: TrendDirection

    @property
    def party_label(self) -> str:
        return self.party.display(TRENDING_UNCLASSIFIED_LABEL)


@dataclass(frozen=True)
class WinnerEntry:
    """A recent election winner.

    `election_date` is not normalised when it comes from a labelled field
    (it may read "Recent" or "November 5, 2024").
    """

    id: str
    name: str
    office: str
    state: str
    party: Party
    election_date: str
    vote_percentage: MetricValue | None = None
    election_date_estimated: bool = False

    @property
    def party_label(self) -> str:
        return self.party.display(WINNER_UNCLASSIFIED_LABEL)


@dataclass(frozen=True)
class ElectedOfficial:
    """A currently serving official for a location."""

    id: str
    name: str
    office: str
    party: Party

    @property
    def party_label(self) -> str:
        return self.party.display(OFFICIAL_UNCLASSIFIED_LABEL)
