"""Hardcoded record sets shown when research yields too little.

Every numeric field is a PLACEHOLDER metric so callers can tell these apart
from parsed results.
"""

from whoisrunning.domain.services.text_extraction import candidate_id_from_name
from whoisrunning.domain.value_objects.analytics import (
    TrendDirection,
    TrendingEntry,
    WinnerEntry,
)
from whoisrunning.domain.value_objects.candidate import Candidate
from whoisrunning.domain.value_objects.metric_value import MetricValue
from whoisrunning.domain.value_objects.party import Party


def _trending(
    name: str, office: str, state: str, party: Party, searches: int, change: int
) -> TrendingEntry:
    return TrendingEntry(
        id=candidate_id_from_name(name),
        name=name,
        office=office,
        state=state,
        party=party,
        search_count=MetricValue.placeholder(float(searches)),
        percentage_change=MetricValue.placeholder(float(change)),
        trend_direction=TrendDirection.UP,
    )


def _winner(
    name: str, office: str, state: str, party: Party, election_date: str, vote: int
) -> WinnerEntry:
    return WinnerEntry(
        id=candidate_id_from_name(name),
        name=name,
        office=office,
        state=state,
        party=party,
        election_date=election_date,
        vote_percentage=MetricValue.placeholder(float(vote)),
    )


FALLBACK_TRENDING: tuple[TrendingEntry, ...] = (
    _trending("Kamala Harris", "Vice President", "California", Party.DEMOCRAT, 12500, 15),
    _trending("Donald Trump", "Former President", "Florida", Party.REPUBLICAN, 11200, 8),
    _trending("Ron DeSantis", "Governor", "Florida", Party.REPUBLICAN, 9800, 12),
)

FALLBACK_WINNERS: tuple[WinnerEntry, ...] = (
    _winner("Glenn Youngkin", "Governor", "Virginia", Party.REPUBLICAN, "November 2, 2021", 51),
    _winner("Eric Adams", "Mayor", "New York", Party.DEMOCRAT, "November 2, 2021", 67),
)


def placeholder_candidate(name: str) -> Candidate:
    """Minimal profile for a candidate whose research failed."""
    return Candidate(
        id=candidate_id_from_name(name),
        name=name,
        party=Party.UNCLASSIFIED,
        office="Political Office",
        state="United States",
        ideology=("Public Service",),
        bio=f"Detailed information about {name} is currently unavailable.",
    )
