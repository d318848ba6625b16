"""List-shaped record parsers.

Candidates, trending entries, recent winners and elected officials share one
block-driven parser; a ListParserProfile row carries what differs between
them (field defaults and the size cap).

Numeric fields the text does not state are filled from a random.Random
seeded with the block text, so parsing the same answer twice gives the same
records. Filler is always tagged Provenance.ESTIMATED.
"""

from __future__ import annotations

import logging
import random
import re
import zlib

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, timedelta
from typing import TypeVar

from whoisrunning.domain.services.candidate_detail_parser import (
    extract_social_links,
    extract_website,
    find_key_positions,
    tag_ideology,
)
from whoisrunning.domain.services.text_extraction import (
    RecordBlock,
    candidate_id_from_name,
    classify_party,
    extract_date_phrase,
    extract_labelled_date,
    extract_office,
    extract_percentage,
    extract_state,
    normalize_date,
    split_record_blocks,
)
from whoisrunning.domain.value_objects.analytics import (
    ElectedOfficial,
    TrendDirection,
    TrendingEntry,
    WinnerEntry,
)
from whoisrunning.domain.value_objects.candidate import Candidate
from whoisrunning.domain.value_objects.metric_value import MetricValue
from whoisrunning.domain.value_objects.party import Party


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListParserProfile:
    """Per-record-type defaults for the shared list parser."""

    office_default: str
    state_default: str
    max_records: int | None = None


CANDIDATE_PROFILE = ListParserProfile(
    office_default="Unknown Office", state_default="Unknown"
)
TRENDING_PROFILE = ListParserProfile(
    office_default="Political Office", state_default="United States", max_records=5
)
WINNER_PROFILE = ListParserProfile(
    office_default="Elected Office", state_default="United States", max_records=5
)
OFFICIAL_PROFILE = ListParserProfile(office_default="Elected Official", state_default="")

# Filler ranges
T = TypeVar("T")

SEARCH_COUNT_RANGE = (5000, 19999)
TREND_CHANGE_RANGE = (5, 44)
VOTE_PERCENTAGE_RANGE = (50.0, 65.0)
RECENT_ELECTION_DAYS = 90

_DECLINE_RE = re.compile(
    r"\b(?:down|declin\w*|drop\w*|fell|fall(?:ing|en)?|decreas\w*|lost\s+ground|slipp\w*)\b",
    re.IGNORECASE,
)


def filler_rng(text: str) -> random.Random:
    """Random generator seeded from text, stable across runs."""
    return random.Random(zlib.crc32(text.encode("utf-8")))


def _parse_blocks(
    text: str,
    profile: ListParserProfile,
    build: Callable[[RecordBlock], T],
    record_type: str,
) -> list[T]:
    records: list[T] = []
    for block in split_record_blocks(text):
        records.append(build(block))
        if profile.max_records is not None and len(records) >= profile.max_records:
            break
    logger.debug("Parsed %d %s records", len(records), record_type)
    return records


def _party(block: RecordBlock) -> Party:
    return classify_party(block.text) or Party.UNCLASSIFIED


def _office(block: RecordBlock, profile: ListParserProfile) -> str:
    return extract_office(block.text) or profile.office_default


def _state(block: RecordBlock, profile: ListParserProfile) -> str:
    return extract_state(block.text) or profile.state_default


# =============================================================================
# Candidates
# =============================================================================


def parse_candidates(
    text: str,
    state: str | None = None,
    county: str | None = None,
    city: str | None = None,
) -> list[Candidate]:
    """Parse a candidate search answer.

    Location values the caller searched by take precedence over values found
    in the text.
    """

    def build(block: RecordBlock) -> Candidate:
        return Candidate(
            id=candidate_id_from_name(block.name),
            name=block.name,
            party=_party(block),
            office=_office(block, CANDIDATE_PROFILE),
            state=state or _state(block, CANDIDATE_PROFILE),
            county=county,
            city=city,
            ideology=tuple(tag_ideology(block.text)),
            website=extract_website(block.text),
            social_links=extract_social_links(block.text),
            key_positions=tuple(find_key_positions(block.text)),
        )

    return _parse_blocks(text, CANDIDATE_PROFILE, build, "candidate")


# =============================================================================
# Trending
# =============================================================================


def _trend(text: str, rng: random.Random) -> tuple[MetricValue, TrendDirection]:
    percentage = extract_percentage(text)
    if percentage is None:
        return MetricValue.estimated(float(rng.randint(*TREND_CHANGE_RANGE))), TrendDirection.UP
    if percentage == 0:
        direction = TrendDirection.STABLE
    elif _DECLINE_RE.search(text):
        direction = TrendDirection.DOWN
    else:
        direction = TrendDirection.UP
    return MetricValue.extracted(percentage), direction


def parse_trending(text: str) -> list[TrendingEntry]:
    """Parse a "who is trending" answer into at most five entries."""

    def build(block: RecordBlock) -> TrendingEntry:
        rng = filler_rng(block.text)
        search_count = MetricValue.estimated(float(rng.randint(*SEARCH_COUNT_RANGE)))
        change, direction = _trend(block.text, rng)
        return TrendingEntry(
            id=candidate_id_from_name(block.name),
            name=block.name,
            office=_office(block, TRENDING_PROFILE),
            state=_state(block, TRENDING_PROFILE),
            party=_party(block),
            search_count=search_count,
            percentage_change=change,
            trend_direction=direction,
        )

    return _parse_blocks(text, TRENDING_PROFILE, build, "trending")


# =============================================================================
# Winners
# =============================================================================


def _election_date(text: str, rng: random.Random, today: date) -> tuple[str, bool]:
    labelled = extract_labelled_date(text)
    if labelled:
        return labelled, False
    phrase = extract_date_phrase(text)
    if phrase:
        return normalize_date(phrase) or phrase, False
    offset = rng.randint(0, RECENT_ELECTION_DAYS - 1)
    return (today - timedelta(days=offset)).isoformat(), True


def _vote_percentage(text: str, rng: random.Random) -> MetricValue:
    percentage = extract_percentage(text)
    if percentage is not None and 0 < percentage <= 100:
        return MetricValue.extracted(percentage)
    return MetricValue.estimated(round(rng.uniform(*VOTE_PERCENTAGE_RANGE), 1))


def parse_winners(text: str, today: date | None = None) -> list[WinnerEntry]:
    """Parse a "recent winners" answer into at most five entries.

    Args:
        text: Research answer text
        today: Reference date for estimated election dates (default: today)
    """
    reference = today or date.today()

    def build(block: RecordBlock) -> WinnerEntry:
        rng = filler_rng(block.text)
        election_date, estimated = _election_date(block.text, rng, reference)
        return WinnerEntry(
            id=candidate_id_from_name(block.name),
            name=block.name,
            office=_office(block, WINNER_PROFILE),
            state=_state(block, WINNER_PROFILE),
            party=_party(block),
            election_date=election_date,
            vote_percentage=_vote_percentage(block.text, rng),
            election_date_estimated=estimated,
        )

    return _parse_blocks(text, WINNER_PROFILE, build, "winner")


# =============================================================================
# Elected officials
# =============================================================================


# Officials are reported as Democrat, Republican, Independent or Unknown
OFFICIAL_PARTIES = frozenset({Party.DEMOCRAT, Party.REPUBLICAN, Party.INDEPENDENT})


def parse_officials(text: str) -> list[ElectedOfficial]:
    """Parse a list of currently serving officials for a location."""

    def build(block: RecordBlock) -> ElectedOfficial:
        party = _party(block)
        return ElectedOfficial(
            id=candidate_id_from_name(block.name),
            name=block.name,
            office=_office(block, OFFICIAL_PROFILE),
            party=party if party in OFFICIAL_PARTIES else Party.UNCLASSIFIED,
        )

    return _parse_blocks(text, OFFICIAL_PROFILE, build, "official")
