"""Candidate detail parser.

A detail profile is assembled from three research answers about the same
person: a general profile, an ideology/positions answer and a resources
answer. Each field is read from the answer it belongs to.
"""

import re

from datetime import date

from whoisrunning.domain.services.text_extraction import (
    ExtractedLink,
    candidate_id_from_name,
    classify_party,
    classify_url,
    extract_date_phrase,
    extract_office,
    extract_quotes,
    extract_state,
    extract_urls,
    host_of,
    normalize_date,
    social_network_of,
    split_sentences,
    today_iso,
)
from whoisrunning.domain.value_objects.candidate import (
    Candidate,
    Quote,
    Resource,
    ResourceType,
    SocialLinks,
)
from whoisrunning.domain.value_objects.party import Party


DETAIL_OFFICE_DEFAULT = "Political Office"
DETAIL_STATE_DEFAULT = "United States"
DEFAULT_IDEOLOGY_TAG = "Public Service"
QUOTE_SOURCE = "Recent Statement"

BIO_SENTENCES = 3
MIN_BIO_SENTENCE_LENGTH = 20
MAX_KEY_POSITIONS = 5
KEY_POSITION_LENGTH = (30, 200)
MAX_QUOTES = 3
MAX_ARTICLES = 3

# Ideology tag → keyword pattern, in display order
IDEOLOGY_TAGS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("Healthcare Reform", re.compile(r"\bhealth\s*care\b", re.IGNORECASE)),
    ("Environmental Protection", re.compile(r"\b(?:climate|environment\w*)\b", re.IGNORECASE)),
    ("Education", re.compile(r"\beducation\b", re.IGNORECASE)),
    ("Economic Policy", re.compile(r"\beconom(?:y|ic)\b", re.IGNORECASE)),
    ("Criminal Justice Reform", re.compile(r"\bcriminal\s+justice\b", re.IGNORECASE)),
    ("Immigration", re.compile(r"\bimmigration\b", re.IGNORECASE)),
)

_POSITION_VERB_RE = re.compile(
    r"\b(?:support\w*|advocat\w*|propos\w*|oppos\w*|believ\w*)\b", re.IGNORECASE
)
_WEBSITE_LABEL_RE = re.compile(
    r"(?<![\w])(?:Official\s+)?Website\s*\**\s*:\s*\**\s*(?:\[[^\]]*\]\()?(https?://[^\s)\]]+)",
    re.IGNORECASE,
)

_VIDEO_SOURCE_NAMES: dict[str, str] = {
    "youtube.com": "YouTube",
    "youtu.be": "YouTube",
    "vimeo.com": "Vimeo",
}


def tag_ideology(text: str) -> list[str]:
    """Return the ideology tags whose keywords appear in the text."""
    return [tag for tag, pattern in IDEOLOGY_TAGS if pattern.search(text)]


def find_key_positions(text: str) -> list[str]:
    """Sentences of 30-200 characters that state a position.

    A position sentence contains support/advocate/propose/oppose/believe.
    """
    low, high = KEY_POSITION_LENGTH
    positions: list[str] = []
    for sentence in split_sentences(text):
        if low < len(sentence) < high and _POSITION_VERB_RE.search(sentence):
            positions.append(sentence)
            if len(positions) >= MAX_KEY_POSITIONS:
                break
    return positions


def extract_bio(text: str) -> str | None:
    """First three sentences longer than 20 characters, joined."""
    sentences = [s for s in split_sentences(text) if len(s) > MIN_BIO_SENTENCE_LENGTH]
    if not sentences:
        return None
    return ". ".join(sentences[:BIO_SENTENCES]) + "."


def extract_website(text: str) -> str | None:
    """URL of a labelled "Website:" field."""
    match = _WEBSITE_LABEL_RE.search(text)
    if not match:
        return None
    return match.group(1).rstrip(".,;:!?*")


def extract_social_links(text: str) -> SocialLinks:
    """First twitter/x, facebook and instagram URL found in the text."""
    found: dict[str, str] = {}
    for link in extract_urls(text):
        network = social_network_of(link.url)
        if network and network not in found:
            found[network] = link.url
    return SocialLinks(
        twitter=found.get("twitter"),
        facebook=found.get("facebook"),
        instagram=found.get("instagram"),
    )


def extract_statement_quotes(text: str, today: date | None = None) -> list[Quote]:
    """Quotes with the date found on the same line, else today's date."""
    quotes: list[Quote] = []
    for line in text.splitlines():
        for quoted in extract_quotes(line, limit=MAX_QUOTES - len(quotes)):
            phrase = extract_date_phrase(line)
            quoted_on = (normalize_date(phrase) if phrase else None) or today_iso(today)
            quotes.append(Quote(text=quoted, source=QUOTE_SOURCE, date=quoted_on))
        if len(quotes) >= MAX_QUOTES:
            break
    return quotes


def _resource_from_link(link: ExtractedLink) -> Resource:
    host = host_of(link.url)
    resource_type = classify_url(link.url)
    if resource_type is ResourceType.VIDEO:
        return Resource(
            type=resource_type,
            title=link.title or "Campaign Video",
            url=link.url,
            source=_VIDEO_SOURCE_NAMES.get(host, host),
        )
    return Resource(
        type=resource_type,
        title=link.title or "Recent Article",
        url=link.url,
        source=host or "News Source",
    )


def extract_resources(text: str) -> list[Resource]:
    """Video links plus up to three article links; social profiles skipped."""
    resources: list[Resource] = []
    articles = 0
    for link in extract_urls(text):
        if social_network_of(link.url):
            continue
        resource = _resource_from_link(link)
        if resource.type is ResourceType.ARTICLE:
            if articles >= MAX_ARTICLES:
                continue
            articles += 1
        resources.append(resource)
    return resources


def parse_candidate_detail(
    name: str,
    profile: str,
    ideology: str,
    resources: str,
    today: date | None = None,
) -> Candidate:
    """Combine the three research answers about `name` into one Candidate.

    Args:
        name: Candidate name as requested
        profile: Profile answer (party, office, state, bio)
        ideology: Ideology answer (tags, positions, quotes)
        resources: Resources answer (videos, articles)
        today: Date used for quotes without a date (default: today)

    Returns:
        Candidate: id derived from `name`; empty answers give defaults
    """
    combined = "\n".join((profile, ideology, resources))
    return Candidate(
        id=candidate_id_from_name(name),
        name=name,
        party=classify_party(profile) or Party.UNCLASSIFIED,
        office=extract_office(profile) or DETAIL_OFFICE_DEFAULT,
        state=extract_state(profile) or DETAIL_STATE_DEFAULT,
        ideology=tuple(tag_ideology(ideology) or [DEFAULT_IDEOLOGY_TAG]),
        bio=extract_bio(profile),
        website=extract_website(combined),
        social_links=extract_social_links(combined),
        key_positions=tuple(find_key_positions(ideology)),
        quotes=tuple(extract_statement_quotes(ideology, today)),
        resources=tuple(extract_resources(resources)),
    )
