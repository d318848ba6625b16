"""Text extraction primitives for research API answers.

Research answers are loosely formatted markdown: numbered lists, bold
names, inconsistently labelled "Party:" / "Office:" / "State:" fields,
quotes and links. Each matcher here handles one field type against a line
or a block of that text.

Matchers never raise. A miss returns None (or an empty list) and the caller
picks the fallback value.
"""

import re

from dataclasses import dataclass
from datetime import date, datetime
from urllib.parse import urlsplit

from whoisrunning.domain.value_objects.candidate import ResourceType
from whoisrunning.domain.value_objects.party import Party


MIN_NAME_LENGTH = 4
MIN_QUOTE_LENGTH = 20

# =============================================================================
# Markup
# =============================================================================

_MD_LINK_RE = re.compile(r"\[([^\]]+)\]\((https?://[^\s)]+)\)")
_CITATION_MARKER_RE = re.compile(r"\s*\[\d+\]")
_HEADING_PREFIX_RE = re.compile(r"^#{1,6}\s*")
_EMPHASIS_RE = re.compile(r"\*\*|__|(?<!\w)\*(?=\S)|(?<=\S)\*(?!\w)")
_WHITESPACE_RE = re.compile(r"\s+")


def strip_markup(text: str) -> str:
    """Remove markdown emphasis, headings, link syntax and [n] citations."""
    text = _MD_LINK_RE.sub(r"\1", text)
    text = _CITATION_MARKER_RE.sub("", text)
    text = _HEADING_PREFIX_RE.sub("", text.strip())
    text = _EMPHASIS_RE.sub("", text)
    return _WHITESPACE_RE.sub(" ", text).strip()


# =============================================================================
# Identity
# =============================================================================

_NON_ALNUM_RUN_RE = re.compile(r"[^a-z0-9]+")


def candidate_id_from_name(name: str) -> str:
    """Derive the slug id for a display name.

    "Jane Doe" → "jane-doe", "Robert F. Kennedy Jr." → "robert-f-kennedy-jr"
    """
    return _NON_ALNUM_RUN_RE.sub("-", name.lower()).strip("-")


# =============================================================================
# List items and names
# =============================================================================

# "1." / "1)" / "-" / "•" / "*", optionally preceded by "**"
_LIST_MARKER_RE = re.compile(
    r"^(?P<bold>\*\*)?(?:(?P<number>\d{1,3})[.)](?=\s|\*|$)|[-•*](?=\s))"
)

# Field labels that appear as sub-bullets inside a record block
_FIELD_LABELS = (
    r"Party",
    r"Political\s+Party",
    r"Affiliation",
    r"Office(?:\s+Won)?",
    r"Title",
    r"Position",
    r"Current\s+(?:Office|Position|Role)",
    r"Running\s+For",
    r"Race",
    r"State",
    r"District",
    r"County",
    r"City",
    r"Location",
    r"(?:Election\s+)?Date",
    r"Vote(?:\s+(?:Percentage|Share))?",
    r"Votes",
    r"Margin",
    r"Result",
    r"Why\s+(?:They(?:'|’)re\s+)?Trending",
    r"Reason",
    r"Background",
    r"Bio",
    r"Website",
    r"Key\s+(?:Positions|Issues)",
    r"Notable",
    r"Status",
    r"Source",
)
_FIELD_LINE_RE = re.compile(
    r"^\**\s*(?:" + "|".join(_FIELD_LABELS) + r")\s*\**\s*:",
    re.IGNORECASE,
)

_LEADING_BOLD_RE = re.compile(r"^\*\*(.+?)\*\*")
_NAME_DELIMITER_RE = re.compile(r"[-–—:(,\n]")


def match_list_item(line: str) -> str | None:
    """Return the text after a list marker, or None if the line is not an item.

    "1. **Jane Doe** - Governor" → "**Jane Doe** - Governor"
    "**2.** John Smith" → "John Smith"
    """
    stripped = line.strip()
    match = _LIST_MARKER_RE.match(stripped)
    if not match:
        return None
    remainder = stripped[match.end() :].lstrip()
    if match.group("bold") and remainder.startswith("**"):
        # "**1.** Name": drop the bold that closed around the marker
        remainder = remainder[2:].lstrip()
    return remainder or None


def is_numbered_item(line: str) -> bool:
    """True if the line starts with a numbered list marker."""
    match = _LIST_MARKER_RE.match(line.strip())
    return bool(match and match.group("number"))


def is_field_line(text: str) -> bool:
    """True if the text starts with a known field label such as "Party:"."""
    return bool(_FIELD_LINE_RE.match(text.strip()))


def extract_name(remainder: str) -> str | None:
    """Extract a person's name from the text following a list marker.

    A leading bold span wins; otherwise the text before the first of
    "-", ":", "(", "," is used. Names shorter than 4 characters are rejected.
    """
    text = _MD_LINK_RE.sub(r"\1", remainder.strip())
    bold = _LEADING_BOLD_RE.match(text)
    if bold:
        text = bold.group(1)
    text = _NAME_DELIMITER_RE.split(text, maxsplit=1)[0]
    name = strip_markup(text).strip(" *_.\t")
    if len(name) < MIN_NAME_LENGTH:
        return None
    return name


# =============================================================================
# Record blocks
# =============================================================================

_BLOCK_BREAK_RE = re.compile(r"^(?:#{1,6}\s|-{3,}\s*$|\*{3,}\s*$|_{3,}\s*$)")


@dataclass(frozen=True)
class RecordBlock:
    """A list item plus its continuation lines."""

    name: str
    header: str
    lines: tuple[str, ...]

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


def split_record_blocks(text: str) -> list[RecordBlock]:
    """Split a research answer into one block per named list item.

    When the answer contains numbered items, only numbered items open a
    block and bullets are treated as sub-fields of the current block.
    Items whose name does not extract are dropped with their sub-lines.
    Lines before the first item, headings and rules are not part of any
    block.
    """
    lines = [line.rstrip() for line in text.splitlines()]

    numbered_present = any(
        is_numbered_item(line)
        and (remainder := match_list_item(line)) is not None
        and not is_field_line(remainder)
        for line in lines
    )

    blocks: list[RecordBlock] = []
    current: dict[str, object] | None = None
    in_dropped_item = False

    def close() -> None:
        if current is not None:
            blocks.append(
                RecordBlock(
                    name=str(current["name"]),
                    header=str(current["header"]),
                    lines=tuple(current["lines"]),  # type: ignore[arg-type]
                )
            )

    for line in lines:
        stripped = line.strip()
        if not stripped:
            continue

        if _BLOCK_BREAK_RE.match(stripped):
            close()
            current = None
            in_dropped_item = False
            continue

        remainder = match_list_item(stripped)
        opens_record = (
            remainder is not None
            and not is_field_line(remainder)
            and (is_numbered_item(stripped) or not numbered_present)
        )

        if opens_record and remainder is not None:
            close()
            name = extract_name(remainder)
            if name is None:
                current = None
                in_dropped_item = True
                continue
            current = {"name": name, "header": remainder, "lines": [stripped]}
            in_dropped_item = False
            continue

        if current is not None and not in_dropped_item:
            current["lines"].append(stripped)  # type: ignore[union-attr]

    close()
    return blocks


# =============================================================================
# Labelled fields
# =============================================================================

_FIELD_VALUE_CUT_RE = re.compile(r"\s+[-–—|]\s+|;")


def _labelled_value(pattern: re.Pattern[str], text: str) -> str | None:
    match = pattern.search(text)
    if not match:
        return None
    value = _FIELD_VALUE_CUT_RE.split(match.group(1), maxsplit=1)[0]
    value = strip_markup(value).strip(" .,:")
    return value or None


def _label_re(label: str) -> re.Pattern[str]:
    return re.compile(
        r"(?<![\w])" + label + r"\s*\**\s*:\s*\**\s*([^\n]+)",
        re.IGNORECASE,
    )


# =============================================================================
# Party
# =============================================================================

_PARTY_LABEL_RE = _label_re(r"(?:Political\s+)?Party(?:\s+Affiliation)?")
_PARTY_INITIAL_RE = re.compile(r"\(([DRI])(?:\s*[-–]\s*[A-Z]{2}(?:[-–]\d{1,2})?)?\)")
_PARTY_INITIALS: dict[str, Party] = {
    "D": Party.DEMOCRAT,
    "R": Party.REPUBLICAN,
    "I": Party.INDEPENDENT,
}

# Priority order: the first category whose pattern matches wins
_PARTY_WORD_PATTERNS: tuple[tuple[Party, re.Pattern[str]], ...] = (
    (Party.DEMOCRAT, re.compile(r"\bDemocrat(?:ic|s)?\b", re.IGNORECASE)),
    (Party.REPUBLICAN, re.compile(r"\b(?:Republicans?|GOP)\b", re.IGNORECASE)),
    (Party.INDEPENDENT, re.compile(r"\bIndependent\b", re.IGNORECASE)),
    (Party.LIBERTARIAN, re.compile(r"\bLibertarian\b", re.IGNORECASE)),
    (Party.GREEN, re.compile(r"\bGreen\s+Party\b", re.IGNORECASE)),
)
_BARE_GREEN_RE = re.compile(r"^Green\b", re.IGNORECASE)


def _classify_words(text: str) -> Party | None:
    for party, pattern in _PARTY_WORD_PATTERNS:
        if pattern.search(text):
            return party
    return None


def _classify_party_value(value: str) -> Party | None:
    initial = value.strip("() ").upper()
    if initial in _PARTY_INITIALS:
        return _PARTY_INITIALS[initial]
    if _BARE_GREEN_RE.match(value):
        return Party.GREEN
    return _classify_words(value)


def classify_party(text: str) -> Party | None:
    """Classify the party named in a line or block.

    Order: a labelled "Party:" field, a "(D)"/"(R)"/"(I)" parenthetical
    (also "(D-CA)"), then the words Democrat/Democratic, Republican/GOP,
    Independent, Libertarian, Green Party.
    """
    labelled = _labelled_value(_PARTY_LABEL_RE, text)
    if labelled:
        party = _classify_party_value(labelled)
        if party is not None:
            return party

    initial = _PARTY_INITIAL_RE.search(text)
    if initial:
        return _PARTY_INITIALS[initial.group(1)]

    return _classify_words(text)


# =============================================================================
# Office
# =============================================================================

_OFFICE_LABEL_RE = _label_re(
    r"(?:Office(?:\s+Won)?|Title|Position|Current\s+(?:Office|Position|Role)"
    r"|Running\s+For|Race)"
)
_OFFICE_PROSE_RE = re.compile(
    r"\b(?:running\s+for|elected\s+to|holds?\s+(?:the\s+)?office\s+of"
    r"|currently\s+serves\s+as|serving\s+as|candidate\s+for|seeking"
    r"|won(?:\s+the)?)\s+(?:the\s+)?([^.,;:\n()]+)",
    re.IGNORECASE,
)
_OFFICE_PROSE_CUT_RE = re.compile(
    r"\s+(?:in|against|with|after|by|on|since|from)\s", re.IGNORECASE
)
_TITLE_KEYWORD_RE = re.compile(
    r"\b(?:(?:U\.?S\.?|State|Former|Lieutenant|Lt\.)\s+)?"
    r"(?:Vice\s+President|President|Senator|Senate|Representative"
    r"|Congress(?:man|woman|member)?|House|Governor|Mayor"
    r"|Attorney\s+General|Secretary\s+of\s+State|Comptroller|Treasurer"
    r"|Council\s*(?:member|man|woman)?|Commissioner|Assembly\s*(?:member|man|woman)?"
    r"|Delegate|Judge|Justice|Sheriff|Supervisor|Alderman|Speaker)\b",
    re.IGNORECASE,
)
_SEGMENT_SPLIT_RE = re.compile(r"\s+[-–—|]\s+")
_MAX_OFFICE_LENGTH = 80


def extract_office(text: str) -> str | None:
    """Extract an office or title.

    Order: a labelled "Office:" / "Title:" / "Position:" field; prose such
    as "running for X" or "elected to X"; a dash-separated segment carrying a
    title keyword ("Jane Doe - Governor"); a bare title keyword.
    """
    labelled = _labelled_value(_OFFICE_LABEL_RE, text)
    if labelled:
        return labelled

    prose = _OFFICE_PROSE_RE.search(text)
    if prose:
        value = _OFFICE_PROSE_CUT_RE.split(prose.group(1), maxsplit=1)[0]
        value = strip_markup(value).strip(" .")
        if value and len(value) <= _MAX_OFFICE_LENGTH:
            return value

    for line in text.splitlines():
        remainder = match_list_item(line) or line
        for segment in _SEGMENT_SPLIT_RE.split(remainder)[1:]:
            if is_field_line(segment):
                continue
            if _TITLE_KEYWORD_RE.search(segment):
                value = strip_markup(segment.split("(", 1)[0]).strip(" .,")
                if value and len(value) <= _MAX_OFFICE_LENGTH:
                    return value

    keyword = _TITLE_KEYWORD_RE.search(strip_markup(text))
    if keyword:
        return keyword.group(0).strip()
    return None


# =============================================================================
# State
# =============================================================================

US_STATES: tuple[str, ...] = (
    "Alabama", "Alaska", "Arizona", "Arkansas", "California", "Colorado",
    "Connecticut", "Delaware", "Florida", "Georgia", "Hawaii", "Idaho",
    "Illinois", "Indiana", "Iowa", "Kansas", "Kentucky", "Louisiana", "Maine",
    "Maryland", "Massachusetts", "Michigan", "Minnesota", "Mississippi",
    "Missouri", "Montana", "Nebraska", "Nevada", "New Hampshire", "New Jersey",
    "New Mexico", "New York", "North Carolina", "North Dakota", "Ohio",
    "Oklahoma", "Oregon", "Pennsylvania", "Rhode Island", "South Carolina",
    "South Dakota", "Tennessee", "Texas", "Utah", "Vermont", "Virginia",
    "Washington", "West Virginia", "Wisconsin", "Wyoming",
    "District of Columbia",
)  # fmt: skip

_STATE_ALIASES: dict[str, str] = {
    **{name.lower(): name for name in US_STATES},
    "washington, d.c.": "District of Columbia",
    "washington d.c.": "District of Columbia",
    "washington, dc": "District of Columbia",
    "washington dc": "District of Columbia",
}

_STATE_RE = re.compile(
    r"\b(?:"
    + "|".join(
        r"\s+".join(re.escape(word) for word in alias.split())
        for alias in sorted(_STATE_ALIASES, key=len, reverse=True)
    )
    + r")(?![\w])",
    re.IGNORECASE,
)
_STATE_LABEL_RE = re.compile(
    r"(?<!of )(?<!United )(?<![\w])State\s*\**\s*:\s*\**\s*([^\n]+)",
    re.IGNORECASE,
)


def _canonical_state(matched: str) -> str:
    return _STATE_ALIASES.get(_WHITESPACE_RE.sub(" ", matched.lower()), matched)


def extract_state(text: str) -> str | None:
    """Extract a US state (or DC) name in canonical spelling.

    A state named in a labelled "State:" field is preferred; otherwise the
    first state mentioned anywhere in the text.
    """
    labelled = _labelled_value(_STATE_LABEL_RE, text)
    if labelled:
        match = _STATE_RE.search(labelled)
        if match:
            return _canonical_state(match.group(0))

    match = _STATE_RE.search(text)
    if match:
        return _canonical_state(match.group(0))
    return None


# =============================================================================
# Dates
# =============================================================================

_DATE_LABEL_RE = _label_re(r"(?:Election\s+)?Date")
_MONTH_DATE_RE = re.compile(
    r"\b(?:Jan(?:uary)?|Feb(?:ruary)?|Mar(?:ch)?|Apr(?:il)?|May|June?|July?"
    r"|Aug(?:ust)?|Sep(?:t(?:ember)?)?|Oct(?:ober)?|Nov(?:ember)?|Dec(?:ember)?)"
    r"\.?\s+\d{1,2}(?:st|nd|rd|th)?(?:,?\s+\d{4})?\b",
    re.IGNORECASE,
)
_ISO_DATE_RE = re.compile(r"\b\d{4}-\d{2}-\d{2}\b")
_ORDINAL_SUFFIX_RE = re.compile(r"(\d)(?:st|nd|rd|th)\b", re.IGNORECASE)
_DATE_FORMATS = ("%B %d %Y", "%b %d %Y", "%Y-%m-%d", "%m/%d/%Y")


def extract_labelled_date(text: str) -> str | None:
    """Return the raw value of an "Election Date:" / "Date:" field."""
    return _labelled_value(_DATE_LABEL_RE, text)


def extract_date_phrase(text: str) -> str | None:
    """Return the first month-name date ("November 5, 2024") or ISO date."""
    match = _MONTH_DATE_RE.search(text) or _ISO_DATE_RE.search(text)
    return match.group(0) if match else None


def extract_date(text: str) -> str | None:
    """Return a labelled date value, else the first date phrase, unparsed."""
    return extract_labelled_date(text) or extract_date_phrase(text)


def normalize_date(raw: str) -> str | None:
    """Convert a date phrase to ISO "YYYY-MM-DD"; None if it has no year or
    does not parse."""
    cleaned = _ORDINAL_SUFFIX_RE.sub(r"\1", raw.strip())
    cleaned = cleaned.replace(",", " ").replace(".", " ")
    cleaned = re.sub(r"\bSept\b", "Sep", cleaned, flags=re.IGNORECASE)
    cleaned = _WHITESPACE_RE.sub(" ", cleaned).strip()
    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt).date().isoformat()
        except ValueError:
            continue
    return None


def today_iso(today: date | None = None) -> str:
    return (today or date.today()).isoformat()


# =============================================================================
# Numbers
# =============================================================================

_VOTE_LABEL_PERCENT_RE = re.compile(
    r"(?<![\w])Vote(?:\s+(?:Percentage|Share))?\s*\**\s*:\s*\**\s*"
    r"(\d+(?:\.\d+)?)\s*%",
    re.IGNORECASE,
)
_PERCENT_RE = re.compile(r"(\d+(?:\.\d+)?)\s*%")


def extract_percentage(text: str) -> float | None:
    """Extract a percentage as a float on the 0-100 scale ("54.8%" → 54.8).

    A labelled "Vote Percentage:" value is preferred over the first bare
    percentage in the text.
    """
    match = _VOTE_LABEL_PERCENT_RE.search(text) or _PERCENT_RE.search(text)
    if not match:
        return None
    try:
        return float(match.group(1))
    except ValueError:
        return None


# =============================================================================
# Quotes and links
# =============================================================================

_QUOTE_RE = re.compile(r"[\"“]([^\"“”\n]+)[\"”]")
_URL_RE = re.compile(r"https?://[^\s<>\"'\]\)]+")
_URL_TRAILING_PUNCTUATION = ".,;:!?*"

VIDEO_HOSTS: frozenset[str] = frozenset(
    {
        "youtube.com",
        "youtu.be",
        "vimeo.com",
        "rumble.com",
        "tiktok.com",
        "dailymotion.com",
    }
)
SOCIAL_HOSTS: dict[str, str] = {
    "twitter.com": "twitter",
    "x.com": "twitter",
    "facebook.com": "facebook",
    "instagram.com": "instagram",
}


@dataclass(frozen=True)
class ExtractedLink:
    """A URL found in text, with its markdown link title when present."""

    url: str
    title: str | None = None


def extract_quotes(text: str, limit: int = 3) -> list[str]:
    """Extract double-quoted passages longer than 20 characters."""
    quotes: list[str] = []
    for match in _QUOTE_RE.finditer(text):
        quote = match.group(1).strip()
        if len(quote) > MIN_QUOTE_LENGTH:
            quotes.append(quote)
            if len(quotes) >= limit:
                break
    return quotes


def extract_urls(text: str) -> list[ExtractedLink]:
    """Extract http(s) URLs in order of appearance, without duplicates."""
    titles: dict[str, str] = {}
    for match in _MD_LINK_RE.finditer(text):
        titles.setdefault(match.group(2).rstrip(_URL_TRAILING_PUNCTUATION), match.group(1))

    links: list[ExtractedLink] = []
    seen: set[str] = set()
    for match in _URL_RE.finditer(text):
        url = match.group(0).rstrip(_URL_TRAILING_PUNCTUATION)
        if url in seen:
            continue
        seen.add(url)
        title = titles.get(url)
        links.append(ExtractedLink(url=url, title=strip_markup(title) if title else None))
    return links


def host_of(url: str) -> str:
    """Lower-cased host without "www." / "m." prefixes; "" if unparsable."""
    try:
        host = (urlsplit(url).hostname or "").lower()
    except ValueError:
        return ""
    for prefix in ("www.", "m."):
        if host.startswith(prefix):
            host = host[len(prefix) :]
    return host


def _host_matches(host: str, domain: str) -> bool:
    return host == domain or host.endswith("." + domain)


def classify_url(url: str) -> ResourceType:
    """VIDEO for known video-sharing hosts, ARTICLE otherwise."""
    host = host_of(url)
    if any(_host_matches(host, domain) for domain in VIDEO_HOSTS):
        return ResourceType.VIDEO
    return ResourceType.ARTICLE


def social_network_of(url: str) -> str | None:
    """Return "twitter" / "facebook" / "instagram" for social profile URLs."""
    host = host_of(url)
    for domain, network in SOCIAL_HOSTS.items():
        if _host_matches(host, domain):
            return network
    return None


# =============================================================================
# Sentences
# =============================================================================

_SENTENCE_END_RE = re.compile(r"(?<=[.!?])\s+")
_ABBREVIATION_END_RE = re.compile(
    r"(?:\b(?:[A-Z]\.){1,3}|\b(?:Sen|Rep|Gov|Lt|Dr|Mr|Mrs|Ms|Jr|Sr|St|Gen|Rev|vs|etc|No)\.)$"
)


def split_sentences(text: str) -> list[str]:
    """Split prose into sentences, keeping abbreviations such as "U.S." intact.

    Each line is split separately; markup and list markers are removed and
    trailing sentence punctuation is dropped.
    """
    sentences: list[str] = []
    for raw_line in text.splitlines():
        line = strip_markup(match_list_item(raw_line) or raw_line)
        if not line:
            continue
        pieces = _SENTENCE_END_RE.split(line)
        merged: list[str] = []
        for piece in pieces:
            if merged and _ABBREVIATION_END_RE.search(merged[-1]):
                merged[-1] = f"{merged[-1]} {piece}"
            else:
                merged.append(piece)
        sentences.extend(s.rstrip(".!? ").strip() for s in merged if s.strip())
    return [s for s in sentences if s]
