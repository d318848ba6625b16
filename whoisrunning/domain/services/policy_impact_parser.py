"""Policy impact parser.

The impact answer is organised in sections, one per policy area, each opened
by a bold or "#" header ("**Tax Policies**", "2. **Healthcare**:",
"### Housing"). Bullets and paragraphs under a recognised header become
PolicyImpact records; sections whose header names no policy area are skipped.
"""

import re

from collections.abc import Sequence
from dataclasses import dataclass, field

from whoisrunning.domain.services.text_extraction import strip_markup
from whoisrunning.domain.value_objects.policy_impact import (
    POLICY_CATEGORIES,
    TITLE_MAX_LENGTH,
    PolicyCategory,
    PolicyImpact,
)


MAX_POINTS_PER_SECTION = 3
MIN_POINT_LENGTH = 30

# Keyword fallback when the header does not contain a category name;
# keywords match at a word start
_CATEGORY_KEYWORDS: tuple[tuple[PolicyCategory, re.Pattern[str]], ...] = (
    (PolicyCategory.TAX_POLICIES, re.compile(r"\btax")),
    (PolicyCategory.EDUCATION, re.compile(r"\b(?:education|school)")),
    (PolicyCategory.HEALTHCARE, re.compile(r"\b(?:health|medical)")),
    (PolicyCategory.HOUSING, re.compile(r"\b(?:housing|rent)")),
    (PolicyCategory.EMPLOYMENT, re.compile(r"\b(?:employment|job|wage)")),
    (PolicyCategory.TRANSPORTATION, re.compile(r"\btransport")),
    (PolicyCategory.SOCIAL_SERVICES, re.compile(r"\b(?:social|assistance|benefit)")),
)

_NUMBERED_RE = re.compile(r"^\d{1,2}[.)](?:\s+|(?=\*))")
_BULLET_RE = re.compile(r"^[-•*]\s+")
_HEADING_RE = re.compile(r"^#{1,6}\s+(.+)$")
_BOLD_HEADER_RE = re.compile(r"^\*\*(.+?)\*\*\s*:?\s*(.*)$")
_CITATION_REF_RE = re.compile(r"\[(\d+)\]")
_TITLE_CLAUSE_RE = re.compile(r"^(.+?)(?::|\.(?=\s|$))")


def _contains_category(text: str) -> PolicyCategory | None:
    normalized = text.strip().lower()
    if not normalized:
        return None
    for category in POLICY_CATEGORIES:
        name = category.value.lower()
        if name in normalized or normalized in name:
            return category
    return None


def match_category(text: str) -> PolicyCategory | None:
    """Map a section header to a policy category.

    A header containing a category name (or contained in one) wins; otherwise
    keywords such as "tax", "school" or "wage" decide.
    """
    category = _contains_category(text)
    if category is not None:
        return category
    normalized = text.lower()
    for category, pattern in _CATEGORY_KEYWORDS:
        if pattern.search(normalized):
            return category
    return None


@dataclass
class _Section:
    category: PolicyCategory
    points: list[str] = field(default_factory=list)
    paragraph: list[str] = field(default_factory=list)

    def flush_paragraph(self) -> None:
        if self.paragraph:
            self.points.append(" ".join(self.paragraph))
            self.paragraph = []


def _header(line: str) -> tuple[str, str, bool] | None:
    """Return (header text, inline text, is_bullet) for a header line."""
    heading = _HEADING_RE.match(line)
    if heading:
        return heading.group(1).strip(" *:"), "", False

    is_bullet = bool(_BULLET_RE.match(line))
    body = _BULLET_RE.sub("", line, count=1) if is_bullet else _NUMBERED_RE.sub("", line, count=1)
    bold = _BOLD_HEADER_RE.match(body)
    if not bold:
        return None
    title = _NUMBERED_RE.sub("", bold.group(1)).strip(" :")
    return title, bold.group(2).strip(), is_bullet


def _split_sections(text: str) -> list[_Section]:
    sections: list[_Section] = []
    current: _Section | None = None

    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line:
            if current is not None:
                current.flush_paragraph()
            continue

        header = _header(line)
        if header is not None:
            title, inline, is_bullet = header
            # Bold bullets open a section only when they name a category outright
            category = _contains_category(title) if is_bullet else match_category(title)
            if category is not None:
                if current is not None:
                    current.flush_paragraph()
                current = _Section(category=category)
                sections.append(current)
                if inline:
                    current.points.append(inline)
                continue
            if not is_bullet:
                if current is not None:
                    current.flush_paragraph()
                current = None
                continue

        if current is None:
            continue

        if _BULLET_RE.match(line) or _NUMBERED_RE.match(line):
            current.flush_paragraph()
            current.points.append(_NUMBERED_RE.sub("", _BULLET_RE.sub("", line, count=1), count=1))
        else:
            current.paragraph.append(line)

    if current is not None:
        current.flush_paragraph()
    return sections


def _title_for(description: str) -> str:
    match = _TITLE_CLAUSE_RE.match(description)
    title = match.group(1) if match else description
    title = title.strip().rstrip(":.").strip()
    if len(title) > TITLE_MAX_LENGTH:
        return title[:TITLE_MAX_LENGTH] + "..."
    return title


def _source_for(point: str, citations: Sequence[str]) -> str | None:
    for match in _CITATION_REF_RE.finditer(point):
        index = int(match.group(1)) - 1
        if 0 <= index < len(citations):
            return citations[index]
    return None


def parse_policy_impacts(
    text: str, citations: Sequence[str] = ()
) -> list[PolicyImpact]:
    """Parse a demographic impact answer into PolicyImpact records.

    Args:
        text: Research answer text
        citations: Citation URLs in answer order; "[n]" markers resolve to
            the n-th URL as the impact source

    Returns:
        List[PolicyImpact]: Up to three impacts per recognised section
    """
    impacts: list[PolicyImpact] = []
    for section in _split_sections(text):
        kept = 0
        for point in section.points:
            description = strip_markup(point)
            if len(description) < MIN_POINT_LENGTH:
                continue
            impacts.append(
                PolicyImpact(
                    category=section.category,
                    title=_title_for(description),
                    description=description,
                    source=_source_for(point, citations),
                )
            )
            kept += 1
            if kept >= MAX_POINTS_PER_SECTION:
                break
    return impacts
