"""Candidate profile value objects."""

from dataclasses import dataclass, field
from enum import Enum

from whoisrunning.domain.value_objects.party import (
    CANDIDATE_UNCLASSIFIED_LABEL,
    Party,
)


class ResourceType(Enum):
    """Kind of linked media about a candidate."""

    VIDEO = "video"
    ARTICLE = "article"
    DOCUMENT = "document"


@dataclass(frozen=True)
class Quote:
    """A quoted statement attributed to a candidate."""

    text: str
    source: str
    date: str


@dataclass(frozen=True)
class Resource:
    """A link to a video, article or document about a candidate."""

    type: ResourceType
    title: str
    url: str
    source: str


@dataclass(frozen=True)
class SocialLinks:
    """Social media profile URLs."""

    twitter: str | None = None
    facebook: str | None = None
    instagram: str | None = None

    def is_empty(self) -> bool:
        return not (self.twitter or self.facebook or self.instagram)


@dataclass(frozen=True)
class Candidate:
    """A candidate profile assembled from research text.

    `id` is always `candidate_id_from_name(name)`; only `state` is required
    in the location, county and city are optional.
    """

    id: str
    name: str
    party: Party
    office: str
    state: str
    county: str | None = None
    city: str | None = None
    ideology: tuple[str, ...] = ()
    bio: str | None = None
    website: str | None = None
    social_links: SocialLinks = field(default_factory=SocialLinks)
    key_positions: tuple[str, ...] = ()
    quotes: tuple[Quote, ...] = ()
    resources: tuple[Resource, ...] = ()

    @property
    def party_label(self) -> str:
        return self.party.display(CANDIDATE_UNCLASSIFIED_LABEL)
