"""Research orchestration result DTOs."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from whoisrunning.domain.dtos.research_dto import Citation
from whoisrunning.domain.value_objects.candidate import Candidate


T = TypeVar("T")


@dataclass(frozen=True)
class ResearchResult(Generic[T]):
    """Records produced for one research intent.

    `is_fallback` is True when the records are a hardcoded set substituted
    for a failed or under-filled research answer.
    """

    records: tuple[T, ...]
    is_fallback: bool = False
    citations: tuple[Citation, ...] = ()

    def __len__(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class CandidateDetailResult:
    """A candidate profile combined from three research answers."""

    candidate: Candidate
    is_fallback: bool = False
    citations: tuple[Citation, ...] = field(default_factory=tuple)
