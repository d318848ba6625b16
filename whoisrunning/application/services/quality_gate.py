"""Minimum-record check applied to parsed research results."""

import logging

from collections.abc import Sequence
from typing import TypeVar

from whoisrunning.application.dtos.research_result_dto import ResearchResult
from whoisrunning.domain.dtos.research_dto import Citation


T = TypeVar("T")


logger = logging.getLogger(__name__)


class QualityGate:
    """Accept parsed records only when there are at least `min_records`.

    Below the threshold the fallback set replaces the parsed records
    entirely; the two are never merged.
    """

    def __init__(self, min_records: int) -> None:
        if min_records < 0:
            raise ValueError("min_records must not be negative")
        self.min_records = min_records

    def accepts(self, count: int) -> bool:
        return count >= self.min_records

    def apply(
        self,
        parsed: Sequence[T],
        fallback: Sequence[T],
        label: str,
        citations: Sequence[Citation] = (),
    ) -> ResearchResult[T]:
        """Return the parsed records, or the fallback set if too few parsed."""
        if self.accepts(len(parsed)):
            return ResearchResult(records=tuple(parsed), citations=tuple(citations))

        logger.warning(
            "Only %d %s records parsed (minimum %d), using fallback data",
            len(parsed),
            label,
            self.min_records,
        )
        return ResearchResult(records=tuple(fallback), is_fallback=True)
