"""In-memory TTL cache for research API responses.

Entries are keyed by the JSON serialisation of the request parameters in
their given order, so two requests with the same parameters in a different
order are separate entries. Expired entries are evicted when they are next
looked up. Concurrent misses for the same key each reach the backend; the
last write wins.
"""

from __future__ import annotations

import json
import logging
import time

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from whoisrunning.domain.dtos.research_dto import ResearchRequest, ResearchResponse
from whoisrunning.domain.services.interfaces.research_service import IResearchService


logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 24 * 60 * 60


def cache_key(params: Mapping[str, Any]) -> str:
    """JSON of the parameters, key order preserved."""
    return json.dumps(params)


@dataclass
class _Entry:
    value: ResearchResponse
    stored_at: float


class ResearchCache:
    """Key → ResearchResponse store with a fixed time-to-live."""

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, _Entry] = {}

    def get(self, key: str) -> ResearchResponse | None:
        """Return the stored response if it is younger than the TTL.

        An expired entry is removed and reported as a miss.
        """
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._clock() - entry.stored_at >= self._ttl:
            del self._entries[key]
            return None
        return entry.value

    def set(self, key: str, value: ResearchResponse) -> None:
        self._entries[key] = _Entry(value=value, stored_at=self._clock())

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


class CachingResearchService:
    """IResearchService decorator that answers repeated requests from cache.

    A hit returns the stored response object itself, not a copy.
    """

    def __init__(self, inner: IResearchService, cache: ResearchCache | None = None) -> None:
        self._inner = inner
        self._cache = cache if cache is not None else ResearchCache()

    async def research(self, request: ResearchRequest) -> ResearchResponse:
        key = cache_key(request.cache_params())
        cached = self._cache.get(key)
        if cached is not None:
            logger.info("Returning cached result for: %s", request.query[:80])
            return cached

        response = await self._inner.research(request)
        self._cache.set(key, response)
        return response
