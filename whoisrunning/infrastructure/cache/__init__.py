"""Response caching."""

from whoisrunning.infrastructure.cache.research_cache import (
    CachingResearchService,
    ResearchCache,
    cache_key,
)


__all__ = ["CachingResearchService", "ResearchCache", "cache_key"]
