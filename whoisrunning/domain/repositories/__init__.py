"""Repository interfaces."""

from whoisrunning.domain.repositories.base import BaseRepository
from whoisrunning.domain.repositories.contribution_repository import (
    ContributionRepository,
)


__all__ = ["BaseRepository", "ContributionRepository"]
