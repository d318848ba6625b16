"""Domain entities."""

from whoisrunning.domain.entities.base import BaseEntity
from whoisrunning.domain.entities.contribution import Contribution


__all__ = ["BaseEntity", "Contribution"]
