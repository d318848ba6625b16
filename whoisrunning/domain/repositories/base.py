"""Base repository interface."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from whoisrunning.domain.entities.base import BaseEntity


T = TypeVar("T", bound=BaseEntity)


class BaseRepository(ABC, Generic[T]):
    """Generic repository interface for entities."""

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> T | None:
        """Get an entity by id, or None if it does not exist."""
        pass

    @abstractmethod
    async def get_all(self, limit: int | None = None, offset: int | None = None) -> list[T]:
        """Get all entities."""
        pass

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new entity and return it with its id set."""
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Update an existing entity."""
        pass

    @abstractmethod
    async def delete(self, entity_id: int) -> bool:
        """Delete an entity by id. Returns False if it did not exist."""
        pass
