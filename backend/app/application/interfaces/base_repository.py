"""Generic repository port shared by every soft-deletable entity."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from app.domain.entities import Entity

T = TypeVar("T", bound=Entity)


class BaseRepository(ABC, Generic[T]):
    """Port for entity persistence — implemented in the infrastructure layer.

    ``create`` and ``update`` flush before returning so a subsequent
    ``get_by_id`` in the same transaction sees the new state. A violated
    storage uniqueness constraint surfaces as ``DuplicateEntityError``.
    """

    @abstractmethod
    async def get_by_id(self, entity_id: str) -> T | None:
        """Retrieve a single entity by ID, deleted or not."""
        ...

    @abstractmethod
    async def get_all(self) -> list[T]:
        """Retrieve every non-deleted entity, newest first."""
        ...

    @abstractmethod
    async def create(self, entity: T) -> T:
        """Persist a new entity and return it."""
        ...

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Persist changes to an existing entity, including its deleted flag."""
        ...
