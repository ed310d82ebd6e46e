"""Generic CRUD engine shared by the entity services.

Entity services hold a ``BaseService`` and delegate to it rather than
inheriting from it. The base owns the soft-delete visibility rule: a row
flagged ``is_deleted`` is reported as not found by every lookup here.
"""

import logging
from typing import Generic, TypeVar

from app.application.interfaces import BaseRepository
from app.domain.entities import Entity
from app.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Entity)


class BaseService(Generic[T]):
    """Create, update, soft-delete and lookup over a single repository."""

    def __init__(self, repository: BaseRepository[T], entity_type: str):
        self._repository = repository
        self._entity_type = entity_type

    @property
    def entity_type(self) -> str:
        return self._entity_type

    async def create(self, entity: T) -> T:
        logger.debug("(create) %s id=%s", self._entity_type, entity.id)
        return await self._repository.create(entity)

    async def update(self, entity: T) -> T:
        logger.debug("(update) %s id=%s", self._entity_type, entity.id)
        return await self._repository.update(entity)

    async def find_by_id(self, entity_id: str) -> T:
        """Return the active entity with this ID or raise EntityNotFoundError."""
        entity = await self._repository.get_by_id(entity_id)
        if entity is None or entity.is_deleted:
            logger.warning("(find_by_id) %s '%s' not found", self._entity_type, entity_id)
            raise EntityNotFoundError(self._entity_type, entity_id)
        return entity

    async def exists(self, entity_id: str) -> bool:
        entity = await self._repository.get_by_id(entity_id)
        return entity is not None and not entity.is_deleted

    async def delete(self, entity_id: str) -> None:
        """Soft-delete an entity. Deleting twice raises EntityNotFoundError."""
        entity = await self.find_by_id(entity_id)
        entity.mark_deleted()
        await self._repository.update(entity)
        logger.info("(delete) %s '%s' marked deleted", self._entity_type, entity_id)
