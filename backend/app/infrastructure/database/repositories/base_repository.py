"""Generic SQLAlchemy repository for soft-deletable entities."""

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.entities import Entity
from app.domain.exceptions import DuplicateEntityError
from app.infrastructure.database.base import SoftDeleteMixin

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)
M = TypeVar("M", bound=SoftDeleteMixin)


class SQLAlchemyBaseRepository(ABC, Generic[E, M]):
    """Shared CRUD plumbing for the concrete repositories.

    Subclasses set ``model``, ``entity_type`` and, for entities with a natural
    key, ``natural_key`` plus the name of its ``unique_constraint``. They
    implement the two mapping hooks. Every read path except
    ``get_by_id`` goes through ``_active_select`` so deleted rows never leak.
    """

    model: type[M]
    entity_type: str
    natural_key: str | None = None
    unique_constraint: str | None = None

    def __init__(self, session: AsyncSession):
        self._session = session

    # ── Mapping hooks ────────────────────────────────────────────────

    @abstractmethod
    def _to_entity(self, model: M) -> E:
        """Map ORM model → domain entity."""
        ...

    @abstractmethod
    def _apply(self, entity: E, model: M) -> None:
        """Copy mutable entity fields onto the ORM model."""
        ...

    # ── Queries ──────────────────────────────────────────────────────

    def _active_select(self) -> Select:
        return select(self.model).where(self.model.active())

    def _ordered(self, stmt: Select) -> Select:
        return stmt.order_by(self.model.created_at.desc(), self.model.id.asc())

    async def get_by_id(self, entity_id: str) -> E | None:
        result = await self._session.get(self.model, entity_id)
        return self._to_entity(result) if result else None

    async def get_all(self) -> list[E]:
        result = await self._session.execute(self._ordered(self._active_select()))
        return [self._to_entity(row) for row in result.scalars().all()]

    # ── Writes ───────────────────────────────────────────────────────

    async def create(self, entity: E) -> E:
        model = self.model(
            id=entity.id,
            is_deleted=entity.is_deleted,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
        self._apply(entity, model)
        self._session.add(model)
        await self._flush(entity)
        return self._to_entity(model)

    async def update(self, entity: E) -> E:
        model = await self._session.get(self.model, entity.id)
        if model is None:
            raise ValueError(f"{self.entity_type} {entity.id} not found in database")
        self._apply(entity, model)
        model.is_deleted = entity.is_deleted
        model.updated_at = entity.updated_at
        await self._flush(entity)
        return self._to_entity(model)

    async def _flush(self, entity: E) -> None:
        """Flush pending changes, translating natural-key violations.

        Any other integrity failure (primary key, NOT NULL) propagates as is.
        """
        try:
            await self._session.flush()
        except IntegrityError as exc:
            if not self._violates_natural_key(exc):
                raise
            value = getattr(entity, self.natural_key)
            logger.warning(
                "Unique constraint rejected %s %s=%r", self.entity_type, self.natural_key, value
            )
            raise DuplicateEntityError(self.entity_type, self.natural_key, value) from exc

    def _violates_natural_key(self, exc: IntegrityError) -> bool:
        if self.natural_key is None or self.unique_constraint is None:
            return False
        message = str(exc.orig)
        # PostgreSQL names the constraint; SQLite names the table column.
        return (
            self.unique_constraint in message
            or f"UNIQUE constraint failed: {self.model.__tablename__}.{self.natural_key}" in message
        )
