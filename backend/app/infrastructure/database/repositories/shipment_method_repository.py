"""Concrete repository implementation for ShipmentMethod backed by SQLAlchemy."""

from sqlalchemy import Select, func, or_, select

from app.application.interfaces import ShipmentMethodRepository
from app.domain.entities import ShipmentMethod
from app.infrastructure.database.models import ShipmentMethodModel
from app.infrastructure.database.repositories.base_repository import SQLAlchemyBaseRepository


class SQLAlchemyShipmentMethodRepository(
    SQLAlchemyBaseRepository[ShipmentMethod, ShipmentMethodModel],
    ShipmentMethodRepository,
):
    """Implements the ShipmentMethodRepository port using SQLAlchemy async sessions."""

    model = ShipmentMethodModel
    entity_type = "ShipmentMethod"
    natural_key = "name"
    unique_constraint = "uq_shipment_methods_name_active"

    def _to_entity(self, model: ShipmentMethodModel) -> ShipmentMethod:
        """Map ORM model → domain entity."""
        return ShipmentMethod(
            id=model.id,
            name=model.name,
            description=model.description,
            price_per_kilometer=model.price_per_kilometer,
            is_deleted=model.is_deleted,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _apply(self, entity: ShipmentMethod, model: ShipmentMethodModel) -> None:
        model.name = entity.name
        model.description = entity.description
        model.price_per_kilometer = entity.price_per_kilometer

    def _filter(self, stmt: Select, keyword: str | None) -> Select:
        stmt = stmt.where(ShipmentMethodModel.active())
        if keyword:
            # % and _ in the keyword match literally.
            stmt = stmt.where(
                or_(
                    ShipmentMethodModel.name.icontains(keyword, autoescape=True),
                    ShipmentMethodModel.description.icontains(keyword, autoescape=True),
                )
            )
        return stmt

    async def exists_by_name(self, name: str) -> bool:
        stmt = select(ShipmentMethodModel.id).where(
            ShipmentMethodModel.active(),
            ShipmentMethodModel.name == name,
        )
        result = await self._session.execute(stmt.limit(1))
        return result.scalar_one_or_none() is not None

    async def search(
        self, keyword: str | None, skip: int = 0, limit: int = 10
    ) -> list[ShipmentMethod]:
        stmt = self._ordered(self._filter(select(ShipmentMethodModel), keyword))
        result = await self._session.execute(stmt.offset(skip).limit(limit))
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count_search(self, keyword: str | None) -> int:
        stmt = self._filter(select(func.count(ShipmentMethodModel.id)), keyword)
        result = await self._session.execute(stmt)
        return result.scalar_one()
