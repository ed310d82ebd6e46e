"""Concrete repository implementation for Address backed by SQLAlchemy."""

from app.application.interfaces import AddressRepository
from app.domain.entities import Address
from app.infrastructure.database.models import AddressModel
from app.infrastructure.database.repositories.base_repository import SQLAlchemyBaseRepository


class SQLAlchemyAddressRepository(
    SQLAlchemyBaseRepository[Address, AddressModel],
    AddressRepository,
):
    """Implements the AddressRepository port using SQLAlchemy async sessions."""

    model = AddressModel
    entity_type = "Address"

    def _to_entity(self, model: AddressModel) -> Address:
        """Map ORM model → domain entity."""
        return Address(
            id=model.id,
            province_code=model.province_code,
            district_code=model.district_code,
            ward_code=model.ward_code,
            detail=model.detail,
            is_deleted=model.is_deleted,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _apply(self, entity: Address, model: AddressModel) -> None:
        model.province_code = entity.province_code
        model.district_code = entity.district_code
        model.ward_code = entity.ward_code
        model.detail = entity.detail
