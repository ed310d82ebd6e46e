"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services import AddressService, ShipmentMethodService
from app.infrastructure.database.session import get_db_session
from app.infrastructure.database.repositories import (
    SQLAlchemyAddressRepository,
    SQLAlchemyShipmentMethodRepository,
)


async def get_shipment_method_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ShipmentMethodService, None]:
    """Provides a ShipmentMethodService bound to the request's session."""
    repository = SQLAlchemyShipmentMethodRepository(session)
    yield ShipmentMethodService(repository)


async def get_address_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[AddressService, None]:
    """Provides an AddressService bound to the request's session."""
    repository = SQLAlchemyAddressRepository(session)
    yield AddressService(repository)
