"""Application service (use case) for Address operations."""

import logging

from app.application.interfaces import AddressRepository
from app.application.schemas import AddressRequest, AddressResponse
from app.application.services.base_service import BaseService
from app.domain.entities import Address

logger = logging.getLogger(__name__)


class AddressService:
    """Orchestrates address logic. Addresses carry no natural key."""

    def __init__(self, repository: AddressRepository):
        self._base = BaseService[Address](repository, "Address")

    async def create_address(self, request: AddressRequest) -> AddressResponse:
        logger.info("(create) request: %s", request)
        address = Address(
            province_code=request.province_code,
            district_code=request.district_code,
            ward_code=request.ward_code,
            detail=request.detail,
        )
        address = await self._base.create(address)
        return AddressResponse.model_validate(address, from_attributes=True)

    async def get_address(self, address_id: str) -> Address:
        return await self._base.find_by_id(address_id)

    async def delete_address(self, address_id: str) -> None:
        logger.info("(delete) id: %s", address_id)
        await self._base.delete(address_id)
