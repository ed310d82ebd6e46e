"""Application service (use case) for ShipmentMethod operations."""

import logging

from app.application.interfaces import ShipmentMethodRepository
from app.application.schemas import (
    ShipmentMethodPageResponse,
    ShipmentMethodRequest,
    ShipmentMethodResponse,
)
from app.application.services.base_service import BaseService
from app.domain.entities import ShipmentMethod
from app.domain.exceptions import DuplicateEntityError

logger = logging.getLogger(__name__)


class ShipmentMethodService:
    """Shipment method rules on top of BaseService: unique names, paged search."""

    ENTITY_TYPE = "ShipmentMethod"

    def __init__(self, repository: ShipmentMethodRepository):
        self._repository = repository
        self._base = BaseService[ShipmentMethod](repository, self.ENTITY_TYPE)

    async def create_shipment_method(
        self, request: ShipmentMethodRequest
    ) -> ShipmentMethodResponse:
        logger.info("(create) request: %s", request)
        await self._check_name_available(request.name)
        method = ShipmentMethod(
            name=request.name,
            description=request.description,
            price_per_kilometer=request.price_per_kilometer,
        )
        method = await self._base.create(method)
        return self._to_response(method)

    async def update_shipment_method(
        self, method_id: str, request: ShipmentMethodRequest
    ) -> ShipmentMethodResponse:
        logger.info("(update) id: %s, request: %s", method_id, request)
        method = await self._base.find_by_id(method_id)
        # Renaming onto its own current name is not a collision.
        if method.name != request.name:
            await self._check_name_available(request.name)
        method.update(
            name=request.name,
            description=request.description,
            price_per_kilometer=request.price_per_kilometer,
        )
        method = await self._base.update(method)
        return self._to_response(method)

    async def list_shipment_methods(
        self,
        keyword: str | None = None,
        size: int = 10,
        page: int = 0,
        is_all: bool = False,
    ) -> ShipmentMethodPageResponse:
        logger.info(
            "(list) keyword: %s, size: %d, page: %d, is_all: %s",
            keyword, size, page, is_all,
        )
        if is_all:
            methods = await self._repository.get_all()
            total = len(methods)
        else:
            methods = await self._repository.search(keyword, skip=page * size, limit=size)
            total = await self._repository.count_search(keyword)
        return ShipmentMethodPageResponse(
            items=[self._to_response(m) for m in methods],
            total=total,
        )

    async def get_shipment_method(self, method_id: str) -> ShipmentMethod:
        logger.info("(get) id: %s", method_id)
        return await self._base.find_by_id(method_id)

    async def delete_shipment_method(self, method_id: str) -> None:
        logger.info("(delete) id: %s", method_id)
        await self._base.delete(method_id)

    async def _check_name_available(self, name: str) -> None:
        if await self._repository.exists_by_name(name):
            logger.warning("Shipment method name already in use: %s", name)
            raise DuplicateEntityError(self.ENTITY_TYPE, "name", name)

    @staticmethod
    def _to_response(method: ShipmentMethod) -> ShipmentMethodResponse:
        return ShipmentMethodResponse.model_validate(method, from_attributes=True)
