"""Shipment method CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from app.application.schemas import (
    ShipmentMethodPageResponse,
    ShipmentMethodRequest,
    ShipmentMethodResponse,
)
from app.application.services import ShipmentMethodService
from app.config import get_settings
from app.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from app.infrastructure.dependencies import get_shipment_method_service

router = APIRouter(prefix="/shipment-methods", tags=["Shipment Methods"])


@router.get("", response_model=ShipmentMethodPageResponse)
async def list_shipment_methods(
    keyword: str | None = Query(None, description="Match against name or description"),
    size: int | None = Query(None, ge=1, description="Page size"),
    page: int = Query(0, ge=0, description="0-based page index"),
    is_all: bool = Query(False, alias="all", description="Return every method, unpaged"),
    service: ShipmentMethodService = Depends(get_shipment_method_service),
) -> ShipmentMethodPageResponse:
    """Retrieve a page of shipment methods with the total match count."""
    settings = get_settings()
    page_size = min(size or settings.default_page_size, settings.max_page_size)
    return await service.list_shipment_methods(
        keyword=keyword, size=page_size, page=page, is_all=is_all
    )


@router.get("/{method_id}", response_model=ShipmentMethodResponse)
async def get_shipment_method(
    method_id: str,
    service: ShipmentMethodService = Depends(get_shipment_method_service),
) -> ShipmentMethodResponse:
    """Retrieve a single shipment method by ID."""
    try:
        method = await service.get_shipment_method(method_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ShipmentMethodResponse.model_validate(method, from_attributes=True)


@router.post("", response_model=ShipmentMethodResponse, status_code=status.HTTP_201_CREATED)
async def create_shipment_method(
    data: ShipmentMethodRequest,
    service: ShipmentMethodService = Depends(get_shipment_method_service),
) -> ShipmentMethodResponse:
    """Create a new shipment method."""
    try:
        return await service.create_shipment_method(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.put("/{method_id}", response_model=ShipmentMethodResponse)
async def update_shipment_method(
    method_id: str,
    data: ShipmentMethodRequest,
    service: ShipmentMethodService = Depends(get_shipment_method_service),
) -> ShipmentMethodResponse:
    """Replace the fields of an existing shipment method."""
    try:
        return await service.update_shipment_method(method_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))


@router.delete("/{method_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_shipment_method(
    method_id: str,
    service: ShipmentMethodService = Depends(get_shipment_method_service),
) -> None:
    """Soft-delete a shipment method by ID."""
    try:
        await service.delete_shipment_method(method_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
