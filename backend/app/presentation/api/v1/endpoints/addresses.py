"""Address endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from app.application.schemas import AddressRequest, AddressResponse
from app.application.services import AddressService
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.dependencies import get_address_service

router = APIRouter(prefix="/addresses", tags=["Addresses"])


@router.get("/{address_id}", response_model=AddressResponse)
async def get_address(
    address_id: str,
    service: AddressService = Depends(get_address_service),
) -> AddressResponse:
    try:
        address = await service.get_address(address_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return AddressResponse.model_validate(address, from_attributes=True)


@router.post("", response_model=AddressResponse, status_code=status.HTTP_201_CREATED)
async def create_address(
    data: AddressRequest,
    service: AddressService = Depends(get_address_service),
) -> AddressResponse:
    return await service.create_address(data)


@router.delete("/{address_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_address(
    address_id: str,
    service: AddressService = Depends(get_address_service),
) -> None:
    try:
        await service.delete_address(address_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
