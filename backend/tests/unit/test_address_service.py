"""Unit tests for the AddressService."""

import pytest

from app.application.schemas import AddressRequest
from app.application.services import AddressService
from app.domain.exceptions import EntityNotFoundError
from tests.fakes import FakeAddressRepository


@pytest.fixture
def service() -> AddressService:
    return AddressService(FakeAddressRepository())


def _request(**overrides) -> AddressRequest:
    data = dict(province_code="01", district_code="001", ward_code="00001", detail="12 Hang Bai")
    data.update(overrides)
    return AddressRequest(**data)


@pytest.mark.asyncio
async def test_create_address(service: AddressService):
    response = await service.create_address(_request())
    assert response.id
    assert response.ward_code == "00001"
    assert response.detail == "12 Hang Bai"


@pytest.mark.asyncio
async def test_duplicate_addresses_allowed(service: AddressService):
    first = await service.create_address(_request())
    second = await service.create_address(_request())
    assert first.id != second.id


@pytest.mark.asyncio
async def test_get_address_after_delete_raises(service: AddressService):
    created = await service.create_address(_request())
    assert (await service.get_address(created.id)).province_code == "01"

    await service.delete_address(created.id)
    with pytest.raises(EntityNotFoundError):
        await service.get_address(created.id)
