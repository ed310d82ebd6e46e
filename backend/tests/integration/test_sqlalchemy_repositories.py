"""SQLAlchemy repository tests against an in-memory SQLite database."""

import pytest
import pytest_asyncio
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.application.services import ShipmentMethodService
from app.domain.entities import Address, ShipmentMethod
from app.domain.exceptions import DuplicateEntityError
from app.infrastructure.database import Base
from app.infrastructure.database.repositories import (
    SQLAlchemyBaseRepository,
    SQLAlchemyAddressRepository,
    SQLAlchemyShipmentMethodRepository,
)


@pytest_asyncio.fixture
async def session():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as s:
        yield s
    await engine.dispose()


@pytest.fixture
def repo(session: AsyncSession) -> SQLAlchemyShipmentMethodRepository:
    return SQLAlchemyShipmentMethodRepository(session)


def _method(name: str, description: str | None = None) -> ShipmentMethod:
    return ShipmentMethod(name=name, description=description, price_per_kilometer=1.5)


@pytest.mark.asyncio
async def test_create_and_get_by_id(repo: SQLAlchemyShipmentMethodRepository):
    created = await repo.create(_method("Express", "Fast"))
    loaded = await repo.get_by_id(created.id)
    assert loaded is not None
    assert loaded.name == "Express"
    assert loaded.is_deleted is False


@pytest.mark.asyncio
async def test_get_by_id_returns_deleted_rows(repo: SQLAlchemyShipmentMethodRepository):
    created = await repo.create(_method("Express"))
    created.mark_deleted()
    await repo.update(created)
    loaded = await repo.get_by_id(created.id)
    assert loaded is not None and loaded.is_deleted is True


@pytest.mark.asyncio
async def test_read_paths_skip_deleted(repo: SQLAlchemyShipmentMethodRepository):
    await repo.create(_method("Express", "Fast"))
    gone = await repo.create(_method("Express Old", "Fast"))
    gone.mark_deleted()
    await repo.update(gone)

    assert [m.name for m in await repo.get_all()] == ["Express"]
    assert [m.name for m in await repo.search("express")] == ["Express"]
    assert await repo.count_search("express") == 1
    assert await repo.exists_by_name("Express Old") is False
    assert await repo.exists_by_name("Express") is True


@pytest.mark.asyncio
async def test_search_matches_description_case_insensitively(
    repo: SQLAlchemyShipmentMethodRepository,
):
    await repo.create(_method("Express", "Very FAST"))
    await repo.create(_method("Standard", "cheap"))
    await repo.create(_method("Economy"))

    assert [m.name for m in await repo.search("fast")] == ["Express"]
    assert await repo.count_search(None) == 3
    assert await repo.count_search("") == 3


@pytest.mark.asyncio
async def test_search_pagination_total_and_order(repo: SQLAlchemyShipmentMethodRepository):
    for name in ("A", "B", "C", "D", "E"):
        await repo.create(_method(name))

    first = await repo.search(None, skip=0, limit=2)
    rest = await repo.search(None, skip=2, limit=10)

    assert len(first) == 2
    assert len(rest) == 3
    assert [m.id for m in first + rest] == [m.id for m in await repo.get_all()]
    assert await repo.count_search(None) == 5


@pytest.mark.asyncio
async def test_unique_index_violation_becomes_duplicate_error(
    repo: SQLAlchemyShipmentMethodRepository, session: AsyncSession
):
    await repo.create(_method("Express"))
    with pytest.raises(DuplicateEntityError) as exc_info:
        await repo.create(_method("Express"))
    assert exc_info.value.value == "Express"
    await session.rollback()


@pytest.mark.asyncio
async def test_search_treats_like_wildcards_literally(repo: SQLAlchemyShipmentMethodRepository):
    await repo.create(_method("Express", "Fast"))
    await repo.create(_method("Eco_50%", "Half price"))

    assert [m.name for m in await repo.search("_")] == ["Eco_50%"]
    assert await repo.count_search("_") == 1
    assert [m.name for m in await repo.search("50%")] == ["Eco_50%"]
    assert await repo.count_search("50%") == 1
    assert await repo.count_search("%") == 1


@pytest.mark.asyncio
async def test_service_total_counts_literal_keyword_matches(
    repo: SQLAlchemyShipmentMethodRepository,
):
    await repo.create(_method("Express"))
    await repo.create(_method("Eco_50%"))

    page = await ShipmentMethodService(repo).list_shipment_methods(keyword="_", size=10, page=0)

    assert [m.name for m in page.items] == ["Eco_50%"]
    assert page.total == 1


@pytest.mark.asyncio
async def test_rename_onto_active_name_becomes_duplicate_error(
    repo: SQLAlchemyShipmentMethodRepository, session: AsyncSession
):
    await repo.create(_method("Express"))
    standard = await repo.create(_method("Standard"))

    standard.update(name="Express", description=None, price_per_kilometer=1.0)
    with pytest.raises(DuplicateEntityError) as exc_info:
        await repo.update(standard)
    assert exc_info.value.field == "name"
    await session.rollback()


@pytest.mark.asyncio
async def test_primary_key_collision_is_not_a_duplicate_name(
    repo: SQLAlchemyShipmentMethodRepository, session: AsyncSession
):
    first = await repo.create(_method("Express"))
    session.expunge_all()

    clash = _method("Standard")
    clash.id = first.id
    with pytest.raises(IntegrityError):
        await repo.create(clash)
    await session.rollback()


@pytest.mark.asyncio
async def test_unique_index_ignores_deleted_rows(repo: SQLAlchemyShipmentMethodRepository):
    first = await repo.create(_method("Express"))
    first.mark_deleted()
    await repo.update(first)

    second = await repo.create(_method("Express"))
    assert second.id != first.id


@pytest.mark.asyncio
async def test_address_round_trip(session: AsyncSession):
    repo = SQLAlchemyAddressRepository(session)
    created = await repo.create(
        Address(province_code="01", district_code="001", ward_code="00001", detail="12 Hang Bai")
    )
    loaded = await repo.get_by_id(created.id)
    assert loaded is not None
    assert loaded.detail == "12 Hang Bai"
    assert [a.id for a in await repo.get_all()] == [created.id]


def test_repository_without_mapping_hooks_cannot_be_built():
    class IncompleteRepository(SQLAlchemyBaseRepository):
        entity_type = "Incomplete"

    with pytest.raises(TypeError):
        IncompleteRepository(None)
