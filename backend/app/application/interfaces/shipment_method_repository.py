"""Abstract repository interface (port) for ShipmentMethod persistence."""

from abc import abstractmethod

from app.application.interfaces.base_repository import BaseRepository
from app.domain.entities import ShipmentMethod


class ShipmentMethodRepository(BaseRepository[ShipmentMethod]):
    """Port for shipment method persistence. All queries ignore deleted rows."""

    @abstractmethod
    async def exists_by_name(self, name: str) -> bool:
        """Return True when an active method already uses this name."""
        ...

    @abstractmethod
    async def search(
        self, keyword: str | None, skip: int = 0, limit: int = 10
    ) -> list[ShipmentMethod]:
        """Retrieve a page of methods whose name or description contains keyword."""
        ...

    @abstractmethod
    async def count_search(self, keyword: str | None) -> int:
        """Count every method matching keyword, ignoring pagination."""
        ...
