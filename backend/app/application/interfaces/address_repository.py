"""Abstract repository interface (port) for Address persistence."""

from app.application.interfaces.base_repository import BaseRepository
from app.domain.entities import Address


class AddressRepository(BaseRepository[Address]):
    """Port for address persistence — no operations beyond the base contract."""
