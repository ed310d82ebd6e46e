from .base import Base, SoftDeleteMixin
from .session import engine, async_session_factory, get_db_session
from .models import ShipmentMethodModel, AddressModel

__all__ = [
    "Base",
    "SoftDeleteMixin",
    "engine",
    "async_session_factory",
    "get_db_session",
    "ShipmentMethodModel",
    "AddressModel",
]
