from .base_repository import BaseRepository
from .shipment_method_repository import ShipmentMethodRepository
from .address_repository import AddressRepository

__all__ = [
    "BaseRepository",
    "ShipmentMethodRepository",
    "AddressRepository",
]
