from .base import Entity
from .shipment_method import ShipmentMethod
from .address import Address

__all__ = [
    "Entity",
    "ShipmentMethod",
    "Address",
]
