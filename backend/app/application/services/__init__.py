from .base_service import BaseService
from .shipment_method_service import ShipmentMethodService
from .address_service import AddressService

__all__ = [
    "BaseService",
    "ShipmentMethodService",
    "AddressService",
]
