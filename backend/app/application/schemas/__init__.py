from .shipment_method import (
    ShipmentMethodRequest,
    ShipmentMethodResponse,
    ShipmentMethodPageResponse,
)
from .address import AddressRequest, AddressResponse

__all__ = [
    "ShipmentMethodRequest",
    "ShipmentMethodResponse",
    "ShipmentMethodPageResponse",
    "AddressRequest",
    "AddressResponse",
]
