from .shipment_method import ShipmentMethodModel
from .address import AddressModel

__all__ = [
    "ShipmentMethodModel",
    "AddressModel",
]
