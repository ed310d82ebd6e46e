from .base_repository import SQLAlchemyBaseRepository
from .shipment_method_repository import SQLAlchemyShipmentMethodRepository
from .address_repository import SQLAlchemyAddressRepository

__all__ = [
    "SQLAlchemyBaseRepository",
    "SQLAlchemyShipmentMethodRepository",
    "SQLAlchemyAddressRepository",
]
