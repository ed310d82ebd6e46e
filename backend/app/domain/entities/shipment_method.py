"""Domain entity for a shipment method (e.g. Express, Standard)."""

from dataclasses import dataclass

from app.domain.entities.base import Entity


@dataclass
class ShipmentMethod(Entity):
    """A way of shipping goods, priced per kilometer.

    ``name`` is the natural key: unique among non-deleted methods.
    """

    name: str
    price_per_kilometer: float
    description: str | None = None

    def update(
        self,
        name: str,
        description: str | None,
        price_per_kilometer: float,
    ) -> None:
        """Replace the mutable fields and refresh the updated_at timestamp."""
        self.name = name
        self.description = description
        self.price_per_kilometer = price_per_kilometer
        self.touch()
