"""SQLAlchemy ORM model for the ShipmentMethod entity."""

from sqlalchemy import Float, Index, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.base import Base, SoftDeleteMixin


class ShipmentMethodModel(SoftDeleteMixin, Base):
    """ORM model — maps to the 'shipment_methods' table."""

    __tablename__ = "shipment_methods"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price_per_kilometer: Mapped[float] = mapped_column(Float, nullable=False)

    __table_args__ = (
        # Names are unique among live rows only; deleted names may be reused.
        Index(
            "uq_shipment_methods_name_active",
            "name",
            unique=True,
            postgresql_where=text("is_deleted = false"),
            sqlite_where=text("is_deleted = 0"),
        ),
        Index("ix_shipment_methods_created", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<ShipmentMethodModel(id={self.id}, name='{self.name}')>"
