"""SQLAlchemy ORM model for the Address entity."""

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.database.base import Base, SoftDeleteMixin


class AddressModel(SoftDeleteMixin, Base):
    """ORM model — maps to the 'addresses' table."""

    __tablename__ = "addresses"

    province_code: Mapped[str] = mapped_column(String(20), nullable=False)
    district_code: Mapped[str] = mapped_column(String(20), nullable=False)
    ward_code: Mapped[str] = mapped_column(String(20), nullable=False)
    detail: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (
        Index("ix_addresses_division", "province_code", "district_code", "ward_code"),
    )

    def __repr__(self) -> str:
        return (
            f"<AddressModel(id={self.id}, "
            f"province='{self.province_code}', ward='{self.ward_code}')>"
        )
