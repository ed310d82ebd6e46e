"""Pydantic DTOs (Data Transfer Objects) for the ShipmentMethod feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class ShipmentMethodRequest(BaseModel):
    """Schema for creating or fully updating a shipment method."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Express"])
    description: str | None = Field(None, max_length=1000, examples=["Fast delivery"])
    price_per_kilometer: float = Field(..., ge=0, examples=[2.5])


class ShipmentMethodResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str
    description: str | None
    price_per_kilometer: float
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class ShipmentMethodPageResponse(BaseModel):
    """A page of shipment methods plus the size of the full match set."""

    items: list[ShipmentMethodResponse]
    total: int
