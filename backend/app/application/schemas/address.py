"""Pydantic DTOs (Data Transfer Objects) for the Address feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class AddressRequest(BaseModel):
    """Schema for creating a new address."""

    province_code: str = Field(..., min_length=1, max_length=20, examples=["01"])
    district_code: str = Field(..., min_length=1, max_length=20, examples=["001"])
    ward_code: str = Field(..., min_length=1, max_length=20, examples=["00001"])
    detail: str | None = Field(None, max_length=255, examples=["12 Hang Bai"])


class AddressResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    province_code: str
    district_code: str
    ward_code: str
    detail: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
