"""Domain entity for a postal address."""

from dataclasses import dataclass

from app.domain.entities.base import Entity


@dataclass
class Address(Entity):
    """Address expressed as administrative-division codes plus a street line."""

    province_code: str
    district_code: str
    ward_code: str
    detail: str | None = None
