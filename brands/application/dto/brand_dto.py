"""
Brand DTOs for API responses.
"""
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from brands.domain.brand import Brand


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass
class BrandDTO:
    """DTO for brand information."""

    id: int
    name: str
    description: Optional[str]
    website: Optional[str]
    logo_url: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, brand: Brand) -> "BrandDTO":
        """
        Map a persisted brand to its response shape.

        Timestamps are normalized to UTC.
        """
        return cls(
            id=brand.id,
            name=brand.name,
            description=brand.description,
            website=brand.website,
            logo_url=brand.logo_url,
            created_at=_as_utc(brand.created_at),
            updated_at=_as_utc(brand.updated_at),
        )
