"""
Brand domain events.

Domain events represent something that happened in the brand domain.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

from brands.domain.brand import Brand
from core.domain.events import DomainEvent


@dataclass(frozen=True)
class BrandCreated(DomainEvent):
    """Event raised when a brand is created."""

    brand_id: int
    name: str
    description: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None

    @classmethod
    def from_brand(cls, brand: Brand) -> "BrandCreated":
        """
        Build the event from a persisted brand.

        Only business fields are carried; storage metadata such as
        timestamps stays with the store.

        Args:
            brand: Persisted Brand entity

        Returns:
            BrandCreated event
        """
        if brand.id is None:
            raise ValueError("BrandCreated requires a persisted brand")
        return cls(
            aggregate_id=str(brand.id),
            brand_id=brand.id,
            name=brand.name,
            description=brand.description,
            website=brand.website,
            logo_url=brand.logo_url,
        )

    def payload(self) -> Dict[str, Any]:
        """Business fields of the created brand."""
        return {
            "id": self.brand_id,
            "name": self.name,
            "description": self.description,
            "website": self.website,
            "logo_url": self.logo_url,
        }
