"""
Brand domain entity.

This is the core domain entity representing a catalog brand.
It contains business logic and is independent of infrastructure.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500
URL_MAX_LENGTH = 255


def _clean(value: Optional[str]) -> Optional[str]:
    """Trim optional text, mapping blank values to None."""
    if value is None:
        return None
    value = value.strip()
    return value or None


@dataclass(frozen=True)
class Brand:
    """
    Brand domain entity.

    ``id``, ``created_at`` and ``updated_at`` are assigned by the store
    on first save; an unsaved brand has all three set to None.
    """

    name: str
    description: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        """Validate brand entity."""
        if not self.name or len(self.name.strip()) == 0:
            raise ValueError("Brand name cannot be empty")
        if len(self.name) > NAME_MAX_LENGTH:
            raise ValueError("Brand name too long")
        if self.created_at and self.updated_at and self.updated_at < self.created_at:
            raise ValueError("Brand updated_at cannot precede created_at")

    @property
    def is_new(self) -> bool:
        """True until the store has assigned an identifier."""
        return self.id is None

    @classmethod
    def create(
        cls,
        name: str,
        description: Optional[str] = None,
        website: Optional[str] = None,
        logo_url: Optional[str] = None,
    ) -> "Brand":
        """
        Create a new, unsaved Brand entity.

        Args:
            name: Brand display name
            description: Optional free-text description
            website: Optional website URL
            logo_url: Optional logo URL or asset reference

        Returns:
            Brand entity instance
        """
        return cls(
            name=name.strip(),
            description=_clean(description),
            website=_clean(website),
            logo_url=_clean(logo_url),
        )

    def update(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        website: Optional[str] = None,
        logo_url: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> "Brand":
        """
        Create a new Brand instance with the given fields changed.

        Fields left as None keep their current value. ``updated_at``
        moves forward and never decreases.

        Returns:
            New Brand instance
        """
        now = now or datetime.now(timezone.utc)
        if self.updated_at and now < self.updated_at:
            now = self.updated_at
        return replace(
            self,
            name=name.strip() if name is not None else self.name,
            description=_clean(description) if description is not None else self.description,
            website=_clean(website) if website is not None else self.website,
            logo_url=_clean(logo_url) if logo_url is not None else self.logo_url,
            updated_at=now if not self.is_new else self.updated_at,
        )

