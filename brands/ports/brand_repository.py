"""
Brand repository port (interface).

This defines the contract for brand persistence operations.
Implementations are in the infrastructure layer.
"""

from abc import ABC, abstractmethod
from typing import Optional

from brands.domain.brand import Brand


class BrandRepository(ABC):
    """
    Abstract repository for Brand entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    """

    @abstractmethod
    async def save(self, brand: Brand) -> Brand:
        """
        Save a brand entity atomically.

        The first save assigns ``id`` and sets ``created_at`` and
        ``updated_at`` to the same instant; later saves only move
        ``updated_at`` forward.

        Args:
            brand: Brand entity to save

        Returns:
            Saved brand entity

        Raises:
            DuplicateBrandNameError: If another brand has the same name
            StoreUnavailableError: If the store cannot perform the write
        """
        pass

    @abstractmethod
    async def find_by_id(self, brand_id: int) -> Optional[Brand]:
        """
        Find a brand by ID.

        Args:
            brand_id: Brand identifier

        Returns:
            Brand entity or None if not found
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Brand]:
        """
        Find a brand by name.

        Args:
            name: Brand name

        Returns:
            Brand entity or None if not found
        """
        pass
