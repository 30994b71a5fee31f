"""
GetBrandHandler.

Handler for the get brand query.
"""

from brands.application.dto.brand_dto import BrandDTO
from brands.application.queries.get_brand import GetBrandQuery
from brands.ports.brand_repository import BrandRepository
from core.domain.exceptions import BrandNotFoundError


class GetBrandHandler:
    """Handler for GetBrandQuery."""

    def __init__(self, brand_repository: BrandRepository):
        """Initialize handler with repository."""
        self.brand_repository = brand_repository

    async def handle(self, query: GetBrandQuery) -> BrandDTO:
        """
        Handle get brand query.

        Raises:
            BrandNotFoundError: If no brand has the given ID
        """
        brand = await self.brand_repository.find_by_id(query.brand_id)
        if not brand:
            raise BrandNotFoundError(f"Brand {query.brand_id} not found")
        return BrandDTO.from_entity(brand)
