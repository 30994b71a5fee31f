"""
Django implementation of BrandRepository port.

This adapter converts between domain entities and Django ORM models.
"""

import logging
from typing import Optional

from asgiref.sync import sync_to_async
from django.db import DatabaseError, IntegrityError, transaction
from django.utils import timezone

from brands.domain.brand import Brand
from brands.infrastructure.models import Brand as BrandModel
from brands.ports.brand_repository import BrandRepository
from core.domain.exceptions import DuplicateBrandNameError, StoreUnavailableError

logger = logging.getLogger(__name__)


class DjangoBrandRepository(BrandRepository):
    """
    Django ORM implementation of BrandRepository.

    This adapter:
    1. Converts Django models to domain entities
    2. Converts domain entities to Django models
    3. Implements repository interface
    """

    def _to_domain(self, model: BrandModel) -> Brand:
        """
        Convert Django model to domain entity.

        Args:
            model: Django Brand model

        Returns:
            Brand domain entity
        """
        return Brand(
            id=model.id,
            name=model.name,
            description=model.description,
            website=model.website,
            logo_url=model.logo_url,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, brand: Brand) -> BrandModel:
        """
        Convert domain entity to Django model.

        New brands get both timestamps from a single clock reading;
        existing rows keep ``created_at`` and move ``updated_at`` forward.

        Args:
            brand: Brand domain entity

        Returns:
            Django Brand model (unsaved)
        """
        now = timezone.now()
        if brand.is_new:
            return BrandModel(
                name=brand.name,
                description=brand.description,
                website=brand.website,
                logo_url=brand.logo_url,
                created_at=now,
                updated_at=now,
            )

        # pylint: disable=no-member
        model = BrandModel.objects.select_for_update().get(id=brand.id)
        model.name = brand.name
        model.description = brand.description
        model.website = brand.website
        model.logo_url = brand.logo_url
        model.updated_at = max(now, model.updated_at, brand.updated_at or now)
        return model

    def _save_sync(self, brand: Brand) -> Brand:
        try:
            with transaction.atomic():
                model = self._to_model(brand)
                model.save()
        except IntegrityError as e:
            logger.info("Brand name conflict for '%s': %s", brand.name, e)
            raise DuplicateBrandNameError(brand.name) from e
        except BrandModel.DoesNotExist as e:  # pylint: disable=no-member
            raise StoreUnavailableError(f"Brand {brand.id} no longer exists") from e
        except DatabaseError as e:
            logger.error("Brand store write failed: %s", e, exc_info=True)
            raise StoreUnavailableError() from e
        return self._to_domain(model)

    async def save(self, brand: Brand) -> Brand:
        """
        Save a brand entity.

        Args:
            brand: Brand entity to save

        Returns:
            Saved brand entity
        """
        return await sync_to_async(self._save_sync)(brand)

    async def find_by_id(self, brand_id: int) -> Optional[Brand]:
        """
        Find a brand by ID.

        Args:
            brand_id: Brand identifier

        Returns:
            Brand entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = await sync_to_async(BrandModel.objects.get)(id=brand_id)
            return self._to_domain(model)
        except BrandModel.DoesNotExist:  # pylint: disable=no-member
            return None

    async def find_by_name(self, name: str) -> Optional[Brand]:
        """
        Find a brand by name.

        Args:
            name: Brand name

        Returns:
            Brand entity or None if not found
        """
        try:
            # pylint: disable=no-member
            model = await sync_to_async(BrandModel.objects.get)(name=name.strip())
            return self._to_domain(model)
        except BrandModel.DoesNotExist:  # pylint: disable=no-member
            return None
