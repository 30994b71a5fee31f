"""
Pytest configuration and shared fixtures.
"""

import uuid
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest
from asgiref.sync import async_to_sync

from brands.domain.brand import Brand
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from brands.ports.brand_repository import BrandRepository
from core.domain.events import EventPublisher


@pytest.fixture
def brand_repository():
    """Fixture for BrandRepository."""
    return DjangoBrandRepository()


@pytest.fixture
def fake_brand_repository():
    """BrandRepository double that assigns id 42 and matching timestamps."""
    repository = AsyncMock(spec=BrandRepository)

    async def save(brand):
        now = datetime(2026, 1, 15, 10, 30, tzinfo=timezone.utc)
        return Brand(
            id=42,
            name=brand.name,
            description=brand.description,
            website=brand.website,
            logo_url=brand.logo_url,
            created_at=now,
            updated_at=now,
        )

    repository.save.side_effect = save
    return repository


@pytest.fixture
def fake_event_publisher():
    """EventPublisher double that records published events."""
    return AsyncMock(spec=EventPublisher)


@pytest.fixture
def sample_brand():
    """Fixture for a sample, unsaved Brand entity."""
    unique_id = str(uuid.uuid4())[:8]
    return Brand.create(
        name=f"TestBrand{unique_id}",
        description="Test brand description",
        website="https://example.com",
        logo_url="logo.png",
    )


@pytest.fixture
def db_brand(db, brand_repository, sample_brand):
    """Fixture for a Brand saved in database."""
    return async_to_sync(brand_repository.save)(sample_brand)


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def product_manager_key(db):
    """API key granting the product-manager role; raw key in ``_raw_key``."""
    from django.conf import settings

    from core.infrastructure.models import ApiKey

    api_key = ApiKey(name="catalog-team", roles=[settings.PRODUCT_MANAGER_ROLE])
    api_key.save()
    return api_key


@pytest.fixture
def viewer_key(db):
    """API key without any role."""
    from core.infrastructure.models import ApiKey

    api_key = ApiKey(name="read-only", roles=[])
    api_key.save()
    return api_key


@pytest.fixture
def expired_key(db):
    """Product-manager API key that expired yesterday."""
    from django.conf import settings
    from django.utils import timezone as dj_timezone

    from core.infrastructure.models import ApiKey

    api_key = ApiKey(
        name="expired",
        roles=[settings.PRODUCT_MANAGER_ROLE],
        expires_at=dj_timezone.now() - timedelta(days=1),
    )
    api_key.save()
    return api_key


@pytest.fixture
def manager_client(api_client, product_manager_key):
    """API client authenticated as a product manager."""
    api_client.credentials(HTTP_X_API_KEY=product_manager_key._raw_key)
    return api_client
