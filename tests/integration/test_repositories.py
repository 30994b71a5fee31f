"""
Integration tests for repository implementations.

Repository calls go through async_to_sync so the ORM runs on the test
thread's database connection.
"""

from unittest.mock import patch

import pytest
from asgiref.sync import async_to_sync
from django.db import DatabaseError

from brands.domain.brand import Brand
from brands.infrastructure.models import Brand as BrandModel
from core.domain.exceptions import DuplicateBrandNameError, StoreUnavailableError


@pytest.mark.django_db
@pytest.mark.integration
class TestBrandRepository:
    """Integration tests for BrandRepository."""

    def test_save_assigns_identity_and_timestamps(self, brand_repository):
        """Test saving a new brand assigns id and equal timestamps."""
        brand = Brand.create(
            name="SportMaster",
            description="Leading sports equipment manufacturer",
            website="https://sportmaster.com",
            logo_url="sportmaster-logo.png",
        )

        saved = async_to_sync(brand_repository.save)(brand)

        assert saved.id is not None
        assert saved.created_at is not None
        assert saved.created_at == saved.updated_at
        assert saved.logo_url == "sportmaster-logo.png"
        assert BrandModel.objects.filter(id=saved.id).exists()

    def test_identifiers_are_unique(self, brand_repository):
        """Test every saved brand gets its own identifier."""
        first = async_to_sync(brand_repository.save)(Brand.create(name="First"))
        second = async_to_sync(brand_repository.save)(Brand.create(name="Second"))

        assert first.id != second.id

    def test_find_by_id(self, brand_repository, db_brand):
        """Test finding a saved brand by ID."""
        found = async_to_sync(brand_repository.find_by_id)(db_brand.id)

        assert found == db_brand

    def test_find_by_id_not_found(self, brand_repository):
        """Test finding a non-existent brand."""
        assert async_to_sync(brand_repository.find_by_id)(999999) is None

    def test_find_by_name(self, brand_repository, db_brand):
        """Test finding a saved brand by name."""
        found = async_to_sync(brand_repository.find_by_name)(db_brand.name)

        assert found is not None
        assert found.id == db_brand.id

    def test_find_by_name_not_found(self, brand_repository):
        """Test finding a brand by an unknown name."""
        assert async_to_sync(brand_repository.find_by_name)("Nobody") is None

    def test_duplicate_name_rejected(self, brand_repository, db_brand):
        """Test the unique name constraint maps to DuplicateBrandNameError."""
        with pytest.raises(DuplicateBrandNameError):
            async_to_sync(brand_repository.save)(Brand.create(name=db_brand.name))

        assert BrandModel.objects.filter(name=db_brand.name).count() == 1

    def test_update_keeps_created_at(self, brand_repository, db_brand):
        """Test saving an existing brand moves only updated_at."""
        changed = db_brand.update(description="Updated description")

        saved = async_to_sync(brand_repository.save)(changed)

        assert saved.id == db_brand.id
        assert saved.description == "Updated description"
        assert saved.created_at == db_brand.created_at
        assert saved.updated_at >= db_brand.updated_at

    def test_database_error_maps_to_store_unavailable(self, brand_repository):
        """Test other database failures surface as StoreUnavailableError."""
        with patch.object(BrandModel, "save", side_effect=DatabaseError("disk full")):
            with pytest.raises(StoreUnavailableError):
                async_to_sync(brand_repository.save)(Brand.create(name="Acme"))

        assert not BrandModel.objects.filter(name="Acme").exists()
