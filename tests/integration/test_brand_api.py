"""
Integration tests for Brand API endpoints.
"""

from unittest.mock import AsyncMock, patch

import pytest
from django.db import DatabaseError
from django.urls import reverse

from api.v1.brands import views
from brands.infrastructure.models import Brand
from core.domain.exceptions import PublicationFailure

SPORTMASTER = {
    "name": "SportMaster",
    "description": "Leading sports equipment manufacturer",
    "website": "https://sportmaster.com",
    "logoUrl": "sportmaster-logo.png",
}


@pytest.mark.django_db
@pytest.mark.integration
class TestCreateBrandAPI:
    """Integration tests for POST /api/v1/brands."""

    def test_create_brand_success(self, manager_client):
        """Test the SportMaster brand is created and returned."""
        response = manager_client.post(reverse("brands:create-brand"), SPORTMASTER, format="json")

        assert response.status_code == 201
        data = response.json()
        assert isinstance(data["id"], int)
        assert data["name"] == "SportMaster"
        assert data["description"] == "Leading sports equipment manufacturer"
        assert data["website"] == "https://sportmaster.com"
        assert data["logoUrl"] == "sportmaster-logo.png"
        assert data["createdAt"] == data["updatedAt"]
        assert data["createdAt"].endswith("Z")
        assert response["Location"] == f"http://testserver/api/v1/brands/{data['id']}"
        assert Brand.objects.filter(id=data["id"], name="SportMaster").exists()

    def test_create_brand_name_only(self, manager_client):
        """Test optional fields default to null."""
        response = manager_client.post(
            reverse("brands:create-brand"), {"name": "Acme"}, format="json"
        )

        assert response.status_code == 201
        data = response.json()
        assert data["description"] is None
        assert data["website"] is None
        assert data["logoUrl"] is None

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_rejected(self, manager_client, name):
        """Test blank names are rejected with a problem body."""
        response = manager_client.post(
            reverse("brands:create-brand"), {**SPORTMASTER, "name": name}, format="json"
        )

        assert response.status_code == 400
        assert response["Content-Type"].startswith("application/problem+json")
        body = response.json()
        assert body["status"] == 400
        assert body["code"] == "VALIDATION_ERROR"
        assert body["errors"] == {"name": ["Brand name is required"]}
        assert not Brand.objects.exists()

    def test_missing_name_rejected(self, manager_client):
        """Test a body without a name is rejected."""
        response = manager_client.post(
            reverse("brands:create-brand"), {"website": "https://acme.test"}, format="json"
        )

        assert response.status_code == 400
        assert "name" in response.json()["errors"]

    def test_invalid_website_rejected(self, manager_client):
        """Test a non-URL website is rejected."""
        response = manager_client.post(
            reverse("brands:create-brand"),
            {**SPORTMASTER, "website": "not-a-valid-url"},
            format="json",
        )

        assert response.status_code == 400
        assert list(response.json()["errors"]) == ["website"]

    def test_invalid_logo_url_uses_wire_field_name(self, manager_client):
        """Test field errors are keyed by the request field names."""
        response = manager_client.post(
            reverse("brands:create-brand"),
            {**SPORTMASTER, "logoUrl": "sport master.png"},
            format="json",
        )

        assert response.status_code == 400
        assert list(response.json()["errors"]) == ["logoUrl"]

    def test_non_string_field_rejected(self, manager_client):
        """Test structurally invalid input is rejected."""
        response = manager_client.post(
            reverse("brands:create-brand"), {"name": ["SportMaster"]}, format="json"
        )

        assert response.status_code == 400
        assert "name" in response.json()["errors"]

    def test_duplicate_name_conflict(self, manager_client):
        """Test creating the same name twice returns 409."""
        url = reverse("brands:create-brand")
        assert manager_client.post(url, SPORTMASTER, format="json").status_code == 201

        response = manager_client.post(url, SPORTMASTER, format="json")

        assert response.status_code == 409
        assert response.json()["code"] == "BRAND_NAME_CONFLICT"
        assert Brand.objects.filter(name="SportMaster").count() == 1

    def test_store_failure_returns_503(self, manager_client):
        """Test store failures map to 503."""
        with patch.object(Brand, "save", side_effect=DatabaseError("connection lost")):
            response = manager_client.post(
                reverse("brands:create-brand"), SPORTMASTER, format="json"
            )

        assert response.status_code == 503
        assert response.json()["code"] == "STORE_UNAVAILABLE"

    def test_publication_failure_still_creates(self, manager_client):
        """Test a failing event bus does not fail the request."""
        with patch.object(
            views._event_bus, "publish", AsyncMock(side_effect=PublicationFailure("down"))
        ):
            response = manager_client.post(
                reverse("brands:create-brand"), SPORTMASTER, format="json"
            )

        assert response.status_code == 201
        assert Brand.objects.filter(name="SportMaster").exists()

    def test_brand_created_event_published(self, manager_client):
        """Test one BrandCreated event is published for the new brand."""
        with patch.object(views._event_bus, "publish", AsyncMock()) as publish:
            response = manager_client.post(
                reverse("brands:create-brand"), SPORTMASTER, format="json"
            )

        publish.assert_awaited_once()
        event = publish.await_args.args[0]
        assert event.event_type == "BrandCreated"
        assert event.brand_id == response.json()["id"]


@pytest.mark.django_db
@pytest.mark.integration
class TestBrandAPIAccessControl:
    """Access control for brand endpoints."""

    def test_missing_api_key(self, api_client):
        """Test requests without a key are rejected."""
        response = api_client.post(reverse("brands:create-brand"), SPORTMASTER, format="json")

        assert response.status_code == 401
        assert response.json()["code"] == "MISSING_API_KEY"

    def test_invalid_api_key(self, api_client):
        """Test requests with an unknown key are rejected."""
        response = api_client.post(
            reverse("brands:create-brand"),
            SPORTMASTER,
            format="json",
            HTTP_X_API_KEY="invalid-key",
        )

        assert response.status_code == 401

    def test_expired_api_key(self, api_client, expired_key):
        """Test expired keys are rejected."""
        response = api_client.post(
            reverse("brands:create-brand"),
            SPORTMASTER,
            format="json",
            HTTP_X_API_KEY=expired_key._raw_key,
        )

        assert response.status_code == 401
        assert response.json()["code"] == "API_KEY_EXPIRED"

    def test_bearer_token_accepted(self, api_client, product_manager_key):
        """Test the key may be sent as a bearer token."""
        response = api_client.post(
            reverse("brands:create-brand"),
            SPORTMASTER,
            format="json",
            HTTP_AUTHORIZATION=f"Bearer {product_manager_key._raw_key}",
        )

        assert response.status_code == 201

    def test_role_required(self, api_client, viewer_key):
        """Test keys without the product-manager role are forbidden."""
        response = api_client.post(
            reverse("brands:create-brand"),
            SPORTMASTER,
            format="json",
            HTTP_X_API_KEY=viewer_key._raw_key,
        )

        assert response.status_code == 403
        assert response["Content-Type"].startswith("application/problem+json")
        assert not Brand.objects.exists()


@pytest.mark.django_db
@pytest.mark.integration
class TestGetBrandAPI:
    """Integration tests for GET /api/v1/brands/<id>."""

    def test_location_resolves(self, manager_client):
        """Test the Location header of a created brand can be fetched."""
        created = manager_client.post(reverse("brands:create-brand"), SPORTMASTER, format="json")

        response = manager_client.get(created["Location"])

        assert response.status_code == 200
        assert response.json() == created.json()

    def test_get_brand(self, manager_client, db_brand):
        """Test fetching a stored brand."""
        response = manager_client.get(
            reverse("brands:brand-detail", kwargs={"brand_id": db_brand.id})
        )

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == db_brand.id
        assert data["name"] == db_brand.name
        assert data["logoUrl"] == db_brand.logo_url

    def test_get_brand_not_found(self, manager_client):
        """Test fetching an unknown brand returns 404."""
        response = manager_client.get(reverse("brands:brand-detail", kwargs={"brand_id": 999999}))

        assert response.status_code == 404
        assert response.json()["code"] == "BRAND_NOT_FOUND"
