"""
Brand API views.

These endpoints are used by catalog clients to:
- Create brands
- Fetch a brand by ID
"""

from asgiref.sync import async_to_sync
from django.conf import settings
from django.urls import reverse
from drf_spectacular.utils import OpenApiExample, extend_schema
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from api.v1.brands.serializers import (
    BrandResponseSerializer,
    CreateBrandRequestSerializer,
    ProblemSerializer,
)
from brands.application.commands.create_brand import CreateBrandCommand
from brands.application.handlers.create_brand_handler import CreateBrandHandler
from brands.application.handlers.get_brand_handler import GetBrandHandler
from brands.application.queries.get_brand import GetBrandQuery
from brands.infrastructure.repositories.django_brand_repository import DjangoBrandRepository
from core.domain.exceptions import ValidationError
from core.infrastructure.events import build_event_bus
from core.instrumentation import Status, StatusCode, get_tracer
from core.permissions import IsProductManager

# Collaborators are built once per process and passed to handlers explicitly
_brand_repo = DjangoBrandRepository()
_event_bus = build_event_bus()

tracer = get_tracer(__name__)


class CreateBrandView(APIView):
    """View for creating brands."""

    permission_classes = [IsProductManager]

    @extend_schema(
        operation_id="create_brand",
        summary="Create Brand",
        description=(
            "Create a brand in the product catalog and announce it with a "
            "BrandCreated event. Requires an API key with the product-manager role."
        ),
        tags=["Brands"],
        request=CreateBrandRequestSerializer,
        responses={
            201: BrandResponseSerializer,
            400: ProblemSerializer,
            401: ProblemSerializer,
            403: ProblemSerializer,
            409: ProblemSerializer,
            503: ProblemSerializer,
        },
        examples=[
            OpenApiExample(
                "SportMaster",
                value={
                    "name": "SportMaster",
                    "description": "Leading sports equipment manufacturer",
                    "website": "https://sportmaster.com",
                    "logoUrl": "sportmaster-logo.png",
                },
                request_only=True,
            ),
        ],
    )
    def post(self, request: Request) -> Response:
        """Create a brand."""
        return async_to_sync(self._handle_create_brand)(request)

    async def _handle_create_brand(self, request: Request) -> Response:
        """Async handler for create brand."""
        with tracer.start_as_current_span("create_brand") as span:
            span.set_attribute("operation", "create_brand")

            serializer = CreateBrandRequestSerializer(data=request.data)
            if not serializer.is_valid():
                span.set_attribute("error", "validation_failed")
                span.set_status(Status(StatusCode.ERROR, "Validation failed"))
                raise ValidationError(
                    {field: [str(m) for m in messages] for field, messages in serializer.errors.items()}
                )

            handler = CreateBrandHandler(
                brand_repository=_brand_repo,
                event_publisher=_event_bus,
                publish_timeout=settings.EVENT_PUBLISH_TIMEOUT_SECONDS,
            )

            data = serializer.validated_data
            command = CreateBrandCommand(
                name=data.get("name"),
                description=data.get("description"),
                website=data.get("website"),
                logo_url=data.get("logo_url"),
            )

            result = await handler.handle(command)

            span.set_attribute("brand.id", result.id)
            span.set_attribute("brand.name", result.name)
            span.set_status(Status(StatusCode.OK))

            location = request.build_absolute_uri(
                reverse("brands:brand-detail", kwargs={"brand_id": result.id})
            )
            return Response(
                BrandResponseSerializer(result).data,
                status=status.HTTP_201_CREATED,
                headers={"Location": location},
            )


class BrandDetailView(APIView):
    """View for fetching a single brand."""

    permission_classes = [IsProductManager]

    @extend_schema(
        operation_id="get_brand",
        summary="Get Brand",
        description="Fetch a brand by its identifier.",
        tags=["Brands"],
        responses={
            200: BrandResponseSerializer,
            401: ProblemSerializer,
            403: ProblemSerializer,
            404: ProblemSerializer,
        },
    )
    def get(self, request: Request, brand_id: int) -> Response:
        """Get a brand."""
        return async_to_sync(self._handle_get_brand)(request, brand_id)

    async def _handle_get_brand(self, request: Request, brand_id: int) -> Response:
        """Async handler for get brand."""
        with tracer.start_as_current_span("get_brand") as span:
            span.set_attribute("operation", "get_brand")
            span.set_attribute("brand.id", brand_id)

            handler = GetBrandHandler(brand_repository=_brand_repo)
            result = await handler.handle(GetBrandQuery(brand_id=brand_id))

            span.set_status(Status(StatusCode.OK))
            return Response(BrandResponseSerializer(result).data, status=status.HTTP_200_OK)
