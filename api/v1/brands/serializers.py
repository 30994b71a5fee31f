"""
Serializers for Brand API endpoints.

Field-level rules (length, URL syntax) are enforced by the create brand
handler so that every caller gets the same validation; these serializers
only shape the wire format.
"""

from datetime import timezone

from rest_framework import serializers


class CreateBrandRequestSerializer(serializers.Serializer):
    """Serializer for create brand request."""

    name = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
    description = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
    website = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, trim_whitespace=False
    )
    logoUrl = serializers.CharField(
        source="logo_url",
        required=False,
        allow_blank=True,
        allow_null=True,
        trim_whitespace=False,
    )


class BrandResponseSerializer(serializers.Serializer):
    """Serializer for BrandDTO."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    description = serializers.CharField(allow_null=True)
    website = serializers.CharField(allow_null=True)
    logoUrl = serializers.CharField(source="logo_url", allow_null=True)
    createdAt = serializers.DateTimeField(source="created_at", default_timezone=timezone.utc)
    updatedAt = serializers.DateTimeField(source="updated_at", default_timezone=timezone.utc)


class ProblemSerializer(serializers.Serializer):
    """Problem details body (RFC 7807) used for error responses."""

    type = serializers.CharField()
    title = serializers.CharField()
    status = serializers.IntegerField()
    detail = serializers.CharField()
    code = serializers.CharField()
    errors = serializers.DictField(
        child=serializers.ListField(child=serializers.CharField()), required=False
    )
