"""
Django admin configuration for core app.
"""

from django.contrib import admin
from django.utils.html import format_html

from core.infrastructure.models import ApiKey


@admin.register(ApiKey)
class ApiKeyAdmin(admin.ModelAdmin):
    """Admin interface for ApiKey model."""

    list_display = [
        "name",
        "key_prefix_display",
        "roles",
        "is_valid_display",
        "expires_at",
        "last_used_at",
        "created_at",
    ]
    list_filter = ["expires_at", "created_at"]
    search_fields = ["name", "key_prefix"]
    readonly_fields = [
        "id",
        "key_prefix",
        "key_hash",
        "created_at",
        "last_used_at",
        "raw_key_display",
        "is_valid_display",
    ]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "name", "roles"),
            },
        ),
        (
            "Key Information",
            {
                "fields": ("key_prefix", "key_hash", "raw_key_display"),
                "description": "The raw key is only shown once when created.",
            },
        ),
        (
            "Validity",
            {
                "fields": ("expires_at", "is_valid_display"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "last_used_at"),
                "classes": ("collapse",),
            },
        ),
    )

    @admin.display(description="Key Prefix")
    def key_prefix_display(self, obj):
        """Display key prefix with ellipsis."""
        return f"{obj.key_prefix}..."

    @admin.display(description="Status")
    def is_valid_display(self, obj):
        """Display validity status with color."""
        if obj.is_valid():
            return format_html('<span style="color: green;">{}</span>', "Valid")
        return format_html('<span style="color: red;">{}</span>', "Expired")

    @admin.display(description="Raw Key")
    def raw_key_display(self, obj):
        """Display raw key if available."""
        if hasattr(obj, "_raw_key"):
            return format_html(
                '<code style="background: #f0f0f0; padding: 4px 8px; '
                'border-radius: 3px;">{}</code>',
                obj._raw_key,
            )
        return format_html(
            '<span style="color: #999;">{}</span>',
            "Raw key not available (only shown once at creation)",
        )

    def save_model(self, request, obj, form, change):
        """Save model and show raw key if new."""
        super().save_model(request, obj, form, change)
        if not change and hasattr(obj, "_raw_key"):
            self.message_user(
                request,
                f"API Key created! Raw key: {obj._raw_key} "
                "(Save this - it won't be shown again)",
                level="WARNING",
            )
