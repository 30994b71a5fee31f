"""
Django admin configuration for brands app.
"""

from django.contrib import admin

from brands.infrastructure.models import Brand


@admin.register(Brand)
class BrandAdmin(admin.ModelAdmin):
    """Admin interface for Brand model."""

    list_display = ["name", "website", "created_at", "updated_at"]
    list_filter = ["created_at", "updated_at"]
    search_fields = ["name", "description"]
    readonly_fields = ["id", "created_at", "updated_at"]
    fieldsets = (
        (
            "Basic Information",
            {
                "fields": ("id", "name", "description"),
            },
        ),
        (
            "Links",
            {
                "fields": ("website", "logo_url"),
            },
        ),
        (
            "Timestamps",
            {
                "fields": ("created_at", "updated_at"),
                "classes": ("collapse",),
            },
        ),
    )

    def save_model(self, request, obj, form, change):
        """Stamp timestamps the same way the repository does."""
        from django.utils import timezone

        now = timezone.now()
        if not change:
            obj.created_at = now
        obj.updated_at = max(now, obj.created_at)
        super().save_model(request, obj, form, change)
