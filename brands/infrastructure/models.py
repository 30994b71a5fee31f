"""
Brand models.
"""

from django.db import models


class Brand(models.Model):
    """
    Represents a product brand in the catalog (e.g., SportMaster, Nike).
    """

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=100, unique=True, help_text="Brand display name")
    description = models.TextField(
        max_length=500,
        null=True,
        blank=True,
        help_text="Free-text description",
    )
    website = models.CharField(max_length=255, null=True, blank=True, help_text="Website URL")
    logo_url = models.CharField(
        max_length=255,
        null=True,
        blank=True,
        help_text="Logo URL or asset reference",
    )
    # Set by the repository so both timestamps share one instant on insert
    created_at = models.DateTimeField(editable=False)
    updated_at = models.DateTimeField()

    class Meta:
        db_table = "brands"
        ordering = ["name"]
        indexes = [
            models.Index(fields=["created_at"], name="brands_created_3c1f0e_idx"),
        ]

    def __str__(self):
        return self.name
