"""
API key model for catalog client authentication.
"""

import hashlib
import secrets
import uuid

from django.db import models
from django.utils import timezone


def hash_key(raw_key: str) -> str:
    """Return the SHA-256 hex digest stored for a raw API key."""
    return hashlib.sha256(raw_key.encode()).hexdigest()


class ApiKey(models.Model):
    """
    API keys for catalog clients.

    Each key carries the roles its holder is granted, e.g. ``product-manager``.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100, help_text="Who or what holds this key")
    key_prefix = models.CharField(max_length=8, editable=False)
    key_hash = models.CharField(max_length=64, editable=False, db_index=True)
    roles = models.JSONField(default=list, blank=True, help_text="Granted roles")
    expires_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    last_used_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "api_keys"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["key_hash"], name="api_keys_key_has_6a2b4d_idx"),
        ]

    def __str__(self):
        return f"{self.name} - {self.key_prefix}..."

    def clean(self):
        """Validate API key fields."""
        from django.core.exceptions import ValidationError

        if not isinstance(self.roles, list) or not all(
            isinstance(role, str) for role in self.roles
        ):
            raise ValidationError("Roles must be a list of strings")

    def save(self, *args, **kwargs):
        """Generate API key on first save."""
        if not self.key_hash:
            raw_key = secrets.token_urlsafe(32)
            self.key_prefix = raw_key[:8]
            self.key_hash = hash_key(raw_key)
            # Store the raw key temporarily for retrieval
            self._raw_key = raw_key
        self.full_clean()
        super().save(*args, **kwargs)

    def has_role(self, role: str) -> bool:
        """Check whether the key grants a role."""
        return role in (self.roles or [])

    def is_valid(self) -> bool:
        """
        Check if the API key is still valid.

        Returns:
            True if key is valid, False if expired
        """
        if self.expires_at and self.expires_at < timezone.now():
            return False
        return True

    def mark_used(self):
        """Update last_used_at timestamp."""
        self.last_used_at = timezone.now()
        super().save(update_fields=["last_used_at"])
