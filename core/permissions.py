"""
DRF permission classes for role-gated endpoints.

Roles come from the API key attached to the request by
APIKeyAuthenticationMiddleware.
"""

import logging

from django.conf import settings
from rest_framework.permissions import BasePermission

logger = logging.getLogger(__name__)


class HasRole(BasePermission):
    """Allow access only to callers whose API key grants ``required_role``."""

    required_role: str = ""
    message = "You do not have permission to perform this action."

    def has_permission(self, request, view) -> bool:
        api_key = getattr(request, "api_key", None)
        if api_key is None:
            return False
        if api_key.has_role(self.required_role):
            return True
        logger.warning(
            "API key %s... lacks role %s", api_key.key_prefix, self.required_role
        )
        return False


class IsProductManager(HasRole):
    """Caller must hold the product-manager role."""

    required_role = settings.PRODUCT_MANAGER_ROLE
    message = "The product-manager role is required."
