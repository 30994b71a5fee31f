"""
API key authentication middleware.

This middleware validates API keys for the catalog APIs. Role checks
happen later, in DRF permission classes.
"""

import logging
from typing import Optional

from django.conf import settings
from django.db import DatabaseError
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.deprecation import MiddlewareMixin

from core.infrastructure.models import ApiKey, hash_key

logger = logging.getLogger(__name__)


def _problem(status: int, title: str, detail: str, code: str) -> JsonResponse:
    return JsonResponse(
        {
            "type": "about:blank",
            "title": title,
            "status": status,
            "detail": detail,
            "code": code,
        },
        status=status,
        content_type="application/problem+json",
    )


class APIKeyAuthenticationMiddleware(MiddlewareMixin):
    """
    Middleware for API key authentication.

    This middleware:
    1. Validates API keys for protected paths (``/api/v1/`` by default)
    2. Returns 401 Unauthorized if authentication fails
    3. Attaches the key to ``request.api_key`` for permission checks
    """

    def process_request(self, request: HttpRequest) -> Optional[HttpResponse]:
        """
        Process request and validate authentication.

        Args:
            request: HTTP request

        Returns:
            HttpResponse with 401 if authentication fails, None otherwise
        """
        request.api_key = None  # type: ignore

        prefixes = getattr(settings, "PROTECTED_PATH_PREFIXES", ["/api/v1/"])
        if not any(request.path.startswith(prefix) for prefix in prefixes):
            return None

        return self._authenticate(request)

    def _authenticate(self, request: HttpRequest) -> Optional[HttpResponse]:
        """
        Authenticate API request.

        Args:
            request: HTTP request

        Returns:
            HttpResponse with 401 if auth fails, None if successful
        """
        header = getattr(settings, "API_KEY_HEADER", "X-API-Key")
        raw_key = request.headers.get(header) or request.headers.get(
            "Authorization", ""
        ).replace("Bearer ", "")

        if not raw_key:
            return _problem(
                401, "Unauthorized", f"Missing API key. Provide {header} header.", "MISSING_API_KEY"
            )

        try:
            # pylint: disable=no-member
            api_key = ApiKey.objects.filter(key_hash=hash_key(raw_key)).first()
            if not api_key:
                logger.warning("Invalid API key attempted: %s...", raw_key[:8])
                return _problem(401, "Unauthorized", "Invalid API key", "INVALID_API_KEY")

            if not api_key.is_valid():
                logger.warning("Expired API key attempted: %s...", raw_key[:8])
                return _problem(401, "Unauthorized", "API key expired", "API_KEY_EXPIRED")

            api_key.mark_used()

            request.api_key = api_key  # type: ignore
            return None

        except DatabaseError as e:
            logger.error("Error authenticating API request: %s", e, exc_info=True)
            return _problem(
                503, "Service Unavailable", "Authentication store unavailable", "STORE_UNAVAILABLE"
            )
