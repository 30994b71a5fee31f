"""
API exception handlers.

This module maps domain and DRF exceptions to ``application/problem+json``
responses.
"""

import logging
from typing import Any, Dict, List, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    BrandNotFoundError,
    ConflictError,
    DomainException,
    InvalidAPIKeyError,
    StoreFailure,
    ValidationError,
)
from core.metrics import errors_total

logger = logging.getLogger(__name__)

PROBLEM_CONTENT_TYPE = "application/problem+json"

_TITLES = {
    status.HTTP_400_BAD_REQUEST: "Bad Request",
    status.HTTP_401_UNAUTHORIZED: "Unauthorized",
    status.HTTP_403_FORBIDDEN: "Forbidden",
    status.HTTP_404_NOT_FOUND: "Not Found",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Method Not Allowed",
    status.HTTP_409_CONFLICT: "Conflict",
    status.HTTP_415_UNSUPPORTED_MEDIA_TYPE: "Unsupported Media Type",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Internal Server Error",
    status.HTTP_503_SERVICE_UNAVAILABLE: "Service Unavailable",
}


def camel_case(field_name: str) -> str:
    """Convert a snake_case field name to the camelCase wire name."""
    head, *rest = field_name.split("_")
    return head + "".join(part.title() for part in rest)


def problem_response(
    status_code: int,
    detail: str,
    code: str,
    errors: Optional[Dict[str, List[str]]] = None,
    trace_id: Optional[str] = None,
) -> Response:
    """Build a problem+json response."""
    body: Dict[str, Any] = {
        "type": "about:blank",
        "title": _TITLES.get(status_code, "Error"),
        "status": status_code,
        "detail": detail,
        "code": code,
    }
    if errors is not None:
        body["errors"] = errors
    response = Response(body, status=status_code, content_type=PROBLEM_CONTENT_TYPE)
    if trace_id:
        response["X-Trace-ID"] = trace_id
    return response


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    trace_id = _get_trace_id(context)

    if isinstance(exc, DomainException):
        return _handle_domain_exception(exc, trace_id)

    if isinstance(exc, APIException):
        response = exception_handler(exc, context)
        if response is not None:
            detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
            code = str(getattr(exc, "default_code", "api_error")).upper().replace("-", "_")
            problem = problem_response(response.status_code, detail, code, trace_id=trace_id)
            for header in ("WWW-Authenticate", "Allow", "Retry-After"):
                if header in response:
                    problem[header] = response[header]
            return problem

    if isinstance(exc, Http404):
        return problem_response(
            status.HTTP_404_NOT_FOUND, "Resource not found", "NOT_FOUND", trace_id=trace_id
        )

    return _handle_unexpected_exception(exc, context, trace_id)


def _get_trace_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract trace ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "trace_id", getattr(request, "correlation_id", None))


def _handle_domain_exception(exc: DomainException, trace_id: Optional[str]) -> Response:
    """Handle domain-specific exceptions."""
    errors = None
    status_code = status.HTTP_400_BAD_REQUEST
    if isinstance(exc, ValidationError):
        errors = {camel_case(field): list(messages) for field, messages in exc.errors.items()}
    elif isinstance(exc, ConflictError):
        status_code = status.HTTP_409_CONFLICT
    elif isinstance(exc, BrandNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, InvalidAPIKeyError):
        status_code = status.HTTP_401_UNAUTHORIZED
    elif isinstance(exc, StoreFailure):
        status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    log = logger.error if status_code >= 500 else logger.warning
    log("Domain exception: %s - %s", exc.code, exc.message, extra={"trace_id": trace_id})
    return problem_response(status_code, exc.message, exc.code, errors=errors, trace_id=trace_id)


def _handle_unexpected_exception(
    exc: Exception, context: Dict[str, Any], trace_id: Optional[str]
) -> Response:
    """Handle unexpected or untracked exceptions."""
    logger.error("Unexpected error: %s", exc, extra={"trace_id": trace_id}, exc_info=True)
    request = context.get("request")
    errors_total.labels(
        error_type=type(exc).__name__,
        endpoint=request.path if request is not None else "unknown",
    ).inc()
    return problem_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An internal error occurred",
        "INTERNAL_ERROR",
        trace_id=trace_id,
    )
