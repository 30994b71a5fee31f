"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""
from typing import Dict, List, Optional


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class ValidationError(DomainException):
    """Raised when caller-supplied data violates a field constraint."""

    def __init__(
        self,
        errors: Dict[str, List[str]],
        message: str = "Brand data is invalid",
    ):
        """
        Initialize validation error.

        Args:
            errors: Field name to list of messages
            message: Summary message
        """
        super().__init__(message, code="VALIDATION_ERROR")
        self.errors = errors


class ConflictError(DomainException):
    """Raised when a write collides with existing state."""

    def __init__(self, message: str = "Resource conflict", code: str = "CONFLICT"):
        super().__init__(message, code=code)


class StoreFailure(DomainException):
    """Base exception for infrastructure-level persistence failures."""

    pass


class PublicationFailure(DomainException):
    """Raised by event publishers when an event could not be handed off."""

    def __init__(self, message: str = "Event publication failed"):
        super().__init__(message, code="PUBLICATION_FAILED")


class BrandException(DomainException):
    """Base exception for brand-related errors."""

    pass


class BrandNotFoundError(BrandException):
    """Raised when a brand is not found."""

    def __init__(self, message: str = "Brand not found"):
        super().__init__(message, code="BRAND_NOT_FOUND")


class DuplicateBrandNameError(ConflictError):
    """Raised when a brand with the same name already exists."""

    def __init__(self, name: Optional[str] = None):
        message = (
            f"Brand with name '{name}' already exists" if name else "Brand name already exists"
        )
        super().__init__(message, code="BRAND_NAME_CONFLICT")
        self.name = name


class StoreUnavailableError(StoreFailure):
    """Raised when the brand store rejects or cannot perform a write."""

    def __init__(self, message: str = "Brand store is unavailable"):
        super().__init__(message, code="STORE_UNAVAILABLE")


class InvalidAPIKeyError(DomainException):
    """Raised when an API key is invalid."""

    def __init__(self, message: str = "Invalid API key"):
        super().__init__(message, code="INVALID_API_KEY")
