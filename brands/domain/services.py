"""
Brand domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
from typing import Dict, List, Optional

from brands.domain.brand import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH, URL_MAX_LENGTH
from core.domain.value_objects import AbsoluteUri, UriReference


class BrandValidator:
    """Domain service for brand validation."""

    @staticmethod
    def validate_name(name: Optional[str]) -> List[str]:
        """
        Validate brand name.

        Args:
            name: Brand name to validate

        Returns:
            List of error messages, empty if valid
        """
        if name is None or len(name.strip()) == 0:
            return ["Brand name is required"]
        if len(name.strip()) > NAME_MAX_LENGTH:
            return [f"Brand name must be at most {NAME_MAX_LENGTH} characters"]
        return []

    @staticmethod
    def validate_description(description: Optional[str]) -> List[str]:
        """
        Validate brand description.

        Args:
            description: Description to validate

        Returns:
            List of error messages, empty if valid
        """
        if description is not None and len(description.strip()) > DESCRIPTION_MAX_LENGTH:
            return [f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters"]
        return []

    @staticmethod
    def validate_website(website: Optional[str]) -> List[str]:
        """
        Validate website: an absolute URI.

        Args:
            website: Website to validate

        Returns:
            List of error messages, empty if valid
        """
        return BrandValidator._validate_link(website, "Website", AbsoluteUri)

    @staticmethod
    def validate_logo_url(logo_url: Optional[str]) -> List[str]:
        """
        Validate logo URL: an absolute URI or a relative reference.

        Args:
            logo_url: Logo URL to validate

        Returns:
            List of error messages, empty if valid
        """
        return BrandValidator._validate_link(logo_url, "Logo URL", UriReference)

    @staticmethod
    def _validate_link(value: Optional[str], label: str, value_type: type) -> List[str]:
        if value is None or len(value.strip()) == 0:
            return []
        value = value.strip()
        if len(value) > URL_MAX_LENGTH:
            return [f"{label} must be at most {URL_MAX_LENGTH} characters"]
        try:
            value_type(value)
        except ValueError as e:
            return [f"{label} is not a valid URL: {e}"]
        return []

    @classmethod
    def validate(
        cls,
        name: Optional[str],
        description: Optional[str] = None,
        website: Optional[str] = None,
        logo_url: Optional[str] = None,
    ) -> Dict[str, List[str]]:
        """
        Validate all brand fields.

        Returns:
            Mapping of field name to error messages; empty when valid
        """
        checks = {
            "name": cls.validate_name(name),
            "description": cls.validate_description(description),
            "website": cls.validate_website(website),
            "logo_url": cls.validate_logo_url(logo_url),
        }
        return {field: messages for field, messages in checks.items() if messages}
