"""
CreateBrandCommand.

Command to create a brand in the product catalog.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CreateBrandCommand:
    """
    Command to create a brand.

    Field values arrive as sent by the caller; they are validated
    by the handler before anything is persisted.
    """

    name: Optional[str]
    description: Optional[str] = None
    website: Optional[str] = None
    logo_url: Optional[str] = None
