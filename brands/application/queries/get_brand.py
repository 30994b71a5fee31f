"""
GetBrandQuery.

Query to fetch a single brand by its identifier.
"""
from dataclasses import dataclass


@dataclass
class GetBrandQuery:
    """Query to get a brand by ID."""

    brand_id: int
