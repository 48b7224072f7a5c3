"""
Schemas Package
===============

Pydantic models for catalog records, filter state and aggregates.
"""

from catalog_engine.schemas.domain import (
    ALL_CATEGORIES,
    CatalogData,
    CatalogView,
    CategoryCount,
    FilterState,
    PriceStatistics,
    Product,
)

__all__ = [
    "ALL_CATEGORIES",
    # Records
    "Product",
    "CatalogData",
    # State
    "FilterState",
    # Aggregates
    "CategoryCount",
    "PriceStatistics",
    "CatalogView",
]
