"""
Catalog Services
================

Classification, querying and filter-state handling over the catalog.

Components:
    - CategoryClassifier: ordered keyword rules, name → label
    - CatalogStore: read-only dataset holder
    - Query engine: search, category aggregates, price statistics
    - Filter state: FilterState ↔ query parameters
"""

from catalog_engine.services.catalog_store import (
    CatalogStore,
    get_catalog_store,
    load_catalog,
)
from catalog_engine.services.category_classifier import (
    CategoryClassifier,
    CategoryRule,
    classify,
)
from catalog_engine.services.filter_state import (
    clear_filters,
    decode_query,
    encode_query,
    from_query,
    merge_query,
    to_query,
    with_category,
    with_search,
)
from catalog_engine.services.query_engine import (
    build_view,
    category_distribution,
    category_pills,
    list_categories,
    price_statistics,
    results_summary,
    search,
    search_state,
    select_featured,
    split_featured,
)

__all__ = [
    # Store
    "CatalogStore",
    "get_catalog_store",
    "load_catalog",
    # Classification
    "CategoryClassifier",
    "CategoryRule",
    "classify",
    # Query engine
    "search",
    "search_state",
    "list_categories",
    "category_pills",
    "category_distribution",
    "price_statistics",
    "select_featured",
    "split_featured",
    "results_summary",
    "build_view",
    # Filter state
    "to_query",
    "from_query",
    "merge_query",
    "encode_query",
    "decode_query",
    "with_search",
    "with_category",
    "clear_filters",
]
