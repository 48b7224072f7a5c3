"""
Catalog Query Engine
====================

Filtering and aggregate computation over an in-memory product list.

All functions are pure: they take the products (or price samples) to
work on, recompute everything on each call, and never raise for empty
input, unknown categories or malformed prices.

Components:
    - search: stable substring + category filter
    - list_categories / category_pills: labels present in the data
    - category_distribution: label counts, descending
    - price_statistics: min/max/mean/median/count over price samples
    - select_featured / split_featured: featured picks from a filtered result
    - build_view: one-call bundle for the presentation layer
"""

from decimal import Decimal, InvalidOperation, Overflow, localcontext
from typing import Iterable, Optional, Sequence

from catalog_engine.config.settings import Settings, get_settings
from catalog_engine.schemas.domain import (
    ALL_CATEGORIES,
    CatalogView,
    CategoryCount,
    FilterState,
    PriceStatistics,
    Product,
)
from catalog_engine.services.catalog_store import CatalogStore
from catalog_engine.services.category_classifier import classify
from catalog_engine.utils.logger import get_logger
from catalog_engine.utils.price_parser import parse_prices

logger = get_logger(__name__)


# =============================================================================
# Filtering
# =============================================================================


def search(
    products: Iterable[Product],
    search_text: str = "",
    category_filter: Optional[str] = ALL_CATEGORIES,
) -> list[Product]:
    """
    Filter products by search text and category.

    A product is kept when its lower-cased name contains the lower-cased
    search text (empty text matches everything) and its derived category
    equals the filter ("All", "" or None match everything). Input order
    is preserved.

    Args:
        products: Products to filter
        search_text: Case-insensitive substring to look for
        category_filter: Category label, or "All"

    Returns:
        Matching products in their original order
    """
    needle = search_text.lower()
    match_all_categories = not category_filter or category_filter == ALL_CATEGORIES

    results = [
        product
        for product in products
        if needle in product.name.lower()
        and (match_all_categories or classify(product.name) == category_filter)
    ]

    logger.debug(
        "catalog_searched",
        search_text=search_text,
        category=category_filter,
        results=len(results),
    )
    return results


def search_state(products: Iterable[Product], state: FilterState) -> list[Product]:
    """Run `search` with a FilterState."""
    return search(products, state.search_text, state.category_filter)


# =============================================================================
# Category Aggregates
# =============================================================================


def list_categories(products: Iterable[Product]) -> list[str]:
    """
    Distinct category labels present in the products, sorted.

    Only labels some product actually maps to are returned, so "Other"
    appears only if a product matches none of the keyword rules.
    """
    return sorted({classify(product.name) for product in products})


def category_pills(products: Iterable[Product]) -> list[str]:
    """Category selector entries: "All" followed by the present labels."""
    return [ALL_CATEGORIES, *list_categories(products)]


def category_distribution(products: Iterable[Product]) -> list[CategoryCount]:
    """
    Count products per category, largest first.

    Ties keep the order in which each label was first encountered.
    """
    counts: dict[str, int] = {}
    for product in products:
        label = classify(product.name)
        counts[label] = counts.get(label, 0) + 1

    # sorted() is stable and dicts keep insertion order
    ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [CategoryCount(name=name, count=count) for name, count in ordered]


# =============================================================================
# Price Statistics
# =============================================================================


def price_statistics(price_samples: Iterable[str]) -> Optional[PriceStatistics]:
    """
    Summarise the parseable price samples.

    Samples that do not parse are left out entirely. Median is the value
    at index n // 2 after sorting ascending, which for even n is the
    upper of the two middle values.

    Args:
        price_samples: Raw price strings such as "$1,200.00"

    Returns:
        PriceStatistics, or None when no sample parses
    """
    samples = list(price_samples)
    prices = parse_prices(samples)

    skipped = len(samples) - len(prices)
    if skipped:
        logger.debug("price_samples_skipped", skipped=skipped, total=len(samples))

    if not prices:
        return None

    ordered = sorted(prices)
    count = len(ordered)

    # Huge exponents overflow to Infinity instead of raising
    with localcontext() as ctx:
        ctx.traps[Overflow] = False
        ctx.traps[InvalidOperation] = False
        mean = sum(ordered, Decimal(0)) / count

    return PriceStatistics(
        min=ordered[0],
        max=ordered[-1],
        mean=mean,
        median=ordered[count // 2],
        count=count,
    )


# =============================================================================
# Featured Selection
# =============================================================================


def select_featured(
    products: Sequence[Product],
    keyword: str = "nsf",
    limit: int = 2,
) -> list[Product]:
    """
    Pick the first `limit` products whose name contains `keyword`.

    Operates on an already-filtered result; it is a selection, not a
    separate filter path.
    """
    if limit <= 0:
        return []
    needle = keyword.lower()
    return [p for p in products if needle in p.name.lower()][:limit]


def split_featured(
    products: Sequence[Product],
    keyword: str = "nsf",
    limit: int = 2,
) -> tuple[list[Product], list[Product]]:
    """Split products into (featured, remaining), both in original order."""
    featured = select_featured(products, keyword, limit)
    featured_ids = {id(p) for p in featured}
    remaining = [p for p in products if id(p) not in featured_ids]
    return featured, remaining


# =============================================================================
# View Assembly
# =============================================================================


def results_summary(count: int, state: FilterState) -> str:
    """
    Human-readable results line.

    Example:
        Showing 12 products in Upright matching "cooler"
    """
    summary = f"Showing {count} products"
    if state.category_filter != ALL_CATEGORIES:
        summary += f" in {state.category_filter}"
    if state.search_text:
        summary += f' matching "{state.search_text}"'
    return summary


def build_view(
    store: CatalogStore,
    state: FilterState,
    settings: Optional[Settings] = None,
) -> CatalogView:
    """
    Compute everything needed to render one filter state.

    Featured products are only separated out when no filter is active;
    otherwise `featured` is empty and `remaining` equals `products`.
    """
    settings = settings or get_settings()

    products = search_state(store.products, state)

    if state.has_filters:
        featured: list[Product] = []
        remaining = products
    else:
        featured, remaining = split_featured(
            products, settings.featured_keyword, settings.featured_limit
        )

    return CatalogView(
        state=state,
        products=products,
        categories=list_categories(store.products),
        featured=featured,
        remaining=remaining,
        summary=results_summary(len(products), state),
    )
