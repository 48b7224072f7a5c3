"""
Domain Schemas
==============

Pydantic models for catalog records, filter state and derived aggregates.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

ALL_CATEGORIES = "All"


class Product(BaseModel):
    """
    A single catalog record.

    Records are supplied by the dataset and never modified by the engine.
    `image` and `url` are passed through untouched; an empty image or a
    missing url is for the presentation layer to render around.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(..., min_length=1, description="Product name")
    image: str = Field(default="", description="Image URL, may be empty")
    url: Optional[str] = Field(
        default=None, description="Outbound product link, None when unavailable"
    )

    @property
    def has_link(self) -> bool:
        """Check if the product has a purchasable link."""
        return self.url is not None


class CatalogData(BaseModel):
    """
    Full dataset document as loaded from disk.

    The count fields are advisory display values and are not checked
    against the actual lengths of `products` or `price_samples`.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    category: str = Field(default="", description="Dataset-wide category label")
    source_url: str = Field(default="", description="Where the dataset was scraped")
    total_products: int = Field(default=0, ge=0)
    nsf_products: int = Field(default=0, ge=0)
    other_products: int = Field(default=0, ge=0)
    products: tuple[Product, ...] = Field(default_factory=tuple)
    prices_found: int = Field(default=0, ge=0)
    price_samples: tuple[str, ...] = Field(default_factory=tuple)


class FilterState(BaseModel):
    """
    The (search text, category filter) pair driving the visible product list.

    Frozen: every change produces a new state via model_copy(update=...).
    """

    model_config = ConfigDict(frozen=True)

    search_text: str = Field(default="", description="Case-insensitive search text")
    category_filter: str = Field(
        default=ALL_CATEGORIES, description="Category label or 'All'"
    )

    @property
    def has_filters(self) -> bool:
        """Check if any filter narrows the catalog."""
        return bool(self.search_text) or self.category_filter != ALL_CATEGORIES


class CategoryCount(BaseModel):
    """Number of products classified under one label."""

    model_config = ConfigDict(frozen=True)

    name: str
    count: int = Field(..., ge=0)


class PriceStatistics(BaseModel):
    """
    Summary statistics over successfully parsed price samples.

    `median` is the element at index n // 2 of the ascending sort,
    i.e. the upper-middle element when n is even. `mean` becomes
    Infinity when the samples sum past the decimal range.
    """

    model_config = ConfigDict(frozen=True)

    min: Decimal
    max: Decimal
    mean: Decimal = Field(..., allow_inf_nan=True)
    median: Decimal
    count: int = Field(..., ge=1)


class CatalogView(BaseModel):
    """Everything the presentation layer needs to render one filter state."""

    model_config = ConfigDict(frozen=True)

    state: FilterState
    products: list[Product] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    featured: list[Product] = Field(default_factory=list)
    remaining: list[Product] = Field(default_factory=list)
    summary: str = ""

    @property
    def count(self) -> int:
        """Number of products matching the filter state."""
        return len(self.products)

    @property
    def is_empty(self) -> bool:
        """Check if no product matched."""
        return not self.products
