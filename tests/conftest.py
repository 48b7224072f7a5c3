"""
Test Configuration and Fixtures
================================

Shared pytest fixtures for catalog engine tests.
"""

import json
import sys
from pathlib import Path

import pytest

# Make the package importable when running from a plain checkout
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from catalog_engine.config.settings import get_settings  # noqa: E402
from catalog_engine.schemas.domain import Product  # noqa: E402
from catalog_engine.services.catalog_store import (  # noqa: E402
    CatalogStore,
    get_catalog_store,
)


@pytest.fixture(autouse=True)
def clear_cached_singletons():
    """Reset cached settings and store so env changes take effect per test."""
    get_settings.cache_clear()
    get_catalog_store.cache_clear()
    yield
    get_settings.cache_clear()
    get_catalog_store.cache_clear()


@pytest.fixture
def sample_products() -> list[Product]:
    """A small catalog covering several categories and one unmatched name."""
    return [
        Product(
            name="2-Door Reach In Refrigerator NSF",
            image="https://example.com/a.jpg",
            url="https://example.com/a",
        ),
        Product(name="Glass Door Merchandiser NSF", image="https://example.com/b.jpg"),
        Product(name="Sandwich Prep Table 48in", image="", url=None),
        Product(
            name="Upright Freezer Stainless",
            image="https://example.com/d.jpg",
            url="https://example.com/d",
        ),
        Product(name="Glass Door Display Cooler", image="https://example.com/e.jpg"),
        Product(name="Ice Cream Dipping Cabinet", image=""),
        Product(name="Undercounter Refrigerator NSF", image="https://example.com/g.jpg"),
    ]


@pytest.fixture
def sample_store(sample_products) -> CatalogStore:
    """Store built from the sample products with a handful of price samples."""
    return CatalogStore.from_products(
        sample_products,
        price_samples=["$1,200.00", "abc", "$800"],
    )


@pytest.fixture
def dataset_document(sample_products) -> dict:
    """Dataset JSON document as produced by the scraper."""
    return {
        "category": "Commercial Refrigeration",
        "source_url": "https://example.com/refrigeration",
        "total_products": 188,
        "nsf_products": 40,
        "other_products": 148,
        "products": [p.model_dump() for p in sample_products],
        "prices_found": 3,
        "price_samples": ["$1,200.00", "abc", "$800"],
    }


@pytest.fixture
def dataset_file(tmp_path, dataset_document) -> Path:
    """Dataset document written to a temporary JSON file."""
    path = tmp_path / "products.json"
    path.write_text(json.dumps(dataset_document), encoding="utf-8")
    return path
