"""
Catalog Store
=============

Read-only holder for the product dataset.

The dataset is loaded once and handed to callers as a CatalogStore;
query functions take the products they operate on as arguments and
never reach for a global. `get_catalog_store()` gives the presentation
layer one process-wide instance, while tests build stores from fixtures.
"""

from functools import lru_cache
from pathlib import Path
from typing import Iterator, Sequence

from pydantic import ValidationError

from catalog_engine.config.settings import get_settings
from catalog_engine.schemas.domain import CatalogData, Product
from catalog_engine.utils.errors import DatasetFormatError, DatasetNotFoundError
from catalog_engine.utils.logger import get_logger

logger = get_logger(__name__)


def load_catalog(path: str | Path) -> CatalogData:
    """
    Load and validate the catalog dataset from a JSON file.

    Args:
        path: Path to the dataset JSON document

    Returns:
        CatalogData: Validated dataset

    Raises:
        DatasetNotFoundError: If the file does not exist
        DatasetFormatError: If the file cannot be read, is not valid JSON,
            or fails validation
    """
    dataset_path = Path(path)

    if not dataset_path.is_file():
        logger.error("catalog_file_not_found", path=str(dataset_path))
        raise DatasetNotFoundError(
            f"Catalog dataset not found: {dataset_path}",
            details={"path": str(dataset_path)},
        )

    try:
        raw = dataset_path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        logger.error(
            "catalog_read_failed",
            path=str(dataset_path),
            error=str(e),
        )
        raise DatasetFormatError(
            f"Catalog dataset could not be read: {dataset_path}",
            details={"path": str(dataset_path), "reason": str(e)},
        ) from e

    try:
        data = CatalogData.model_validate_json(raw)
    except ValidationError as e:
        logger.error(
            "catalog_validation_failed",
            path=str(dataset_path),
            error_count=e.error_count(),
        )
        raise DatasetFormatError(
            f"Catalog dataset is invalid: {dataset_path}",
            details={"path": str(dataset_path), "errors": e.errors()},
        ) from e

    logger.info(
        "catalog_loaded",
        path=str(dataset_path),
        products=len(data.products),
        price_samples=len(data.price_samples),
    )
    return data


class CatalogStore:
    """
    Immutable, ordered product collection plus the dataset metadata.

    Example:
        store = CatalogStore.from_file("data/products.json")
        results = search(store.products, "cooler", "All")
    """

    def __init__(self, data: CatalogData):
        self._data = data

    @classmethod
    def from_file(cls, path: str | Path) -> "CatalogStore":
        """Build a store from a dataset file."""
        return cls(load_catalog(path))

    @classmethod
    def from_products(
        cls,
        products: Sequence[Product],
        price_samples: Sequence[str] = (),
    ) -> "CatalogStore":
        """Build a store directly from records, e.g. for tests."""
        return cls(
            CatalogData(
                products=tuple(products),
                price_samples=tuple(price_samples),
                total_products=len(products),
                prices_found=len(price_samples),
            )
        )

    @property
    def products(self) -> tuple[Product, ...]:
        return self._data.products

    @property
    def price_samples(self) -> tuple[str, ...]:
        return self._data.price_samples

    @property
    def metadata(self) -> CatalogData:
        """Full dataset document, including the advisory counts."""
        return self._data

    def __len__(self) -> int:
        return len(self._data.products)

    def __iter__(self) -> Iterator[Product]:
        return iter(self._data.products)


@lru_cache
def get_catalog_store() -> CatalogStore:
    """
    Get the process-wide catalog store.

    Loaded from settings.catalog_path on first use and reused afterwards.
    """
    settings = get_settings()
    return CatalogStore.from_file(settings.catalog_path)
