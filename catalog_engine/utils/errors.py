"""
Custom Exception Classes
========================

Application-specific exceptions for proper error handling.

Query functions never raise; these cover the dataset loading
boundary only.
"""

from typing import Any


class CatalogEngineError(Exception):
    """Base exception for the catalog engine."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DatasetNotFoundError(CatalogEngineError):
    """Raised when the catalog dataset file does not exist."""

    pass


class DatasetFormatError(CatalogEngineError):
    """Raised when the catalog dataset cannot be read, parsed or validated."""

    pass
