# products/services/exceptions.py

"""
CATALOG SERVICE ERRORS

Centralized domain errors for the catalog reader and the admin gateway.
Views translate these into HTTP responses; services never build responses.
"""


class CatalogError(Exception):
    """Base exception for all catalog service failures."""


class CatalogUnavailableError(CatalogError):
    """Raised when the product store cannot be read."""


class AdminValidationError(CatalogError):
    """Raised when an admin form payload fails validation. Nothing was written."""

    def __init__(self, errors: dict):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{k}: {v}" for k, v in self.errors.items()))


class ProductNotFoundError(CatalogError):
    """Raised when an admin operation targets a product id that does not exist."""


class CategoryNotFoundError(CatalogError):
    """Raised when an admin operation targets a category id that does not exist."""


class CategoryInUseError(CatalogError):
    """Raised when deleting a category that products still reference."""


class AdminWriteError(CatalogError):
    """Raised when the database rejects an admin write (constraint, connection)."""
