# catalog/errors.py
"""Errors raised by the catalog query service."""


class CatalogError(Exception):
    """Base class for catalog errors."""


class ProductNotFound(CatalogError):
    def __init__(self, product_id: int):
        self.product_id = product_id
        super().__init__(f"Product with ID {product_id} not found")


class CatalogUnavailable(CatalogError):
    """The store could not be reached or the query failed."""
