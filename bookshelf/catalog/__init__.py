"""
Catalog package for the bookshelf API.

This package holds the in-memory ``BookStore`` together with the
schemas, error types and routes that expose it over HTTP. The store is
the only stateful piece; the router receives it through a FastAPI
dependency rather than importing a global collection.
"""

from .errors import CatalogError, NotFoundError, ValidationError  # noqa: F401
from .router import router as catalog_router  # noqa: F401
from .store import BookStore  # noqa: F401
