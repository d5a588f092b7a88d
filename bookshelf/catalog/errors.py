"""Errors raised by the catalog store."""


class CatalogError(Exception):
    """Base class for expected, recoverable catalog failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(CatalogError):
    """The payload is missing a name or has readPage > pageCount."""


class NotFoundError(CatalogError):
    """No record with the requested id exists."""

    def __init__(self, book_id: str) -> None:
        super().__init__(f"No book with id {book_id!r}")
        self.book_id = book_id
