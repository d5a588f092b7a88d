"""
Pydantic schema definitions for the catalog module.

Records travel over the wire with camelCase keys (``pageCount``,
``readPage``, ``insertedAt`` ...) while Python code uses the usual
snake_case attribute names. ``CatalogModel`` wires the alias generator
so that both spellings are accepted on input and the camelCase form is
emitted on output.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CatalogModel(BaseModel):
    """Base model using camelCase aliases for every field."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookPayload(CatalogModel):
    """Fields a client may send when adding or updating a book.

    Only ``name`` is checked by the store (it must be non-empty) along
    with the ``readPage <= pageCount`` relation. Everything else is
    stored as given. A ``finished`` key sent by a client is ignored since
    the value is always derived from the page counters.
    """

    name: Optional[str] = None
    year: Optional[int] = None
    author: Optional[str] = None
    summary: Optional[str] = None
    publisher: Optional[str] = None
    page_count: int = 0
    read_page: int = 0
    reading: bool = False


class Book(CatalogModel):
    """A full book record as held by the store."""

    id: str
    name: str
    year: Optional[int] = None
    author: Optional[str] = None
    summary: Optional[str] = None
    publisher: Optional[str] = None
    page_count: int = 0
    read_page: int = 0
    # Always page_count == read_page; recomputed on add and update.
    finished: bool = False
    reading: bool = False
    inserted_at: str
    updated_at: str


class BookSummary(CatalogModel):
    """The reduced view of a record returned when listing books."""

    id: str
    name: str
    publisher: Optional[str] = None


class BookFilters(CatalogModel):
    """Optional listing filters. ``None`` means no constraint."""

    name: Optional[str] = None
    reading: Optional[bool] = None
    finished: Optional[bool] = None
