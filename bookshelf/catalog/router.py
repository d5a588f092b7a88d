"""
Route definitions for the catalogue API.

Endpoints under /books:
- POST   /books            : add a book
- GET    /books            : list books (filters: name, reading, finished)
- GET    /books/{book_id}  : get one book
- PUT    /books/{book_id}  : replace a book's fields
- DELETE /books/{book_id}  : delete a book

Store errors are turned into ``fail`` envelopes here; see
``responses.py`` for the envelope shape.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from . import responses
from .errors import NotFoundError, ValidationError
from .schemas import BookFilters, BookPayload
from .store import BookStore

logger = logging.getLogger(__name__)

TRUE_VALUES = {"1", "true", "yes"}
FALSE_VALUES = {"0", "false", "no"}

router = APIRouter(prefix="/books", tags=["books"])


def get_store(request: Request) -> BookStore:
    """Get the store attached to the running application."""
    return request.app.state.book_store


def _parse_flag(name: str, raw: Optional[str]) -> Optional[bool]:
    """Interpret a boolean query parameter.

    Unrecognised values are treated as if the filter had not been sent.
    """
    if raw is None:
        return None
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    logger.debug("Ignoring unrecognised %s filter value %r", name, raw)
    return None


@router.post("")
def add_book(payload: BookPayload, store: BookStore = Depends(get_store)) -> JSONResponse:
    try:
        book_id = store.add(payload)
    except ValidationError as e:
        logger.warning("Rejected new book: %s", e.message)
        return responses.fail(f"Failed to add book. {e.message}", 400)
    logger.info("Added book %s", book_id)
    return responses.success("Book added successfully", {"bookId": book_id}, 201)


@router.get("")
def list_books(
    name: Optional[str] = Query(default=None, description="Substring of the book name"),
    reading: Optional[str] = Query(default=None, description="1/true or 0/false"),
    finished: Optional[str] = Query(default=None, description="1/true or 0/false"),
    store: BookStore = Depends(get_store),
) -> JSONResponse:
    filters = BookFilters(
        name=name,
        reading=_parse_flag("reading", reading),
        finished=_parse_flag("finished", finished),
    )
    books = store.list(filters)
    return responses.success("Books retrieved successfully", {"books": books})


@router.get("/{book_id}")
def get_book(book_id: str, store: BookStore = Depends(get_store)) -> JSONResponse:
    try:
        book = store.get(book_id)
    except NotFoundError:
        return responses.fail("Book not found", 404)
    return responses.success("Book found", {"book": book})


@router.put("/{book_id}")
def update_book(
    book_id: str,
    payload: BookPayload,
    store: BookStore = Depends(get_store),
) -> JSONResponse:
    try:
        book = store.update(book_id, payload)
    except ValidationError as e:
        logger.warning("Rejected update of book %s: %s", book_id, e.message)
        return responses.fail(f"Failed to update book. {e.message}", 400)
    except NotFoundError:
        return responses.fail("Failed to update book. Id not found", 404)
    logger.info("Updated book %s", book_id)
    return responses.success("Book updated successfully", book)


@router.delete("/{book_id}")
def delete_book(book_id: str, store: BookStore = Depends(get_store)) -> JSONResponse:
    try:
        store.delete(book_id)
    except NotFoundError:
        return responses.fail("Failed to delete book. Id not found", 404)
    logger.info("Deleted book %s", book_id)
    return responses.success("Book deleted successfully", None)
