"""
In-memory data store for the catalogue API.

``BookStore`` owns a single collection of ``Book`` records kept in
insertion order. The store is created by the application factory and
handed to the route handlers through a FastAPI dependency, so tests (or
several apps in one process) can each work against their own instance.

The store performs no I/O. A single lock guards the whole collection
because FastAPI runs synchronous endpoints on a thread pool.
"""

from __future__ import annotations

import secrets
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Set

from .errors import NotFoundError, ValidationError
from .schemas import Book, BookFilters, BookPayload, BookSummary

ID_BYTES = 12  # 16 characters once base64url encoded

NAME_REQUIRED = "Please provide the book name"
READ_PAGE_EXCEEDS = "readPage must not be greater than pageCount"


def generate_id() -> str:
    """Return a random, URL-safe, 16 character identifier."""
    return secrets.token_urlsafe(ID_BYTES)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _timestamp(moment: datetime) -> str:
    """Format ``moment`` as ISO 8601 in UTC with a ``Z`` suffix."""
    text = moment.astimezone(timezone.utc).isoformat(timespec="microseconds")
    return text.replace("+00:00", "Z")


def _norm(s: Optional[str]) -> str:
    """Normalize a string for case-insensitive comparison."""
    return (s or "").lower()


def _validate(payload: BookPayload) -> None:
    """Check a payload, first failing rule wins.

    Raises
    ------
    ValidationError
        When the name is missing or empty, or when ``read_page`` is
        greater than ``page_count``.
    """
    if not payload.name:
        raise ValidationError(NAME_REQUIRED)
    if payload.read_page > payload.page_count:
        raise ValidationError(READ_PAGE_EXCEEDS)


class BookStore:
    """The book catalog: add, list, get, update and delete records.

    Parameters
    ----------
    clock : Callable[[], datetime], optional
        Source of the current time used for ``insertedAt`` and
        ``updatedAt``. Defaults to the system clock in UTC.
    id_factory : Callable[[], str], optional
        Generator for new record ids. Defaults to ``generate_id``.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = generate_id,
    ) -> None:
        self._clock = clock
        self._id_factory = id_factory
        # dict keeps insertion order, which is the listing order
        self._books: Dict[str, Book] = {}
        self._issued: Set[str] = set()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def _new_id(self) -> str:
        book_id = self._id_factory()
        while book_id in self._issued:
            book_id = self._id_factory()
        self._issued.add(book_id)
        return book_id

    def add(self, payload: BookPayload) -> str:
        """Validate ``payload`` and append a new record.

        Returns
        -------
        str
            The id of the new record.
        """
        _validate(payload)
        with self._lock:
            book_id = self._new_id()
            now = _timestamp(self._clock())
            self._books[book_id] = Book(
                id=book_id,
                name=payload.name,
                year=payload.year,
                author=payload.author,
                summary=payload.summary,
                publisher=payload.publisher,
                page_count=payload.page_count,
                read_page=payload.read_page,
                finished=payload.page_count == payload.read_page,
                reading=payload.reading,
                inserted_at=now,
                updated_at=now,
            )
        return book_id

    def list(self, filters: Optional[BookFilters] = None) -> List[BookSummary]:
        """Return ``{id, name, publisher}`` projections in insertion order.

        Each filter left as ``None`` places no constraint; the others are
        combined with AND. The name filter is a case-insensitive
        substring match anywhere in the book name.
        """
        if filters is None:
            filters = BookFilters()
        nname = _norm(filters.name)
        with self._lock:
            items = list(self._books.values())

        if nname:
            items = [b for b in items if nname in _norm(b.name)]
        if filters.reading is not None:
            items = [b for b in items if b.reading == filters.reading]
        if filters.finished is not None:
            items = [b for b in items if b.finished == filters.finished]

        return [BookSummary(id=b.id, name=b.name, publisher=b.publisher) for b in items]

    def get(self, book_id: str) -> Book:
        """Return a copy of the record with ``book_id``.

        Raises
        ------
        NotFoundError
            If no such record exists.
        """
        with self._lock:
            book = self._books.get(book_id)
            if book is None:
                raise NotFoundError(book_id)
            return book.model_copy()

    def update(self, book_id: str, payload: BookPayload) -> Book:
        """Replace every mutable field of an existing record.

        Validation runs before the lookup, so an invalid payload sent to
        an unknown id reports the validation failure. ``id`` and
        ``insertedAt`` are kept; ``finished`` and ``updatedAt`` are
        recomputed.

        Raises
        ------
        ValidationError
            If the payload fails validation.
        NotFoundError
            If no such record exists.
        """
        _validate(payload)
        with self._lock:
            existing = self._books.get(book_id)
            if existing is None:
                raise NotFoundError(book_id)
            updated = Book(
                id=existing.id,
                name=payload.name,
                year=payload.year,
                author=payload.author,
                summary=payload.summary,
                publisher=payload.publisher,
                page_count=payload.page_count,
                read_page=payload.read_page,
                finished=payload.page_count == payload.read_page,
                reading=payload.reading,
                inserted_at=existing.inserted_at,
                updated_at=_timestamp(self._clock()),
            )
            self._books[book_id] = updated
            return updated.model_copy()

    def delete(self, book_id: str) -> None:
        """Remove the record with ``book_id`` permanently.

        Raises
        ------
        NotFoundError
            If no such record exists.
        """
        with self._lock:
            if book_id not in self._books:
                raise NotFoundError(book_id)
            del self._books[book_id]

    def clear(self) -> None:
        """Drop every record. Issued ids stay reserved."""
        with self._lock:
            self._books.clear()
