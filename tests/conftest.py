"""Shared fixtures for the bookshelf tests."""

from datetime import datetime, timedelta, timezone
from itertools import count
from typing import Callable

import pytest
from fastapi.testclient import TestClient

from bookshelf.catalog.schemas import BookPayload
from bookshelf.catalog.store import BookStore
from bookshelf.main import create_app


@pytest.fixture
def clock() -> Callable[[], datetime]:
    """A clock that moves forward one second per call."""
    start = datetime(2024, 1, 1, tzinfo=timezone.utc)
    ticks = count()
    return lambda: start + timedelta(seconds=next(ticks))


@pytest.fixture
def store(clock: Callable[[], datetime]) -> BookStore:
    return BookStore(clock=clock)


@pytest.fixture
def client(store: BookStore) -> TestClient:
    return TestClient(create_app(store=store))


def make_payload(**overrides) -> BookPayload:
    data = {
        "name": "Dune",
        "year": 1965,
        "author": "Frank Herbert",
        "summary": "Spice and sandworms",
        "publisher": "Chilton Books",
        "pageCount": 500,
        "readPage": 100,
        "reading": True,
    }
    data.update(overrides)
    return BookPayload(**data)
