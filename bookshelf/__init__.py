"""Bookshelf: an in-memory book catalog served with FastAPI."""

__version__ = "1.0.0"
