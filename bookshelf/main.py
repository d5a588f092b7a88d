# bookshelf/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from .catalog import BookStore, catalog_router
from .catalog import responses
from .config import Settings, load_settings

logger = logging.getLogger(__name__)


def _describe(err: dict) -> str:
    field = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
    return f"{field or 'body'}: {err.get('msg')}"


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.logging.level, format=settings.logging.format)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[BookStore] = None,
) -> FastAPI:
    """Build the FastAPI application around a ``BookStore``.

    A fresh store is created when none is given.
    """
    settings = settings or Settings()
    book_store = store if store is not None else BookStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("%s %s started", settings.app.name, settings.app.version)
        yield
        logger.info("Shutting down with %d book(s) in memory", len(book_store))
        book_store.clear()

    app = FastAPI(
        title=settings.app.name,
        description=settings.app.description,
        version=settings.app.version,
        lifespan=lifespan,
    )
    app.state.book_store = book_store
    app.state.settings = settings

    @app.exception_handler(RequestValidationError)
    async def invalid_request(request: Request, exc: RequestValidationError):
        detail = "; ".join(_describe(err) for err in exc.errors())
        logger.warning("Malformed request to %s: %s", request.url.path, detail)
        return responses.fail(f"Invalid request. {detail}", 400)

    # Basic route for a quick liveness check
    @app.get("/")
    def health_check():
        return {"status": "ok", "message": "Bookshelf API live", "books": len(book_store)}

    app.include_router(catalog_router)
    return app


def run() -> None:
    settings = load_settings()
    configure_logging(settings)
    uvicorn.run(
        "bookshelf.main:app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.server.reload,
    )


app = create_app(load_settings())


if __name__ == "__main__":
    run()
