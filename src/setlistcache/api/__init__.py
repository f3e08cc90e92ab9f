"""HTTP surface for the setlist cache."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from fastapi import FastAPI, status
from fastapi.responses import PlainTextResponse

from setlistcache import __version__
from setlistcache.config import SHOW_ID_PARAM
from setlistcache.domain.errors import InvalidRequestError, StorageError

from .cors import CORS_HEADERS, CorsHeadersMiddleware, add_cors_headers
from .routes import router, setlist_envelope

if TYPE_CHECKING:
    from fastapi import Request

    from setlistcache.domain.reconciler import SetlistReconciler

log = getLogger(__name__)

MISSING_SHOW_ID_MESSAGE = f"No {SHOW_ID_PARAM} query parameter provided"


async def _invalid_request_handler(request: Request, exc: Exception) -> PlainTextResponse:
    _ = request
    log.info("Rejected request: %s", exc)
    return PlainTextResponse(MISSING_SHOW_ID_MESSAGE, status_code=status.HTTP_400_BAD_REQUEST)


async def _storage_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    _ = request
    log.error("Setlist store failure: %s", exc, exc_info=exc)
    return PlainTextResponse(
        "Storage unavailable", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )


def create_app(reconciler: SetlistReconciler) -> FastAPI:
    """Build the FastAPI application around an already wired reconciler."""

    app = FastAPI(title="setlistcache", version=__version__)
    app.state.reconciler = reconciler
    app.add_middleware(CorsHeadersMiddleware)
    app.add_exception_handler(InvalidRequestError, _invalid_request_handler)
    app.add_exception_handler(StorageError, _storage_error_handler)
    app.include_router(router)
    return app


__all__ = [
    "CORS_HEADERS",
    "MISSING_SHOW_ID_MESSAGE",
    "add_cors_headers",
    "create_app",
    "setlist_envelope",
]
