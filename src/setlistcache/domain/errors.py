"""Errors raised across the cache's ports."""

from __future__ import annotations


class SetlistCacheError(RuntimeError):
    """Base class for setlist cache failures."""


class InvalidRequestError(SetlistCacheError):
    """Raised when a request carries no show identifiers."""


class StorageError(SetlistCacheError):
    """Raised when the record store cannot be read from or written to."""


class UpstreamError(SetlistCacheError):
    """Raised when the upstream provider cannot deliver setlists for one show."""

    def __init__(self, message: str, *, show_id: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.show_id = show_id
        self.status_code = status_code
