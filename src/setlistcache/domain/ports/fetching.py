"""Ports for fetching setlists from an upstream provider."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from setlistcache.domain.model import SetlistEntry, ShowId


@runtime_checkable
class SetlistFetcher(Protocol):
    """Port for retrieving every setlist entry of a single show.

    Implementations return an empty list when the provider answers successfully
    without entries and raise ``UpstreamError`` for anything else that goes wrong.
    """

    def fetch_setlist(self, show_id: ShowId) -> list[SetlistEntry]: ...


__all__ = ["SetlistFetcher"]
