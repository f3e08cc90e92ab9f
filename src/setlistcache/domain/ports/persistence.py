"""Ports for persisting setlist entries."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

from setlistcache.domain.model import SetlistEntry

if TYPE_CHECKING:
    from collections.abc import Collection

    from setlistcache.domain.model import ShowId


@runtime_checkable
class Repository[TEntity](Protocol):
    """Minimal repository contract for an append-only store."""

    def add(self, entity: TEntity) -> None: ...


@runtime_checkable
class SetlistRepository(Repository[SetlistEntry], Protocol):
    """Persistence contract for setlist entries.

    Both operations raise ``StorageError`` on any fault.
    """

    def find_by_show_ids(self, show_ids: Collection[ShowId]) -> list[SetlistEntry]: ...
