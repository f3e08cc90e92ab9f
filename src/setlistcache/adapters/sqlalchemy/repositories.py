"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from typing import TYPE_CHECKING, cast

from sqlalchemy import insert, select
from sqlalchemy.exc import SQLAlchemyError

from setlistcache.adapters.sqlalchemy.mappings import show_table
from setlistcache.domain.errors import StorageError
from setlistcache.domain.model import SETLIST_FIELDS, SetlistEntry

if TYPE_CHECKING:
    from collections.abc import Collection

    from sqlalchemy.orm import Session

    from setlistcache.domain.model import ShowId


class SqlAlchemySetlistRepository:
    def __init__(self, session: Session) -> None:
        self.session = session
        self._columns = [show_table.c[name] for name in SETLIST_FIELDS]

    def find_by_show_ids(self, show_ids: Collection[ShowId]) -> list[SetlistEntry]:
        if not show_ids:
            return []
        stmt = (
            select(*self._columns)
            .where(show_table.c.showid.in_(list(show_ids)))
            .order_by(show_table.c.id)
        )
        try:
            rows = self.session.execute(stmt).mappings().all()
        except SQLAlchemyError as exc:
            raise StorageError("Failed to read setlists from the store") from exc
        return [SetlistEntry.from_mapping(row) for row in rows]

    def add(self, entity: SetlistEntry) -> None:
        # every column is bound from the field of the same name
        stmt = insert(show_table).values(entity.to_dict())
        try:
            self.session.execute(stmt)
        except SQLAlchemyError as exc:
            raise StorageError(f"Failed to store setlist entry for show {entity.showid}") from exc


if TYPE_CHECKING:
    from setlistcache.domain.ports.persistence import SetlistRepository

    _session_stub = cast("Session", object())
    _repo_check: SetlistRepository = SqlAlchemySetlistRepository(_session_stub)
