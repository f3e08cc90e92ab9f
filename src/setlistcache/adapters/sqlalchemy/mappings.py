"""SQLAlchemy table metadata for the setlist store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Column, Index, Integer, MetaData, String, Table

from setlistcache.domain.model import SETLIST_FIELDS

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

metadata = MetaData(
    naming_convention={
        "ix": "ix_%(column_0_label)s",
        "uq": "uq_%(table_name)s_%(column_0_label)s",
        "ck": "ck_%(table_name)s_%(constraint_name)s",
        "fk": "fk_%(table_name)s_%(column_0_label)s_%(referred_table_name)s",
        "pk": "pk_%(table_name)s",
    }
)

# One row per setlist entry. ``showid`` is not unique: a show spans
# many rows. ``id`` is a surrogate key and never leaves the adapter.
show_table = Table(
    "shows",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    *(Column(name, String, nullable=False, default="") for name in SETLIST_FIELDS),
)

Index("ix_shows_showid", show_table.c.showid)


def create_all_tables(engine: Engine) -> None:
    metadata.create_all(engine)
