"""SQLAlchemy adapter package for the setlist store."""

from __future__ import annotations

from .mappings import create_all_tables, metadata, show_table
from .repositories import SqlAlchemySetlistRepository
from .unit_of_work import (
    SqlAlchemySetlistUnitOfWork,
    StartupError,
    create_database_engine,
    is_started,
    shutdown,
    startup,
)

__all__ = [
    "SqlAlchemySetlistRepository",
    "SqlAlchemySetlistUnitOfWork",
    "StartupError",
    "create_all_tables",
    "create_database_engine",
    "is_started",
    "metadata",
    "show_table",
    "shutdown",
    "startup",
]
