"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import SetlistFetcher
from .persistence import Repository, SetlistRepository
from .unit_of_work import (
    RepositoryCollection,
    SetlistRepositories,
    SetlistUnitOfWork,
    UnitOfWork,
)

__all__ = [
    "Repository",
    "RepositoryCollection",
    "SetlistFetcher",
    "SetlistRepositories",
    "SetlistRepository",
    "SetlistUnitOfWork",
    "UnitOfWork",
]
