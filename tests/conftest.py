from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest
from sqlalchemy.engine import Engine  # noqa: TC002
from sqlalchemy.orm import Session, sessionmaker

from setlistcache.adapters.sqlalchemy import create_all_tables, create_database_engine
from setlistcache.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemySetlistUnitOfWork,
    shutdown,
    startup,
)
from tests.helpers.setlists import (
    FakeSetlistFetcher,
    FakeSetlistRepository,
    FakeSetlistUnitOfWork,
)

os.environ.setdefault("DATABASE_URI", "sqlite+pysqlite:///:memory:")

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator


@pytest.fixture
def sqlite_engine() -> Iterator[Engine]:
    engine = create_database_engine("sqlite+pysqlite:///:memory:")
    create_all_tables(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def sqlite_session(sqlite_engine: Engine) -> Iterator[Session]:
    session_factory = sessionmaker(bind=sqlite_engine, future=True)
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sqlite_unit_of_work(
    sqlite_engine: Engine,
) -> Iterator[Callable[[], SqlAlchemySetlistUnitOfWork]]:
    startup(engine=sqlite_engine, force=True)

    def factory() -> SqlAlchemySetlistUnitOfWork:
        return SqlAlchemySetlistUnitOfWork()

    try:
        yield factory
    finally:
        shutdown()


@pytest.fixture
def fake_repository() -> FakeSetlistRepository:
    return FakeSetlistRepository()


@pytest.fixture
def fake_unit_of_work(
    fake_repository: FakeSetlistRepository,
) -> Callable[[], FakeSetlistUnitOfWork]:
    def factory() -> FakeSetlistUnitOfWork:
        return FakeSetlistUnitOfWork(fake_repository)

    return factory


@pytest.fixture
def fake_fetcher() -> FakeSetlistFetcher:
    return FakeSetlistFetcher()
