"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable
from logging import getLogger
from typing import TYPE_CHECKING

from setlistcache.adapters.phishnet import PhishNetClient
from setlistcache.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemySetlistUnitOfWork,
    is_started,
    startup,
)
from setlistcache.api import create_app
from setlistcache.config import get_phishnet_config, get_service_config
from setlistcache.domain.ports.unit_of_work import SetlistUnitOfWork
from setlistcache.domain.reconciler import ResolveReport, SetlistReconciler

if TYPE_CHECKING:
    from collections.abc import Sequence

    from fastapi import FastAPI

    from setlistcache.domain.model import ShowId
    from setlistcache.domain.ports.fetching import SetlistFetcher

UnitOfWorkFactory = Callable[[], SetlistUnitOfWork]


log = getLogger(__name__)


def build_reconciler(
    *,
    fetcher: SetlistFetcher | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    fetch_workers: int | None = None,
) -> SetlistReconciler:
    """Wire the reconciler to the configured store and Phish.net client."""

    if unit_of_work_factory is None and not is_started():
        startup()
    effective_fetcher = fetcher or PhishNetClient(config=get_phishnet_config())
    effective_uow = unit_of_work_factory or SqlAlchemySetlistUnitOfWork
    workers = fetch_workers if fetch_workers is not None else get_service_config().fetch_workers
    log.debug("Building reconciler: fetch_workers=%s", workers)
    return SetlistReconciler(
        fetcher=effective_fetcher,
        unit_of_work_factory=effective_uow,
        fetch_workers=workers,
    )


def resolve_setlists(
    show_ids: Sequence[ShowId],
    *,
    fetcher: SetlistFetcher | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    fetch_workers: int | None = None,
) -> ResolveReport:
    """Resolve setlists once using the configured adapters."""

    reconciler = build_reconciler(
        fetcher=fetcher,
        unit_of_work_factory=unit_of_work_factory,
        fetch_workers=fetch_workers,
    )
    report = reconciler.resolve_with_report(show_ids)
    if report.unresolved:
        log.info("Unresolved shows: %s", ", ".join(report.unresolved))
    return report


def create_service_app(
    *,
    fetcher: SetlistFetcher | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    fetch_workers: int | None = None,
) -> FastAPI:
    """Build the HTTP application with the configured adapters."""

    return create_app(
        build_reconciler(
            fetcher=fetcher,
            unit_of_work_factory=unit_of_work_factory,
            fetch_workers=fetch_workers,
        )
    )
