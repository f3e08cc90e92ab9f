"""Read-through reconciliation between the setlist store and the upstream provider.

The store is always asked first, in one bulk query. Every requested show that the
store knows nothing about is fetched from upstream on its own, written back, and
appended after the store hits. A failed or empty upstream fetch only drops that one
show from the result; storage faults abort the whole request.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field, replace
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from setlistcache.domain.errors import InvalidRequestError, UpstreamError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sequence

    from setlistcache.domain.model import SetlistEntry, ShowId
    from setlistcache.domain.ports.fetching import SetlistFetcher
    from setlistcache.domain.ports.unit_of_work import SetlistUnitOfWork

log = getLogger(__name__)


class FetchOutcome(StrEnum):
    NOT_FOUND = "not_found"
    UPSTREAM_ERROR = "upstream_error"


@dataclass(frozen=True, slots=True)
class FetchDiagnostic:
    """Why a show missing from the store contributed nothing to the result."""

    show_id: ShowId
    outcome: FetchOutcome
    detail: str = ""


@dataclass(slots=True)
class ResolveReport:
    """Outcome of a single resolve call."""

    records: list[SetlistEntry]
    store_hits: int
    fetched: int
    diagnostics: list[FetchDiagnostic] = field(default_factory=list["FetchDiagnostic"])

    @property
    def unresolved(self) -> list[ShowId]:
        return [diagnostic.show_id for diagnostic in self.diagnostics]


@dataclass(slots=True)
class _FetchAttempt:
    show_id: ShowId
    entries: list[SetlistEntry]
    error: UpstreamError | None = None


class SetlistReconciler:
    """Serve setlists from the store, falling back to upstream for misses."""

    def __init__(
        self,
        *,
        fetcher: SetlistFetcher,
        unit_of_work_factory: Callable[[], SetlistUnitOfWork],
        fetch_workers: int = 1,
    ) -> None:
        if fetch_workers < 1:
            raise ValueError("fetch_workers must be at least 1")
        self.fetcher = fetcher
        self.unit_of_work_factory = unit_of_work_factory
        self.fetch_workers = fetch_workers

    def resolve(self, show_ids: Sequence[ShowId]) -> list[SetlistEntry]:
        """Return every known setlist entry for ``show_ids``."""

        return self.resolve_with_report(show_ids).records

    def resolve_with_report(self, show_ids: Sequence[ShowId]) -> ResolveReport:
        """Resolve ``show_ids`` and report which shows could not be resolved.

        Raises ``InvalidRequestError`` for an empty request and ``StorageError`` when
        the store fails during the lookup or the write-back.
        """

        requested = _unique_in_order(show_ids)
        if not requested:
            raise InvalidRequestError("No show identifiers supplied")

        fetched: list[SetlistEntry] = []
        diagnostics: list[FetchDiagnostic] = []

        # the read transaction ends before any upstream call is made
        with self.unit_of_work_factory() as uow:
            store_hits = uow.repositories.setlists.find_by_show_ids(requested)
        found = {entry.showid for entry in store_hits}
        misses = [show_id for show_id in requested if show_id not in found]

        for attempt in self._fetch(misses):
            diagnostic = _diagnose(attempt)
            if diagnostic is not None:
                diagnostics.append(diagnostic)
                continue
            entries = [_stamp_show_id(entry, attempt.show_id) for entry in attempt.entries]
            self._write_back(entries)
            fetched.extend(entries)

        log.info(
            "Resolved %s show(s): store_hits=%s, fetched=%s, misses=%s, unresolved=%s",
            len(requested),
            len(store_hits),
            len(fetched),
            len(misses),
            len(diagnostics),
        )
        return ResolveReport(
            records=[*store_hits, *fetched],
            store_hits=len(store_hits),
            fetched=len(fetched),
            diagnostics=diagnostics,
        )

    def _fetch(self, misses: list[ShowId]) -> Iterable[_FetchAttempt]:
        if self.fetch_workers == 1 or len(misses) <= 1:
            return map(self._attempt, misses)
        with ThreadPoolExecutor(
            max_workers=min(self.fetch_workers, len(misses)),
            thread_name_prefix="setlist-fetch",
        ) as executor:
            return list(executor.map(self._attempt, misses))

    def _attempt(self, show_id: ShowId) -> _FetchAttempt:
        try:
            entries = self.fetcher.fetch_setlist(show_id)
        except UpstreamError as exc:
            return _FetchAttempt(show_id=show_id, entries=[], error=exc)
        return _FetchAttempt(show_id=show_id, entries=list(entries))

    def _write_back(self, entries: list[SetlistEntry]) -> None:
        # one unit per show: a setlist is persisted whole or not at all
        with self.unit_of_work_factory() as uow:
            repository = uow.repositories.setlists
            for entry in entries:
                repository.add(entry)
            uow.commit()


def _unique_in_order(show_ids: Iterable[ShowId]) -> list[ShowId]:
    return list(dict.fromkeys(show_id for show_id in show_ids if show_id.strip()))


def _diagnose(attempt: _FetchAttempt) -> FetchDiagnostic | None:
    if attempt.error is not None:
        log.warning("Upstream fetch failed for show %s: %s", attempt.show_id, attempt.error)
        return FetchDiagnostic(
            show_id=attempt.show_id,
            outcome=FetchOutcome.UPSTREAM_ERROR,
            detail=str(attempt.error),
        )
    if not attempt.entries:
        log.info("Upstream returned no setlist for show %s", attempt.show_id)
        return FetchDiagnostic(show_id=attempt.show_id, outcome=FetchOutcome.NOT_FOUND)
    return None


def _stamp_show_id(entry: SetlistEntry, show_id: ShowId) -> SetlistEntry:
    # rows are always stored under the id they were requested by
    if entry.showid == show_id:
        return entry
    if entry.showid:
        log.warning("Upstream entry for show %s carries showid %s", show_id, entry.showid)
    return replace(entry, showid=show_id)
