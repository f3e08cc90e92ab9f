"""Read-through behaviour of the setlist reconciler."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from setlistcache.domain.errors import InvalidRequestError, StorageError
from setlistcache.domain.reconciler import FetchOutcome, SetlistReconciler
from tests.helpers.setlists import (
    FakeSetlistFetcher,
    FakeSetlistRepository,
    FakeSetlistUnitOfWork,
    make_entry,
    upstream_failure,
)

if TYPE_CHECKING:
    from collections.abc import Callable


def _reconciler(
    fetcher: FakeSetlistFetcher,
    repository: FakeSetlistRepository,
    *,
    fetch_workers: int = 1,
) -> SetlistReconciler:
    def factory() -> FakeSetlistUnitOfWork:
        return FakeSetlistUnitOfWork(repository)

    return SetlistReconciler(
        fetcher=fetcher,
        unit_of_work_factory=factory,
        fetch_workers=fetch_workers,
    )


def test_store_hits_skip_upstream() -> None:
    stored = [make_entry("100", "Tweezer"), make_entry("200", "Ghost")]
    repository = FakeSetlistRepository(stored)
    fetcher = FakeSetlistFetcher()

    records = _reconciler(fetcher, repository).resolve(["100", "200"])

    assert records == stored
    assert fetcher.calls == []
    assert repository.queries == [["100", "200"]]


def test_empty_request_is_rejected_before_any_io(
    fake_fetcher: FakeSetlistFetcher,
    fake_repository: FakeSetlistRepository,
    fake_unit_of_work: Callable[[], FakeSetlistUnitOfWork],
) -> None:
    reconciler = SetlistReconciler(fetcher=fake_fetcher, unit_of_work_factory=fake_unit_of_work)

    with pytest.raises(InvalidRequestError):
        reconciler.resolve([])

    assert fake_repository.queries == []
    assert fake_fetcher.calls == []


def test_misses_are_fetched_persisted_and_appended_after_store_hits() -> None:
    stored = make_entry("100", "Tweezer")
    fetched = [make_entry("999", "Harry Hood"), make_entry("999", "Cavern", position="2")]
    repository = FakeSetlistRepository([stored])
    fetcher = FakeSetlistFetcher({"999": fetched})

    records = _reconciler(fetcher, repository).resolve(["100", "999"])

    assert records == [stored, *fetched]
    assert fetcher.calls == ["999"]
    assert repository.items == [stored, *fetched]


def test_second_resolve_is_served_from_store() -> None:
    repository = FakeSetlistRepository([make_entry("100")])
    fetcher = FakeSetlistFetcher({"999": [make_entry("999", "Harry Hood")]})
    reconciler = _reconciler(fetcher, repository)

    first = reconciler.resolve(["100", "999"])
    second = reconciler.resolve(["100", "999"])

    assert second == first
    assert fetcher.calls == ["999"]


def test_duplicate_misses_are_fetched_once() -> None:
    repository = FakeSetlistRepository()
    fetcher = FakeSetlistFetcher({"999": [make_entry("999")]})

    records = _reconciler(fetcher, repository).resolve(["999", "999", "999"])

    assert fetcher.calls == ["999"]
    assert len(records) == 1
    assert repository.queries == [["999"]]


def test_misses_are_fetched_in_request_order() -> None:
    repository = FakeSetlistRepository([make_entry("2")])
    fetcher = FakeSetlistFetcher({"3": [make_entry("3")], "1": [make_entry("1")]})

    records = _reconciler(fetcher, repository).resolve(["3", "2", "1", "3"])

    assert fetcher.calls == ["3", "1"]
    assert [record.showid for record in records] == ["2", "3", "1"]


def test_upstream_failure_does_not_block_other_shows() -> None:
    repository = FakeSetlistRepository()
    fetcher = FakeSetlistFetcher(
        {"A": upstream_failure("A"), "B": [make_entry("B", "Reba")]},
    )

    report = _reconciler(fetcher, repository).resolve_with_report(["A", "B"])

    assert [record.showid for record in report.records] == ["B"]
    assert fetcher.calls == ["A", "B"]
    assert report.unresolved == ["A"]
    assert report.diagnostics[0].outcome is FetchOutcome.UPSTREAM_ERROR
    assert "upstream failed for A" in report.diagnostics[0].detail
    assert [item.showid for item in repository.items] == ["B"]


def test_empty_upstream_answer_is_reported_as_not_found() -> None:
    repository = FakeSetlistRepository()
    fetcher = FakeSetlistFetcher({"404": []})

    report = _reconciler(fetcher, repository).resolve_with_report(["404"])

    assert report.records == []
    assert report.fetched == 0
    assert [(d.show_id, d.outcome) for d in report.diagnostics] == [
        ("404", FetchOutcome.NOT_FOUND)
    ]
    assert repository.items == []


def test_failed_fetch_is_retried_on_next_request() -> None:
    repository = FakeSetlistRepository()
    fetcher = FakeSetlistFetcher({"A": upstream_failure("A")})
    reconciler = _reconciler(fetcher, repository)

    reconciler.resolve(["A"])
    reconciler.resolve(["A"])

    assert fetcher.calls == ["A", "A"]


def test_report_counts_store_hits_and_fetched_rows() -> None:
    repository = FakeSetlistRepository([make_entry("1"), make_entry("1", "Fee")])
    fetcher = FakeSetlistFetcher({"2": [make_entry("2")]})

    report = _reconciler(fetcher, repository).resolve_with_report(["1", "2"])

    assert report.store_hits == 2
    assert report.fetched == 1
    assert report.diagnostics == []


def test_blank_upstream_show_id_is_stamped_with_requested_id() -> None:
    repository = FakeSetlistRepository()
    fetcher = FakeSetlistFetcher({"999": [make_entry("", "Slave to the Traffic Light")]})

    records = _reconciler(fetcher, repository).resolve(["999"])

    assert [record.showid for record in records] == ["999"]
    assert repository.items[0].showid == "999"
    assert repository.items[0].song == "Slave to the Traffic Light"


def test_store_read_failure_aborts_request() -> None:
    repository = FakeSetlistRepository()
    repository.fail_reads = True
    fetcher = FakeSetlistFetcher({"1": [make_entry("1")]})

    with pytest.raises(StorageError):
        _reconciler(fetcher, repository).resolve(["1"])

    assert fetcher.calls == []


def test_write_back_failure_aborts_without_partial_show() -> None:
    repository = FakeSetlistRepository()
    fetcher = FakeSetlistFetcher(
        {
            "1": [make_entry("1")],
            "2": [make_entry("2", "Bag"), make_entry("2", "Limb By Limb")],
        }
    )
    repository.fail_on_add = "Limb By Limb"

    with pytest.raises(StorageError):
        _reconciler(fetcher, repository).resolve(["1", "2"])

    assert [item.showid for item in repository.items] == ["1"]


def test_parallel_fetches_keep_isolation_and_order() -> None:
    repository = FakeSetlistRepository([make_entry("0")])
    fetcher = FakeSetlistFetcher(
        {
            "1": [make_entry("1")],
            "2": upstream_failure("2"),
            "3": [make_entry("3"), make_entry("3", "Wolfman's Brother")],
            "4": [],
        }
    )

    report = _reconciler(fetcher, repository, fetch_workers=4).resolve_with_report(
        ["0", "1", "2", "3", "4"]
    )

    assert sorted(fetcher.calls) == ["1", "2", "3", "4"]
    assert [record.showid for record in report.records] == ["0", "1", "3", "3"]
    assert sorted(report.unresolved) == ["2", "4"]
    assert len(repository.items) == 4


def test_fetch_workers_must_be_positive(
    fake_fetcher: FakeSetlistFetcher,
    fake_unit_of_work: Callable[[], FakeSetlistUnitOfWork],
) -> None:
    with pytest.raises(ValueError, match="fetch_workers"):
        SetlistReconciler(
            fetcher=fake_fetcher,
            unit_of_work_factory=fake_unit_of_work,
            fetch_workers=0,
        )


def test_mismatching_upstream_show_id_is_stored_under_requested_id() -> None:
    repository = FakeSetlistRepository()
    fetcher = FakeSetlistFetcher({"999": [make_entry("1000", "Fluffhead")]})
    reconciler = _reconciler(fetcher, repository)

    first = reconciler.resolve(["999"])
    second = reconciler.resolve(["999"])

    assert [record.showid for record in first] == ["999"]
    assert second == first
    assert fetcher.calls == ["999"]
    assert len(repository.items) == 1


@pytest.mark.parametrize("show_ids", [[""], ["", "  "]])
def test_blank_show_ids_are_rejected(show_ids: list[str]) -> None:
    repository = FakeSetlistRepository()
    fetcher = FakeSetlistFetcher()

    with pytest.raises(InvalidRequestError):
        _reconciler(fetcher, repository).resolve(show_ids)

    assert repository.queries == []
    assert fetcher.calls == []


def test_blank_show_ids_are_dropped_from_mixed_requests() -> None:
    repository = FakeSetlistRepository([make_entry("100")])
    fetcher = FakeSetlistFetcher()

    records = _reconciler(fetcher, repository).resolve(["", "100", " "])

    assert [record.showid for record in records] == ["100"]
    assert repository.queries == [["100"]]
    assert fetcher.calls == []
