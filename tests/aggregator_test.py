from __future__ import annotations

import threading

import pytest

from backup_inventory.core.aggregator import aggregate_entries
from backup_inventory.core.errors import ScanCancelledError
from backup_inventory.core.models import BackupFileEntry
from backup_inventory.core.models import BackupInventorySummary
from backup_inventory.core.models import LatestBackup


def entry(name: str, size: int, modified_ms: int | None) -> BackupFileEntry:
    return BackupFileEntry(path=f"/backups/{name}", size=size, modified_ms=modified_ms)


def test_no_entries_gives_empty_summary() -> None:
    assert aggregate_entries([]) == BackupInventorySummary.empty()


def test_single_entry() -> None:
    summary = aggregate_entries([entry("a.db", 100, 5000)])

    assert summary == BackupInventorySummary(
        backup_count=1, total_size=100, latest=LatestBackup(time_ms=5000, size=100)
    )


def test_latest_is_greatest_timestamp_regardless_of_order() -> None:
    entries = [
        entry("b.db", 250, 2000),
        entry("c.db", 50, 3000),
        entry("a.db", 100, 1000),
    ]

    summary = aggregate_entries(entries)

    assert summary.backup_count == 3
    assert summary.total_size == 400
    assert summary.last_backup_time == 3000
    assert summary.last_backup_size == 50


def test_tie_keeps_first_seen() -> None:
    entries = [entry("a.db", 10, 7000), entry("b.db", 20, 7000)]

    summary = aggregate_entries(entries)

    assert summary.latest == LatestBackup(time_ms=7000, size=10)


def test_entries_without_timestamp_count_but_are_never_latest() -> None:
    entries = [
        entry("old.db", 30, None),
        entry("new.db", 40, 9000),
        entry("odd.db", 50, None),
    ]

    summary = aggregate_entries(entries)

    assert summary.backup_count == 3
    assert summary.total_size == 120
    assert summary.latest == LatestBackup(time_ms=9000, size=40)


def test_all_entries_without_timestamp() -> None:
    summary = aggregate_entries([entry("a.db", 1, None), entry("b.db", 2, None)])

    assert summary.backup_count == 2
    assert summary.total_size == 3
    assert summary.latest is None
    assert summary.last_backup_time is None
    assert summary.last_backup_size is None


def test_consumes_iterator_once() -> None:
    seen = []

    def generate():
        for i in range(3):
            seen.append(i)
            yield entry(f"{i}.db", 1, i)

    summary = aggregate_entries(generate())

    assert seen == [0, 1, 2]
    assert summary.backup_count == 3


def test_cancelled_before_start_raises() -> None:
    cancel_event = threading.Event()
    cancel_event.set()

    with pytest.raises(ScanCancelledError):
        aggregate_entries([entry("a.db", 1, 1)], cancel_event=cancel_event, directory_path="/backups")


def test_cancel_between_entries_stops_consuming() -> None:
    cancel_event = threading.Event()
    consumed = []

    def generate():
        for i in range(5):
            consumed.append(i)
            if i == 1:
                cancel_event.set()
            yield entry(f"{i}.db", 1, i)

    with pytest.raises(ScanCancelledError) as exc_info:
        aggregate_entries(generate(), cancel_event=cancel_event, directory_path="/backups")

    assert consumed == [0, 1]
    assert "/backups" in str(exc_info.value)


def test_unset_cancel_event_does_not_interfere() -> None:
    summary = aggregate_entries([entry("a.db", 8, 1)], cancel_event=threading.Event())

    assert summary.backup_count == 1
