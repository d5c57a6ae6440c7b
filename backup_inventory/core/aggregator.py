"""Aggregation of scanned backup files into an inventory summary."""

import threading
from typing import Iterable, Optional

from .errors import ScanCancelledError
from .models import BackupFileEntry, BackupInventorySummary, LatestBackup


def aggregate_entries(entries: Iterable[BackupFileEntry],
                      cancel_event: Optional[threading.Event] = None,
                      directory_path: str = "") -> BackupInventorySummary:
    """Count and size backup files and find the most recent one.

    The entries are consumed exactly once. An entry replaces the current
    latest backup only if its modification time is strictly greater, so on a
    tie the entry seen first is kept. Directory listing order is not defined,
    which makes the outcome of a tie arbitrary.

    Entries without a usable modification time still count toward the
    backup count and total size.

    Args:
        entries: Backup files to aggregate.
        cancel_event: Checked before each entry; when set the scan stops.
        directory_path: Directory the entries came from, for error messages.

    Returns:
        The inventory summary.

    Raises:
        ScanCancelledError: If cancel_event was set before all entries were
            consumed.
    """
    backup_count = 0
    total_size = 0
    latest: Optional[LatestBackup] = None

    for entry in entries:
        if cancel_event is not None and cancel_event.is_set():
            raise ScanCancelledError(directory_path)

        backup_count += 1
        total_size += entry.size

        if entry.modified_ms is None:
            continue
        if latest is None or entry.modified_ms > latest.time_ms:
            latest = LatestBackup(time_ms=entry.modified_ms, size=entry.size)

    return BackupInventorySummary(
        backup_count=backup_count,
        total_size=total_size,
        latest=latest
    )
