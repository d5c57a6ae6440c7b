"""Formatting utilities for backup inventory output."""

from datetime import datetime
from typing import Optional

from ..core.models import BackupInventorySummary


def format_file_size(size_bytes: Optional[int]) -> str:
    """Format file size in human readable format.

    Args:
        size_bytes: Size in bytes, or None.

    Returns:
        Human readable size string.
    """
    if not size_bytes:
        return "0B"

    size = float(size_bytes)
    units = ['B', 'KB', 'MB', 'GB']
    unit_index = 0
    while size >= 1024 and unit_index < len(units) - 1:
        size /= 1024
        unit_index += 1

    return f"{size:.1f}{units[unit_index]}"


def format_backup_time(timestamp_ms: Optional[int], now: Optional[datetime] = None) -> str:
    """Format a backup time relative to now.

    Args:
        timestamp_ms: Milliseconds since the epoch, or None.
        now: Reference time, defaults to the current local time.

    Returns:
        Relative time string.
    """
    if timestamp_ms is None:
        return "never"

    backup_time = datetime.fromtimestamp(timestamp_ms / 1000)
    now = now or datetime.now()
    diff_seconds = (now - backup_time).total_seconds()
    diff_mins = int(diff_seconds // 60)
    diff_hours = int(diff_seconds // 3600)
    diff_days = int(diff_seconds // 86400)
    clock = backup_time.strftime('%H:%M')

    if diff_mins < 1:
        return "just now"
    elif diff_mins < 60:
        return f"{diff_mins} minute{'s' if diff_mins != 1 else ''} ago"
    elif diff_hours < 24:
        return f"today {clock}"
    elif diff_days == 1:
        return f"yesterday {clock}"
    elif diff_days < 7:
        return f"{diff_days} days ago {clock}"
    else:
        return backup_time.strftime('%Y-%m-%d %H:%M:%S')


def format_summary(summary: BackupInventorySummary, now: Optional[datetime] = None) -> str:
    """Format an inventory summary as text lines."""
    if summary.backup_count == 0:
        return "No backups found"

    lines = [
        f"Last backup: {format_backup_time(summary.last_backup_time, now=now)}",
        f"Last backup size: {format_file_size(summary.last_backup_size)}",
        f"Backups: {summary.backup_count}",
        f"Total size: {format_file_size(summary.total_size)}",
    ]
    return "\n".join(lines)
