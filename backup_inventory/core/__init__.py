"""Core inventory functionality."""

from .inventory import BackupInventory, get_backup_info
from .scanner import BackupDirectoryScanner
from .aggregator import aggregate_entries
from .errors import BackupInventoryError, BackupDirectoryUnreadableError, ScanCancelledError
from .models import BackupFileEntry, LatestBackup, BackupInventorySummary

__all__ = [
    "BackupInventory", "get_backup_info", "BackupDirectoryScanner", "aggregate_entries",
    "BackupInventoryError", "BackupDirectoryUnreadableError", "ScanCancelledError",
    "BackupFileEntry", "LatestBackup", "BackupInventorySummary",
]
