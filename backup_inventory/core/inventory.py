"""Backup inventory query."""

import asyncio
import logging
import threading
from typing import Optional

from .aggregator import aggregate_entries
from .models import BackupInventorySummary
from .scanner import BackupDirectoryScanner
from ..config.config_manager import ConfigManager


class BackupInventory:
    """Summarizes the backup files in one backups directory.

    Holds no state between queries; every call scans the directory again.
    """

    def __init__(self, backups_dir: str, extension: str = "db"):
        """Initialize backup inventory.

        Args:
            backups_dir: Path to the backups directory.
            extension: Filename extension of backup files.
        """
        self.backups_dir = backups_dir
        self.extension = extension
        self.scanner = BackupDirectoryScanner(extension=extension)
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config_manager: ConfigManager) -> "BackupInventory":
        """Create an inventory for the directory a configuration points at."""
        return cls(
            backups_dir=config_manager.get_backups_directory(),
            extension=config_manager.get_backup_extension()
        )

    def get_backup_info(self, cancel_event: Optional[threading.Event] = None) -> BackupInventorySummary:
        """Scan the backups directory and summarize it.

        Args:
            cancel_event: Optional event; setting it stops the scan between
                entries.

        Returns:
            The inventory summary. A missing directory gives an empty summary.

        Raises:
            BackupDirectoryUnreadableError: If the directory cannot be listed.
            ScanCancelledError: If the scan was cancelled.
        """
        self.logger.info(f"Starting backup inventory of {self.backups_dir}")

        summary = aggregate_entries(
            self.scanner.scan(self.backups_dir),
            cancel_event=cancel_event,
            directory_path=self.backups_dir
        )

        self.logger.info(f"Completed backup inventory of {self.backups_dir}: "
                         f"{summary.backup_count} backups, {summary.total_size} bytes")
        return summary

    async def get_backup_info_async(self) -> BackupInventorySummary:
        """Run get_backup_info in a worker thread.

        Cancelling the awaiting task stops the worker before its next entry
        and re-raises asyncio.CancelledError; no summary is returned.
        """
        cancel_event = threading.Event()
        try:
            return await asyncio.to_thread(self.get_backup_info, cancel_event)
        except asyncio.CancelledError:
            cancel_event.set()
            self.logger.info(f"Backup inventory of {self.backups_dir} cancelled")
            raise


def get_backup_info(backups_dir: str, extension: str = "db") -> BackupInventorySummary:
    """Summarize the backup files in a directory."""
    return BackupInventory(backups_dir, extension=extension).get_backup_info()
