"""Directory scanning functionality for backup inventory."""

import os
import logging
from pathlib import Path
from typing import Iterator, List, Optional

from .errors import BackupDirectoryUnreadableError
from .models import BackupFileEntry


class BackupDirectoryScanner:
    """Lists a backups directory and reads metadata of its backup files."""

    def __init__(self, extension: str = "db"):
        """Initialize backup directory scanner.

        Args:
            extension: Filename extension of backup files, with or without
                the leading dot.
        """
        self.suffix = "." + extension.lstrip(".")
        self.logger = logging.getLogger(__name__)

    def scan(self, directory_path: str) -> Iterator[BackupFileEntry]:
        """Yield every readable backup file in a directory.

        Metadata is fetched lazily, one entry at a time, so a consumer can
        stop between entries.

        Args:
            directory_path: Path to the backups directory.

        Raises:
            BackupDirectoryUnreadableError: If the directory exists but
                cannot be listed.
        """
        for entry in self.list_entries(directory_path):
            if not self.is_backup_file(entry.name):
                continue

            backup = self.read_entry(entry)
            if backup is not None:
                yield backup

    def list_entries(self, directory_path: str) -> List[os.DirEntry]:
        """List the entries of a directory.

        Returns an empty list if the directory does not exist.

        Raises:
            BackupDirectoryUnreadableError: If the directory exists but
                cannot be listed.
        """
        if not os.path.exists(directory_path):
            self.logger.debug(f"Backup directory {directory_path} does not exist")
            return []

        try:
            with os.scandir(directory_path) as it:
                return self._collect_entries(it, directory_path)
        except FileNotFoundError:
            # Removed between the existence check and the listing
            self.logger.debug(f"Backup directory {directory_path} disappeared")
            return []
        except OSError as e:
            self.logger.error(f"Error reading backup directory {directory_path}: {e}")
            raise BackupDirectoryUnreadableError(directory_path, str(e)) from e

    def _collect_entries(self, it: Iterator[os.DirEntry], directory_path: str) -> List[os.DirEntry]:
        """Drain a directory listing, dropping entries that fail to list."""
        entries = []
        while True:
            try:
                entry = next(it)
            except StopIteration:
                break
            except OSError as e:
                self.logger.debug(f"Skipping unreadable entry in {directory_path}: {e}")
                continue
            entries.append(entry)
        return entries

    def is_backup_file(self, name: str) -> bool:
        """Check whether a filename carries the backup extension."""
        return Path(name).suffix == self.suffix

    def read_entry(self, entry: os.DirEntry) -> Optional[BackupFileEntry]:
        """Read size and modification time of one entry.

        Returns:
            The entry, or None if its metadata cannot be read. Symlinks are
            not followed, so a link counts with its own size.
        """
        try:
            entry_stat = entry.stat(follow_symlinks=False)
        except OSError as e:
            self.logger.debug(f"Skipping {entry.path}: {e}")
            return None

        return BackupFileEntry(
            path=entry.path,
            size=entry_stat.st_size,
            modified_ms=mtime_to_epoch_ms(entry_stat)
        )


def mtime_to_epoch_ms(entry_stat: os.stat_result) -> Optional[int]:
    """Convert a stat modification time to milliseconds since the Unix epoch.

    Returns None for times before the epoch.
    """
    mtime_ns = entry_stat.st_mtime_ns
    if mtime_ns < 0:
        return None
    return mtime_ns // 1_000_000
