"""Data models for backup inventory."""

import json
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class BackupFileEntry:
    """A backup file seen during a single scan."""
    path: str
    size: int
    modified_ms: Optional[int]


@dataclass(frozen=True)
class LatestBackup:
    """Time and size of the most recent backup file."""
    time_ms: int
    size: int


@dataclass(frozen=True)
class BackupInventorySummary:
    """Summary of the backups directory at the time of a scan.

    The last backup time and size are kept together in ``latest`` so one can
    never be present without the other.
    """
    backup_count: int
    total_size: int
    latest: Optional[LatestBackup] = None

    @classmethod
    def empty(cls) -> "BackupInventorySummary":
        return cls(backup_count=0, total_size=0, latest=None)

    @property
    def last_backup_time(self) -> Optional[int]:
        return self.latest.time_ms if self.latest else None

    @property
    def last_backup_size(self) -> Optional[int]:
        return self.latest.size if self.latest else None

    def to_dict(self) -> Dict[str, Any]:
        """Return the summary in its wire shape (lower camel case keys)."""
        return {
            'lastBackupTime': self.last_backup_time,
            'lastBackupSize': self.last_backup_size,
            'backupCount': self.backup_count,
            'totalSize': self.total_size,
        }

    def to_json(self, indent: Optional[int] = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)
