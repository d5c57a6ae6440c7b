"""
Backup Inventory - Summarizes a directory of backup snapshot files.

This package reports when the latest backup was taken, how large it was,
how many backups exist and how much space they use together.
"""

__version__ = "1.0.0"

from .core.inventory import BackupInventory, get_backup_info
from .core.errors import BackupInventoryError
from .core.models import BackupInventorySummary

__all__ = ["BackupInventory", "get_backup_info", "BackupInventoryError", "BackupInventorySummary"]
