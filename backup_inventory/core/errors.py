"""Exceptions raised by the backup inventory query."""


class BackupInventoryError(Exception):
    """Base error; the message is what callers show to the user."""


class BackupDirectoryUnreadableError(BackupInventoryError):
    """The backups directory exists but could not be listed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read backup directory: {reason}")


class ScanCancelledError(BackupInventoryError):
    """The scan was cancelled before a summary was produced."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Backup scan of {path} was cancelled")
