"""Errors raised while validating a backup before restore.

Every error carries a user-facing message that can be shown as-is to explain
why the restore cannot proceed.
"""

from typing import Any, Optional


class BackupValidationError(Exception):
    """Base class for fatal backup validation failures."""

    default_message = "Invalid backup file."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MalformedDocument(BackupValidationError):
    """Backup is not valid JSON or a required sub-field is absent."""

    default_message = "Backup file is corrupt or not a valid backup."


class MissingCriticalData(BackupValidationError):
    """Backup parsed but lacks the version or manga fields."""

    default_message = "Backup file is missing data."


class EmptyBackup(BackupValidationError):
    """Backup has a manga list, but it is empty."""

    default_message = "Backup does not contain any manga."


class MalformedSourceMapping(BackupValidationError):
    """An extensions entry does not follow the ``<id>:<name>`` encoding."""

    default_message = "Backup contains an invalid source entry."

    def __init__(self, entry: Any, index: Optional[int] = None, reason: str = ""):
        self.entry = entry
        self.index = index
        self.reason = reason
        location = f" at position {index}" if index is not None else ""
        message = f"Invalid source entry{location}: {entry!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
