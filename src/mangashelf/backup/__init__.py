"""Backup validation before restore."""

from .document import load_document, parse_document, require_critical_fields
from .errors import (
    BackupValidationError,
    EmptyBackup,
    MalformedDocument,
    MalformedSourceMapping,
    MissingCriticalData,
)
from .mapping import decode_extension_entry, get_source_mapping
from .schemas import ValidationResult
from .validator import BackupRestoreValidator, validate

__all__ = [
    "load_document",
    "parse_document",
    "require_critical_fields",
    "BackupValidationError",
    "EmptyBackup",
    "MalformedDocument",
    "MalformedSourceMapping",
    "MissingCriticalData",
    "decode_extension_entry",
    "get_source_mapping",
    "ValidationResult",
    "BackupRestoreValidator",
    "validate",
]
