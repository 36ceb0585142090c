"""Backup document field names and the validation result."""

from dataclasses import dataclass, field

# Top-level document fields
VERSION = "version"
MANGAS = "mangas"
EXTENSIONS = "extensions"

# Record fields
TRACK = "track"
TRACK_SERVICE = "s"

EXTENSION_SEPARATOR = ":"


@dataclass(frozen=True)
class ValidationResult:
    """What would be degraded by restoring a backup.

    Both lists hold display names, sorted ascending without duplicates.
    """

    missing_sources: tuple[str, ...] = field(default_factory=tuple)
    missing_trackers: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_clean(self) -> bool:
        """True when nothing referenced by the backup is unavailable."""
        return not self.missing_sources and not self.missing_trackers

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "missing_sources": list(self.missing_sources),
            "missing_trackers": list(self.missing_trackers),
        }
