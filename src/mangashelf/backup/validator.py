"""Backup restore validation.

Checks a backup before restoring it: the document must carry its critical
data, and every source and tracking service it references is cross-checked
against what is available right now so the user knows what will be degraded.
"""

import logging
from pathlib import Path
from typing import Iterable

from ..registry.base import SourceRegistry, TrackingRegistry
from .document import (
    DocumentInput,
    load_document,
    parse_document,
    require_critical_fields,
)
from .errors import MalformedDocument
from .mapping import get_source_mapping
from .schemas import TRACK, TRACK_SERVICE, ValidationResult

logger = logging.getLogger(__name__)


def find_missing_sources(
    mapping: dict[int, str],
    source_registry: SourceRegistry,
) -> list[str]:
    """Names of declared sources that are not installed.

    Sources with an empty name are reported by id.
    """
    missing = []
    for source_id, name in mapping.items():
        if not source_registry.lookup(source_id):
            missing.append(name or str(source_id))
    return missing


def collect_tracker_ids(records: list) -> set[int]:
    """Collect the distinct tracking service ids used across all records.

    Raises:
        MalformedDocument: If a record or tracking entry is structurally broken
    """
    tracker_ids: set[int] = set()

    for position, record in enumerate(records):
        if not isinstance(record, dict):
            raise MalformedDocument(f"Manga entry {position} is not an object")

        tracks = record.get(TRACK)
        if tracks is None:
            continue
        if not isinstance(tracks, list):
            raise MalformedDocument(f"Manga entry {position} has an invalid '{TRACK}' list")

        for track in tracks:
            if not isinstance(track, dict) or TRACK_SERVICE not in track:
                raise MalformedDocument(
                    f"Manga entry {position} has a tracking entry without a service id"
                )
            service_id = track[TRACK_SERVICE]
            # bool is an int subclass but never a valid service id
            if isinstance(service_id, bool) or not isinstance(service_id, int):
                raise MalformedDocument(
                    f"Manga entry {position} has an invalid tracking service id: {service_id!r}"
                )
            tracker_ids.add(service_id)

    return tracker_ids


def find_missing_trackers(
    tracker_ids: Iterable[int],
    tracking_registry: TrackingRegistry,
) -> list[str]:
    """Names of referenced tracking services that are not logged in.

    Ids the registry does not know are skipped.
    """
    missing = []
    for service_id in tracker_ids:
        status = tracking_registry.lookup(service_id)
        if status is None:
            logger.debug("Skipping unknown tracking service id %s", service_id)
            continue
        if not status.logged_in:
            missing.append(status.name)
    return missing


def aggregate(
    missing_sources: Iterable[str],
    missing_trackers: Iterable[str],
) -> ValidationResult:
    """Deduplicate and sort both lists into the final result."""
    return ValidationResult(
        missing_sources=tuple(sorted(set(missing_sources))),
        missing_trackers=tuple(sorted(set(missing_trackers))),
    )


class BackupRestoreValidator:
    """Validates backups against the installed sources and trackers."""

    def __init__(
        self,
        source_registry: SourceRegistry,
        tracking_registry: TrackingRegistry,
    ):
        """Initialize validator.

        Args:
            source_registry: Installed content sources
            tracking_registry: Tracking services and their login state
        """
        self.source_registry = source_registry
        self.tracking_registry = tracking_registry

    def validate(self, source: DocumentInput) -> ValidationResult:
        """Validate a backup document.

        Args:
            source: Binary stream, bytes, or text holding the backup JSON

        Returns:
            ValidationResult listing missing sources and trackers

        Raises:
            BackupValidationError: If the backup cannot be restored
        """
        return self.validate_document(parse_document(source))

    def validate_document(self, document: dict) -> ValidationResult:
        """Validate an already parsed backup document."""
        records = require_critical_fields(document)
        logger.debug("Backup contains %d manga", len(records))

        mapping = get_source_mapping(document)
        logger.debug("Backup declares %d sources", len(mapping))

        tracker_ids = collect_tracker_ids(records)
        logger.debug("Backup references tracking services %s", sorted(tracker_ids))

        result = aggregate(
            find_missing_sources(mapping, self.source_registry),
            find_missing_trackers(tracker_ids, self.tracking_registry),
        )
        logger.debug(
            "Validation found %d missing sources, %d missing trackers",
            len(result.missing_sources),
            len(result.missing_trackers),
        )
        return result

    def validate_file(self, backup_path: Path) -> ValidationResult:
        """Validate a backup file on disk."""
        return self.validate_document(load_document(backup_path))


def validate(
    source: DocumentInput,
    source_registry: SourceRegistry,
    tracking_registry: TrackingRegistry,
) -> ValidationResult:
    """Validate a backup document with the given registries."""
    return BackupRestoreValidator(source_registry, tracking_registry).validate(source)
