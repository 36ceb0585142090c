"""Load registries from JSON files."""

import json
import logging
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from .base import RegistryError, TrackerStatus
from .schemas import SourceRegistryFile, TrackerRegistryFile
from .static import DEFAULT_TRACKERS, StaticSourceRegistry, StaticTrackingRegistry

logger = logging.getLogger(__name__)

_Model = TypeVar("_Model", bound=BaseModel)


def _read_registry_file(path: Path, model: type[_Model]) -> _Model:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise RegistryError(f"Cannot read registry file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise RegistryError(f"Registry file {path} is not valid JSON: {e}") from e

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise RegistryError(f"Invalid registry file {path}: {e}") from e


def load_source_registry(path: Path) -> StaticSourceRegistry:
    """Load installed sources from a sources file.

    A missing file means no sources are installed.

    Raises:
        RegistryError: If the file exists but is unreadable or invalid
    """
    if not path.exists():
        logger.warning("Sources file %s not found, treating all sources as missing", path)
        return StaticSourceRegistry()

    registry_file = _read_registry_file(path, SourceRegistryFile)
    logger.debug("Loaded %d sources from %s", len(registry_file.sources), path)
    return StaticSourceRegistry(entry.id for entry in registry_file.sources)


def load_tracking_registry(path: Path) -> StaticTrackingRegistry:
    """Load tracking services from a trackers file.

    A missing file falls back to the built-in services, all logged out.

    Raises:
        RegistryError: If the file exists but is unreadable or invalid
    """
    if not path.exists():
        logger.warning("Trackers file %s not found, using built-in trackers", path)
        return StaticTrackingRegistry(DEFAULT_TRACKERS)

    registry_file = _read_registry_file(path, TrackerRegistryFile)
    logger.debug("Loaded %d trackers from %s", len(registry_file.trackers), path)
    return StaticTrackingRegistry(
        {
            entry.id: TrackerStatus(name=entry.name, logged_in=entry.logged_in)
            for entry in registry_file.trackers
        }
    )
