"""Registry interfaces consulted while validating a backup.

Both registries are read-only from the validator's point of view and are
passed in explicitly, so tests can use the static implementations.
"""

from dataclasses import dataclass
from typing import Optional, Protocol


class RegistryError(Exception):
    """Registry file could not be read or is invalid."""

    pass


@dataclass(frozen=True)
class TrackerStatus:
    """Name and login state of a tracking service."""

    name: str
    logged_in: bool = False


class SourceRegistry(Protocol):
    """Answers whether a content source is currently installed."""

    def lookup(self, source_id: int) -> bool:
        ...


class TrackingRegistry(Protocol):
    """Answers which tracking services exist and whether they are logged in."""

    def lookup(self, service_id: int) -> Optional[TrackerStatus]:
        """Return the service status, or None for an unknown service id."""
        ...
