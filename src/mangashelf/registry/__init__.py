"""Source and tracking-service registries."""

from .base import (
    RegistryError,
    SourceRegistry,
    TrackerStatus,
    TrackingRegistry,
)
from .loader import load_source_registry, load_tracking_registry
from .static import DEFAULT_TRACKERS, StaticSourceRegistry, StaticTrackingRegistry

__all__ = [
    "RegistryError",
    "SourceRegistry",
    "TrackerStatus",
    "TrackingRegistry",
    "load_source_registry",
    "load_tracking_registry",
    "DEFAULT_TRACKERS",
    "StaticSourceRegistry",
    "StaticTrackingRegistry",
]
