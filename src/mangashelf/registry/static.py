"""In-memory registries."""

from typing import Iterable, Mapping, Optional

from .base import TrackerStatus


class StaticSourceRegistry:
    """Source registry backed by a fixed set of installed source ids."""

    def __init__(self, source_ids: Iterable[int] = ()):
        self._source_ids = frozenset(source_ids)

    def lookup(self, source_id: int) -> bool:
        return source_id in self._source_ids

    def __len__(self) -> int:
        return len(self._source_ids)


class StaticTrackingRegistry:
    """Tracking registry backed by a fixed id to status mapping."""

    def __init__(self, statuses: Optional[Mapping[int, TrackerStatus]] = None):
        self._statuses = dict(statuses or {})

    def lookup(self, service_id: int) -> Optional[TrackerStatus]:
        return self._statuses.get(service_id)

    def __len__(self) -> int:
        return len(self._statuses)


# Tracking services built into the app, all logged out until configured
DEFAULT_TRACKERS: dict[int, TrackerStatus] = {
    1: TrackerStatus("MyAnimeList"),
    2: TrackerStatus("AniList"),
    3: TrackerStatus("Kitsu"),
    4: TrackerStatus("Shikimori"),
    5: TrackerStatus("Bangumi"),
    6: TrackerStatus("Komga"),
}
