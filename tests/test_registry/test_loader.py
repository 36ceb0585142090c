"""Tests for registry loading."""

import json

import pytest

from mangashelf.registry import (
    DEFAULT_TRACKERS,
    RegistryError,
    StaticSourceRegistry,
    StaticTrackingRegistry,
    TrackerStatus,
    load_source_registry,
    load_tracking_registry,
)

MANGADEX_ID = 2499283573021220255


class TestStaticRegistries:
    """Tests for the in-memory registries."""

    def test_source_lookup(self):
        """Test installed source lookup."""
        registry = StaticSourceRegistry([1, 2])
        assert registry.lookup(1) is True
        assert registry.lookup(3) is False
        assert len(registry) == 2

    def test_tracker_lookup(self):
        """Test tracker lookup returns status or None."""
        registry = StaticTrackingRegistry({2: TrackerStatus("AniList", logged_in=True)})
        assert registry.lookup(2) == TrackerStatus("AniList", True)
        assert registry.lookup(5) is None

    def test_default_trackers_logged_out(self):
        """Test the built-in trackers start logged out."""
        assert DEFAULT_TRACKERS[1].name == "MyAnimeList"
        assert all(not status.logged_in for status in DEFAULT_TRACKERS.values())


class TestLoadSourceRegistry:
    """Tests for load_source_registry."""

    def test_load(self, sources_file):
        """Test loading installed sources."""
        registry = load_source_registry(sources_file)
        assert registry.lookup(MANGADEX_ID)
        assert not registry.lookup(7)

    def test_missing_file(self, tmp_path, caplog):
        """Test a missing file means nothing is installed."""
        with caplog.at_level("WARNING"):
            registry = load_source_registry(tmp_path / "nope.json")
        assert len(registry) == 0
        assert "not found" in caplog.text

    def test_invalid_json(self, tmp_path):
        """Test an unparseable file."""
        path = tmp_path / "sources.json"
        path.write_text("{broken")
        with pytest.raises(RegistryError, match="not valid JSON"):
            load_source_registry(path)

    def test_invalid_schema(self, tmp_path):
        """Test a file that does not match the schema."""
        path = tmp_path / "sources.json"
        path.write_text(json.dumps({"sources": [{"id": "abc", "name": "X"}]}))
        with pytest.raises(RegistryError, match="Invalid registry file"):
            load_source_registry(path)


class TestLoadTrackingRegistry:
    """Tests for load_tracking_registry."""

    def test_load(self, trackers_file):
        """Test loading tracker states."""
        registry = load_tracking_registry(trackers_file)
        assert registry.lookup(1) == TrackerStatus("MyAnimeList", logged_in=True)
        assert registry.lookup(2) == TrackerStatus("AniList", logged_in=False)
        assert registry.lookup(3) is None

    def test_missing_file_uses_defaults(self, tmp_path):
        """Test a missing file falls back to built-in trackers."""
        registry = load_tracking_registry(tmp_path / "nope.json")
        assert registry.lookup(2) == TrackerStatus("AniList", logged_in=False)
        assert len(registry) == len(DEFAULT_TRACKERS)

    def test_logged_in_defaults_false(self, tmp_path):
        """Test trackers without login state are logged out."""
        path = tmp_path / "trackers.json"
        path.write_text(json.dumps({"trackers": [{"id": 3, "name": "Kitsu"}]}))
        assert load_tracking_registry(path).lookup(3).logged_in is False

    def test_empty_name_rejected(self, tmp_path):
        """Test tracker names are required."""
        path = tmp_path / "trackers.json"
        path.write_text(json.dumps({"trackers": [{"id": 3, "name": ""}]}))
        with pytest.raises(RegistryError):
            load_tracking_registry(path)
