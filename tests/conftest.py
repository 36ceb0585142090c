"""Pytest configuration and shared fixtures.

This module provides fixtures for testing mangashelf, including sample
backup documents and fake source/tracker registries.
"""

import json
from pathlib import Path

import pytest

from mangashelf.config import reset_config
from mangashelf.registry import StaticSourceRegistry, StaticTrackingRegistry, TrackerStatus


MANGADEX_ID = 2499283573021220255


# ============================================================================
# Backup Document Fixtures
# ============================================================================


@pytest.fixture
def sample_backup() -> dict:
    """A backup with two sources and tracked manga."""
    return {
        "version": 2,
        "mangas": [
            {
                "source": MANGADEX_ID,
                "url": "/title/one-piece",
                "title": "One Piece",
                "track": [{"s": 1, "r": 1000}, {"s": 2, "r": 30013}],
            },
            {
                "source": 7,
                "url": "/series/berserk",
                "title": "Berserk",
                "track": [{"s": 2, "r": 30002}],
            },
            {
                "source": 7,
                "url": "/series/vagabond",
                "title": "Vagabond",
            },
        ],
        "categories": [["Reading", 0]],
        "extensions": [f"{MANGADEX_ID}:MangaDex", "7:BatCave"],
    }


@pytest.fixture
def sample_backup_bytes(sample_backup: dict) -> bytes:
    """Sample backup serialized as UTF-8 JSON."""
    return json.dumps(sample_backup).encode("utf-8")


@pytest.fixture
def backup_file(tmp_path: Path, sample_backup_bytes: bytes) -> Path:
    """Sample backup written to disk."""
    path = tmp_path / "backup.json"
    path.write_bytes(sample_backup_bytes)
    return path


# ============================================================================
# Registry Fixtures
# ============================================================================


@pytest.fixture
def source_registry() -> StaticSourceRegistry:
    """Only MangaDex installed."""
    return StaticSourceRegistry([MANGADEX_ID])


@pytest.fixture
def tracking_registry() -> StaticTrackingRegistry:
    """MyAnimeList logged in, AniList and Kitsu logged out."""
    return StaticTrackingRegistry(
        {
            1: TrackerStatus("MyAnimeList", logged_in=True),
            2: TrackerStatus("AniList", logged_in=False),
            3: TrackerStatus("Kitsu", logged_in=False),
        }
    )


@pytest.fixture
def sources_file(tmp_path: Path) -> Path:
    """Sources file with MangaDex installed."""
    path = tmp_path / "sources.json"
    path.write_text(
        json.dumps({"sources": [{"id": MANGADEX_ID, "name": "MangaDex", "lang": "en"}]})
    )
    return path


@pytest.fixture
def trackers_file(tmp_path: Path) -> Path:
    """Trackers file with MyAnimeList logged in and AniList logged out."""
    path = tmp_path / "trackers.json"
    path.write_text(
        json.dumps(
            {
                "trackers": [
                    {"id": 1, "name": "MyAnimeList", "logged_in": True},
                    {"id": 2, "name": "AniList", "logged_in": False},
                ]
            }
        )
    )
    return path


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def isolated_env(tmp_path: Path, monkeypatch):
    """Point configuration at a temporary home for every test."""
    reset_config()
    monkeypatch.setenv("MANGASHELF_HOME", str(tmp_path / "home"))
    monkeypatch.delenv("MANGASHELF_SOURCES_FILE", raising=False)
    monkeypatch.delenv("MANGASHELF_TRACKERS_FILE", raising=False)
    yield
    reset_config()
