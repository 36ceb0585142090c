"""Configuration management for mangashelf.

Loads configuration from environment variables and provides defaults.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()


@dataclass
class Config:
    """Application configuration."""

    # Data directory
    home: Path

    # Registries
    sources_file: Path
    trackers_file: Path

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        home = Path(
            os.environ.get("MANGASHELF_HOME", str(Path.home() / ".mangashelf"))
        ).expanduser()

        return cls(
            home=home,
            sources_file=Path(
                os.environ.get("MANGASHELF_SOURCES_FILE", str(home / "sources.json"))
            ).expanduser(),
            trackers_file=Path(
                os.environ.get("MANGASHELF_TRACKERS_FILE", str(home / "trackers.json"))
            ).expanduser(),
        )

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []

        for label, path in (("Sources", self.sources_file), ("Trackers", self.trackers_file)):
            if path.is_dir():
                errors.append(f"{label} file is a directory: {path}")

        return errors


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Reset the global config instance. Used for testing."""
    global _config
    _config = None
