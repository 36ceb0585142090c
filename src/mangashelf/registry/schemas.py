"""Pydantic schemas for registry files."""

from typing import Optional

from pydantic import BaseModel, Field


class SourceEntry(BaseModel):
    """An installed content source."""

    id: int
    name: str = Field(..., min_length=1)
    lang: Optional[str] = None


class TrackerEntry(BaseModel):
    """A tracking service and its login state."""

    id: int
    name: str = Field(..., min_length=1)
    logged_in: bool = False


class SourceRegistryFile(BaseModel):
    """Contents of a sources file."""

    sources: list[SourceEntry] = Field(default_factory=list)


class TrackerRegistryFile(BaseModel):
    """Contents of a trackers file."""

    trackers: list[TrackerEntry] = Field(default_factory=list)
