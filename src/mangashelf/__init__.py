"""Manga library backup tools."""

__version__ = "0.1.0"
