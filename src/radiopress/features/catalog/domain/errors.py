"""
Summary: Errors raised while loading a published catalog.
Why: Callers tell a missing site, an empty library and unreadable data apart.
"""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for fatal catalog load failures.

    ``user_message`` is the text shown in place of the player.
    """

    user_message: str = "Error loading music library."


class CatalogUnavailable(CatalogError):
    """The count or data resource could not be fetched or read."""

    user_message = "Error loading music library."


class EmptyCatalog(CatalogError):
    """The count resource reports zero tracks."""

    user_message = "No music files found."


class NoValidTracks(CatalogError):
    """The data resource contained no parseable records."""

    user_message = "No valid music files found."


__all__ = ["CatalogError", "CatalogUnavailable", "EmptyCatalog", "NoValidTracks"]
