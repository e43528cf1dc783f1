"""
Summary: Ports defining catalog loader dependencies.
Why: Let the loader read from a site directory or a published URL without knowing which.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


class ResourceUnavailableError(Exception):
    """A named site resource could not be fetched."""

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f"{name}: {reason}")
        self.name = name
        self.reason = reason


@runtime_checkable
class ResourceFetcherPort(Protocol):
    """Port for fetching a site resource as text."""

    def fetch_text(self, name: str) -> str:
        """Return the resource body or raise ``ResourceUnavailableError``."""
        ...

    def describe(self) -> str:
        """Human-readable location used in log messages."""
        ...


__all__ = ["ResourceFetcherPort", "ResourceUnavailableError"]
