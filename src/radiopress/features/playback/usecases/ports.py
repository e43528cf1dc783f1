"""Summary: Ports defining playback session dependencies.
Why: Decouple the state machine from the media element, timers, and storage it drives.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable


class PlaybackRejectedError(Exception):
    """The media resource refused to start playback (e.g. autoplay policy)."""


@runtime_checkable
class MediaElementPort(Protocol):
    """The single media resource owned by a session.

    Loading a new source supersedes any pending load. Events flow back into the
    session through ``on_media_ready``, ``on_media_ended``, ``on_media_error``
    and ``on_time_update``.
    """

    volume: float

    @property
    def duration(self) -> float | None:
        """Duration in seconds once metadata is known."""
        ...

    def load(self, url: str) -> None:
        """Replace the current source and begin loading."""
        ...

    def play(self) -> None:
        """Start playback; raises ``PlaybackRejectedError`` when refused."""
        ...

    def pause(self) -> None:
        ...

    def seek(self, seconds: float) -> None:
        """Move the playhead; out-of-range values are clamped by the resource."""
        ...


@runtime_checkable
class SchedulerPort(Protocol):
    """Single-threaded deferred execution."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        ...


@runtime_checkable
class KeyValueStorePort(Protocol):
    """String key/value storage with browser ``localStorage`` semantics."""

    def get_item(self, key: str) -> str | None:
        ...

    def set_item(self, key: str, value: str) -> None:
        ...


__all__ = [
    "KeyValueStorePort",
    "MediaElementPort",
    "PlaybackRejectedError",
    "SchedulerPort",
]
