"""
Summary: Playback status, repeat mode, and the observable session state.
Why: Replace inferred flags with one explicit state that views project from.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Final


class PlaybackStatus(str, Enum):
    """Lifecycle of the single media resource."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    PLAYING = "playing"
    PAUSED = "paused"
    ERROR = "error"


class RepeatMode(str, Enum):
    """What happens when a track ends."""

    OFF = "off"
    ONE = "one"

    @staticmethod
    def from_user_input(value: str) -> "RepeatMode":
        """Translate stored or CLI input into the matching mode."""

        normalized = value.strip().lower()
        for mode in RepeatMode:
            if mode.value == normalized:
                return mode
        valid: Final[str] = ", ".join(m.value for m in RepeatMode)
        msg = f"Unsupported repeat mode '{value}'. Valid options: {valid}"
        raise ValueError(msg)

    def toggled(self) -> "RepeatMode":
        return RepeatMode.OFF if self is RepeatMode.ONE else RepeatMode.ONE


class PlaybackErrorKind(str, Enum):
    """Recoverable playback failures."""

    # The media element reported an error for the current source; skip forward.
    TRACK_LOAD = "track_load"
    # The browser refused to start playback; wait for a user gesture.
    PLAYBACK_START = "playback_start"


@dataclass(frozen=True, slots=True)
class PlaybackError:
    """Reason attached to the ``ERROR`` status."""

    kind: PlaybackErrorKind
    message: str


AUTOPLAY_PROMPT: Final[str] = "Please click to start playback (browser autoplay policy)"


@dataclass(slots=True)
class PlaybackState:
    """Snapshot of the session; views render from this and nothing else."""

    status: PlaybackStatus = PlaybackStatus.IDLE
    error: PlaybackError | None = None
    queue_position: int = 0
    position: float = 0.0
    volume: float = 1.0
    repeat: RepeatMode = RepeatMode.OFF
    shuffle: bool = False

    @property
    def is_playing(self) -> bool:
        return self.status is PlaybackStatus.PLAYING


__all__ = [
    "AUTOPLAY_PROMPT",
    "PlaybackError",
    "PlaybackErrorKind",
    "PlaybackState",
    "PlaybackStatus",
    "RepeatMode",
]
