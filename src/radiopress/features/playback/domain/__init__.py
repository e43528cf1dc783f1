"""Playback domain: state, sequencing, and artist filtering."""

from .artist_filter import ArtistFilter
from .sequencer import Advance, EndOfQueuePolicy, PlaybackSequencer, fisher_yates
from .state import (
    AUTOPLAY_PROMPT,
    PlaybackError,
    PlaybackErrorKind,
    PlaybackState,
    PlaybackStatus,
    RepeatMode,
)
from .variant import SiteVariant

__all__ = [
    "AUTOPLAY_PROMPT",
    "Advance",
    "ArtistFilter",
    "EndOfQueuePolicy",
    "PlaybackError",
    "PlaybackErrorKind",
    "PlaybackSequencer",
    "PlaybackState",
    "PlaybackStatus",
    "RepeatMode",
    "SiteVariant",
    "fisher_yates",
]
