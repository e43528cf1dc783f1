# Where: radiopress.features.playback.__init__
# What: Expose the playback domain, session, and adapters.
# Why: Provide a cohesive import surface for the CLI and application services.

from .domain import (
    ArtistFilter,
    EndOfQueuePolicy,
    PlaybackErrorKind,
    PlaybackSequencer,
    PlaybackState,
    PlaybackStatus,
    RepeatMode,
    SiteVariant,
)
from .usecases import PlaybackRejectedError, PlaybackSession, PlayerSettings

__all__ = [
    "ArtistFilter",
    "EndOfQueuePolicy",
    "PlaybackErrorKind",
    "PlaybackRejectedError",
    "PlaybackSequencer",
    "PlaybackSession",
    "PlaybackState",
    "PlaybackStatus",
    "PlayerSettings",
    "RepeatMode",
    "SiteVariant",
]
