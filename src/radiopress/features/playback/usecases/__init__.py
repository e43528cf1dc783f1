"""Playback use cases: the session state machine and its ports."""

from .player_settings import PlayerSettings
from .ports import KeyValueStorePort, MediaElementPort, PlaybackRejectedError, SchedulerPort
from .session import ERROR_SKIP_DELAY, PlaybackSession

__all__ = [
    "ERROR_SKIP_DELAY",
    "KeyValueStorePort",
    "MediaElementPort",
    "PlaybackRejectedError",
    "PlaybackSession",
    "PlayerSettings",
    "SchedulerPort",
]
