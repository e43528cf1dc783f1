"""Playback adapters: storage, scheduling, and a headless media element."""

from .headless_media import HeadlessMediaElement
from .scheduler import ManualScheduler
from .settings_store import InMemoryKeyValueStore, JsonFileKeyValueStore

__all__ = [
    "HeadlessMediaElement",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "ManualScheduler",
]
