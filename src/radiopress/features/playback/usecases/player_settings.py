"""Typed settings repository over namespaced string storage.

Where: src/radiopress/features/playback/usecases/player_settings.py
What: Read and write player preferences with the same keys and encodings as the page.
Why: Consolidate persistence so the session and filter never touch raw keys.
"""

from __future__ import annotations

import json
from typing import Final

from radiopress.platform.logging import logger

from ..domain.state import RepeatMode
from .ports import KeyValueStorePort

VOLUME_KEY: Final[str] = "Volume"
DARK_MODE_KEY: Final[str] = "DarkMode"
ENABLED_ARTISTS_KEY: Final[str] = "EnabledArtists"
SHUFFLE_KEY: Final[str] = "Shuffle"
REPEAT_KEY: Final[str] = "Repeat"
FILTER_VISIBLE_KEY: Final[str] = "FilterVisible"


class PlayerSettings:
    """Preferences for one site variant, stored under ``<namespace><Key>``."""

    def __init__(self, store: KeyValueStorePort, namespace: str) -> None:
        self._store = store
        self._namespace = namespace

    @property
    def namespace(self) -> str:
        return self._namespace

    def key(self, name: str) -> str:
        return f"{self._namespace}{name}"

    def get_volume(self, default: float = 1.0) -> float:
        raw = self._store.get_item(self.key(VOLUME_KEY))
        if raw is None:
            return default
        try:
            value = float(raw)
        except ValueError:
            logger.debug("Ignoring stored volume %r", raw)
            return default
        return min(1.0, max(0.0, value))

    def set_volume(self, value: float) -> None:
        self._store.set_item(self.key(VOLUME_KEY), repr(float(value)))

    def get_dark_mode(self) -> bool:
        return self._get_bool(DARK_MODE_KEY, default=False)

    def set_dark_mode(self, enabled: bool) -> None:
        self._set_bool(DARK_MODE_KEY, enabled)

    def get_shuffle(self, default: bool) -> bool:
        return self._get_bool(SHUFFLE_KEY, default=default)

    def set_shuffle(self, enabled: bool) -> None:
        self._set_bool(SHUFFLE_KEY, enabled)

    def get_filter_visible(self) -> bool:
        return self._get_bool(FILTER_VISIBLE_KEY, default=False)

    def set_filter_visible(self, visible: bool) -> None:
        self._set_bool(FILTER_VISIBLE_KEY, visible)

    def get_repeat(self) -> RepeatMode:
        raw = self._store.get_item(self.key(REPEAT_KEY))
        if raw is None:
            return RepeatMode.OFF
        try:
            return RepeatMode.from_user_input(raw)
        except ValueError:
            logger.debug("Ignoring stored repeat mode %r", raw)
            return RepeatMode.OFF

    def set_repeat(self, mode: RepeatMode) -> None:
        self._store.set_item(self.key(REPEAT_KEY), mode.value)

    def get_enabled_artists(self) -> list[str] | None:
        raw = self._store.get_item(self.key(ENABLED_ARTISTS_KEY))
        if raw is None:
            return None
        try:
            decoded = json.loads(raw)
        except json.JSONDecodeError:
            logger.debug("Ignoring stored artist filter %r", raw)
            return None
        if not isinstance(decoded, list):
            return None
        return [item for item in decoded if isinstance(item, str)]

    def set_enabled_artists(self, artists: list[str]) -> None:
        self._store.set_item(self.key(ENABLED_ARTISTS_KEY), json.dumps(artists, ensure_ascii=False))

    def _get_bool(self, name: str, *, default: bool) -> bool:
        raw = self._store.get_item(self.key(name))
        if raw is None:
            return default
        return raw == "true"

    def _set_bool(self, name: str, value: bool) -> None:
        self._store.set_item(self.key(name), "true" if value else "false")


__all__ = [
    "DARK_MODE_KEY",
    "ENABLED_ARTISTS_KEY",
    "FILTER_VISIBLE_KEY",
    "PlayerSettings",
    "REPEAT_KEY",
    "SHUFFLE_KEY",
    "VOLUME_KEY",
]
