"""Key/value stores backing :class:`PlayerSettings`.

Where: src/radiopress/features/playback/adapters/settings_store.py
What: In-memory and JSON-file stores with ``localStorage`` string semantics.
Why: Let CLI sessions remember preferences across runs the way the page does.
"""

from __future__ import annotations

import json
from pathlib import Path

from radiopress.config.file_ops import write_text_file
from radiopress.platform.logging import logger


class InMemoryKeyValueStore:
    """Volatile store; each instance is an isolated namespace."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def snapshot(self) -> dict[str, str]:
        return dict(self._items)


class JsonFileKeyValueStore:
    """Store persisted as a flat JSON object; every write rewrites the file.

    Concurrent writers are not coordinated; the last write wins.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._items: dict[str, str] = self._read()

    @property
    def path(self) -> Path:
        return self._path

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        write_text_file(self._path, json.dumps(self._items, indent=2, ensure_ascii=False) + "\n")

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            decoded = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable settings file %s: %s", self._path, exc)
            return {}
        if not isinstance(decoded, dict):
            logger.warning("Ignoring settings file %s: expected a JSON object", self._path)
            return {}
        return {str(key): str(value) for key, value in decoded.items()}


__all__ = ["InMemoryKeyValueStore", "JsonFileKeyValueStore"]
