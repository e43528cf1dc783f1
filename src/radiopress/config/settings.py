"""Where: src/radiopress/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated values to feature layers without file I/O.
Assumptions: - Config defaults remain compatible with current runtime expectations.
Trade-offs: - Validation is limited to simple boundary checks; bad values fall back to defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Final

from radiopress.config.config import (
    AUDIO_EXTENSIONS_DEFAULT,
    AUDIO_URL_TEMPLATE_DEFAULT,
    UNKNOWN_ARTIST_DEFAULT,
    Config,
)
from radiopress.config.paths import default_site_dir

# Site resource names -------------------------------------------------------

FILECOUNT_NAME: Final[str] = "filecount.txt"
FILEDATA_NAME: Final[str] = "filedata.txt"
DATE_NAME: Final[str] = "date.txt"
RADIO_PAGE_NAME: Final[str] = "index.html"
PLAYER_PAGE_NAME: Final[str] = "player.html"

# Audio URL used when files are copied next to the pages.
LOCAL_AUDIO_URL_TEMPLATE: Final[str] = "./{filename}.mp3"

FILENAME_PLACEHOLDER: Final[str] = "{filename}"


class ProbeBackend(str, Enum):
    """Available metadata probe implementations."""

    FFPROBE = "ffprobe"
    MUTAGEN = "mutagen"

    @staticmethod
    def from_user_input(value: str) -> "ProbeBackend":
        """Translate raw config or CLI input into the matching backend."""

        normalized = value.strip().lower()
        for backend in ProbeBackend:
            if backend.value == normalized:
                return backend
        valid: Final[str] = ", ".join(b.value for b in ProbeBackend)
        msg = f"Unsupported probe backend '{value}'. Valid options: {valid}"
        raise ValueError(msg)


def _normalize_extension(raw: str) -> str:
    cleaned = raw.strip().lower()
    if not cleaned:
        return ""
    return cleaned if cleaned.startswith(".") else f".{cleaned}"


@dataclass(frozen=True, slots=True)
class SiteSettings:
    """Validated values the publish pipeline and renderer consume."""

    site_dir: Path
    audio_extensions: tuple[str, ...]
    probe_backend: ProbeBackend
    ffprobe_binary: str
    ffmpeg_binary: str
    unknown_artist: str
    radio_title: str
    player_title: str
    audio_url_template: str
    storage_namespace: str

    @property
    def radio_namespace(self) -> str:
        return f"{self.storage_namespace}Radio"

    @property
    def player_namespace(self) -> str:
        return f"{self.storage_namespace}Player"

    @classmethod
    def from_config(cls, config: Config, *, site_dir: Path | None = None) -> "SiteSettings":
        """Derive settings from ``config``; an explicit ``site_dir`` wins over the file."""

        extensions = tuple(
            ext for ext in (_normalize_extension(raw) for raw in config.audio_extensions) if ext
        )
        template = (config.audio_url_template or AUDIO_URL_TEMPLATE_DEFAULT).strip()
        if FILENAME_PLACEHOLDER not in template:
            template = AUDIO_URL_TEMPLATE_DEFAULT
        template = template.replace("{repository}", config.repository.strip("/ ")).replace(
            "{branch}", config.branch.strip() or "main"
        )

        return cls(
            site_dir=(site_dir or config.site_dir or default_site_dir()).expanduser().resolve(),
            audio_extensions=extensions or AUDIO_EXTENSIONS_DEFAULT,
            probe_backend=ProbeBackend.from_user_input(config.probe_backend),
            ffprobe_binary=config.ffprobe_binary or "ffprobe",
            ffmpeg_binary=config.ffmpeg_binary or "ffmpeg",
            unknown_artist=config.unknown_artist.strip() or UNKNOWN_ARTIST_DEFAULT,
            radio_title=config.radio_title.strip() or "Radio",
            player_title=config.player_title.strip() or "Music Player",
            audio_url_template=template,
            storage_namespace=config.storage_namespace.strip() or "radiopress",
        )


__all__ = [
    "DATE_NAME",
    "FILECOUNT_NAME",
    "FILEDATA_NAME",
    "FILENAME_PLACEHOLDER",
    "LOCAL_AUDIO_URL_TEMPLATE",
    "PLAYER_PAGE_NAME",
    "RADIO_PAGE_NAME",
    "ProbeBackend",
    "SiteSettings",
]
