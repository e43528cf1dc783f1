"""Mutagen-backed media probe.

Where: src/radiopress/features/extraction/adapters/mutagen_probe.py
What: Read title, artist, and embedded artwork with mutagen.
Why: Offer a pure-Python probe where ffmpeg is not installed.
"""

from __future__ import annotations

import base64
import binascii
from pathlib import Path
from typing import Any, cast

import mutagen
from mutagen._util import MutagenError
from mutagen.flac import Picture
from mutagen.id3 import ID3
from mutagen.mp4 import MP4Cover

from radiopress.platform.logging import logger

from ..domain.probe_result import ProbeResult, sniff_image_mime
from ..usecases.ports import ProbeError


def _first_text(tags: Any, key: str) -> str | None:
    """Return the first string value for ``key`` in an easy-tags mapping."""

    if tags is None:
        return None
    try:
        value = tags.get(key)
    except (KeyError, ValueError):
        return None
    if isinstance(value, list):
        for item in cast(list[object], value):
            if isinstance(item, str) and item.strip():
                return item
        return None
    if isinstance(value, str) and value.strip():
        return value
    return None


class MutagenMediaProbe:
    """Probe audio files through ``mutagen.File``.

    Formats are detected from file contents, so renamed files (for example
    ``.jlres3`` copies of MP3s) are still recognised.
    """

    def probe(self, path: Path) -> ProbeResult:
        try:
            easy = mutagen.File(path, easy=True)
            raw = mutagen.File(path)
        except MutagenError as exc:
            logger.debug("mutagen could not read %s: %s", path, exc)
            if "No such file" in str(exc):
                raise ProbeError(f"file not found: {path}") from exc
            raise ProbeError(str(exc)) from exc

        if easy is None or raw is None:
            raise ProbeError(f"unrecognised audio format: {path.name}")

        cover, mime = self._extract_cover(raw)
        return ProbeResult(
            title=_first_text(easy.tags, "title"),
            artist=_first_text(easy.tags, "artist"),
            cover=cover,
            cover_mime=mime or sniff_image_mime(cover or b""),
        )

    @staticmethod
    def _extract_cover(audio: Any) -> tuple[bytes | None, str | None]:
        tags = getattr(audio, "tags", None)

        if isinstance(tags, ID3):
            frames = tags.getall("APIC")
            if frames:
                frame = frames[0]
                return bytes(frame.data), frame.mime or None

        pictures = getattr(audio, "pictures", None)
        if pictures:
            picture = cast(Picture, pictures[0])
            return bytes(picture.data), picture.mime or None

        if tags is None:
            return None, None

        covers = tags.get("covr") if hasattr(tags, "get") else None
        if covers:
            cover = cast(MP4Cover, covers[0])
            mime = "image/png" if cover.imageformat == MP4Cover.FORMAT_PNG else "image/jpeg"
            return bytes(cover), mime

        encoded_pictures = tags.get("metadata_block_picture") if hasattr(tags, "get") else None
        if encoded_pictures:
            try:
                picture = Picture(base64.b64decode(encoded_pictures[0]))
            except (binascii.Error, MutagenError) as exc:
                logger.debug("Ignoring undecodable Vorbis picture: %s", exc)
                return None, None
            return bytes(picture.data), picture.mime or None

        return None, None


__all__ = ["MutagenMediaProbe"]
