"""Summary: Value objects produced by media probing and record extraction.
Why: Carry optional tags and cover bytes between probes and the record writer.
"""

from __future__ import annotations

import base64
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from radiopress.features.catalog.domain.record_format import format_record

DEFAULT_COVER_MIME: Final[str] = "image/jpeg"

_IMAGE_SIGNATURES: Final[tuple[tuple[bytes, str], ...]] = (
    (b"\x89PNG\r\n\x1a\n", "image/png"),
    (b"\xff\xd8\xff", "image/jpeg"),
    (b"GIF8", "image/gif"),
)


def sniff_image_mime(data: bytes, fallback: str = DEFAULT_COVER_MIME) -> str:
    """Guess an image MIME type from its leading bytes."""

    for signature, mime in _IMAGE_SIGNATURES:
        if data.startswith(signature):
            return mime
    if data[:4] == b"RIFF" and data[8:12] == b"WEBP":
        return "image/webp"
    return fallback


@dataclass(frozen=True, slots=True)
class ProbeResult:
    """Tags and artwork reported by a probe; every field may be absent."""

    title: str | None = None
    artist: str | None = None
    cover: bytes | None = None
    cover_mime: str = DEFAULT_COVER_MIME

    def cover_data_uri(self) -> str | None:
        if not self.cover:
            return None
        encoded = base64.b64encode(self.cover).decode("ascii")
        return f"data:{self.cover_mime};base64,{encoded}"


@dataclass(frozen=True, slots=True)
class ExtractedTrack:
    """Metadata ready to be written as one catalog record."""

    source_path: Path
    filename: str
    title: str
    artist: str
    cover_image: str | None

    def to_record(self) -> str:
        return format_record(self.filename, self.title, self.artist, self.cover_image)


__all__ = [
    "DEFAULT_COVER_MIME",
    "ExtractedTrack",
    "ProbeResult",
    "sniff_image_mime",
]
