"""
Summary: Encode and decode the flat ``(filename=title=artist=imagedata)`` record format.
Why: The publisher and every loader must agree on one escaping and splitting rule.
"""

from __future__ import annotations

from typing import Final

from radiopress.platform.logging import logger

from .models import Track

EQUAL_SENTINEL: Final[str] = "_EQUAL_"
NO_IMAGE: Final[str] = "none"
FIELD_SEPARATOR: Final[str] = "="
MIN_FIELDS: Final[int] = 3
# The image field is a data URI whose base64 padding may contain "=".
MAX_FIELDS: Final[int] = 4
# Every separator str.splitlines() honours; none may survive inside a field.
LINE_BREAKS: Final[tuple[str, ...]] = (
    "\r",
    "\n",
    "\x0b",
    "\x0c",
    "\x1c",
    "\x1d",
    "\x1e",
    "\x85",
    "\u2028",
    "\u2029",
)


def escape_field(value: str) -> str:
    """Escape a title or artist so it survives the ``=``-delimited record."""

    flattened = value
    for separator in LINE_BREAKS:
        flattened = flattened.replace(separator, "")
    return flattened.replace(FIELD_SEPARATOR, EQUAL_SENTINEL)


def unescape_field(value: str) -> str:
    """Restore literal ``=`` characters in a title or artist."""

    return value.replace(EQUAL_SENTINEL, FIELD_SEPARATOR)


def format_record(filename: str, title: str, artist: str, image: str | None) -> str:
    """Build one record line (without trailing newline).

    ``title`` and ``artist`` are escaped here; ``filename`` must already be
    free of ``=`` and ``)``.
    """

    image_field = image if image else NO_IMAGE
    return f"({filename}={escape_field(title)}={escape_field(artist)}={image_field})"


def parse_record(line: str) -> Track | None:
    """Parse a record line, returning ``None`` for malformed input."""

    stripped = line.strip()
    if len(stripped) < 2 or not (stripped.startswith("(") and stripped.endswith(")")):
        return None

    parts = stripped[1:-1].split(FIELD_SEPARATOR, MAX_FIELDS - 1)
    if len(parts) < MIN_FIELDS:
        return None

    image = parts[3] if len(parts) > 3 and parts[3] and parts[3] != NO_IMAGE else None
    return Track(
        filename=parts[0],
        title=unescape_field(parts[1]),
        artist=unescape_field(parts[2]),
        cover_image=image,
    )


def parse_records(text: str) -> list[Track]:
    """Parse every valid record in ``text``; malformed lines are skipped.

    Lines end at LF with an optional CR, the same rule the page script uses,
    so other Unicode line separators stay inside their field.
    """

    tracks: list[Track] = []
    for number, raw_line in enumerate(text.split("\n"), start=1):
        line = raw_line.removesuffix("\r")
        if not line.strip():
            continue
        track = parse_record(line)
        if track is None:
            logger.debug("Skipping malformed record on line %d", number)
            continue
        tracks.append(track)
    return tracks


__all__ = [
    "EQUAL_SENTINEL",
    "LINE_BREAKS",
    "NO_IMAGE",
    "escape_field",
    "format_record",
    "parse_record",
    "parse_records",
    "unescape_field",
]
