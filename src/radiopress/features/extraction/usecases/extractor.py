"""Audio metadata extraction into catalog records.

Where: src/radiopress/features/extraction/usecases/extractor.py
What: Probe a file and apply title/artist fallbacks and cover encoding.
Why: Keep record semantics independent of which probe produced the tags.
"""

from __future__ import annotations

from pathlib import Path
from typing import Final

from radiopress.config.config import UNKNOWN_ARTIST_DEFAULT

from ..domain.probe_result import ExtractedTrack
from .ports import MediaProbePort, ProbeError

_FORBIDDEN_FILENAME_CHARS: Final[frozenset[str]] = frozenset("=)\r\n")


class UnencodableFilenameError(ProbeError):
    """The file name cannot be represented in a record."""


def validate_record_filename(filename: str) -> None:
    """Reject names the record format cannot carry unambiguously.

    Raises:
        UnencodableFilenameError: The name contains ``=``, ``)``, a line break,
            or surrounding whitespace.
    """
    bad = sorted(_FORBIDDEN_FILENAME_CHARS.intersection(filename))
    if bad:
        shown = ", ".join(repr(char) for char in bad)
        raise UnencodableFilenameError(f"file name contains {shown}")
    if filename != filename.strip():
        raise UnencodableFilenameError("file name has leading or trailing whitespace")


def _clean_tag(value: str | None) -> str | None:
    if value is None:
        return None
    first_line = value.replace("\r", "\n").split("\n", 1)[0].strip()
    return first_line or None


class MetadataExtractor:
    """Turn audio files into :class:`ExtractedTrack` values."""

    def __init__(self, probe: MediaProbePort, unknown_artist: str = UNKNOWN_ARTIST_DEFAULT) -> None:
        self._probe = probe
        self._unknown_artist = unknown_artist

    def extract(self, path: Path) -> ExtractedTrack:
        """Extract one track.

        Args:
            path: Audio file to probe.

        Returns:
            ExtractedTrack: Metadata with fallbacks applied.

        Raises:
            UnencodableFilenameError: The file name cannot be written to a record.
            ProbeError: The probe failed for this file.
        """
        filename = path.name
        validate_record_filename(filename)

        result = self._probe.probe(path)
        title = _clean_tag(result.title) or path.stem
        artist = _clean_tag(result.artist) or self._unknown_artist

        return ExtractedTrack(
            source_path=path,
            filename=filename,
            title=title,
            artist=artist,
            cover_image=result.cover_data_uri(),
        )


__all__ = ["MetadataExtractor", "UnencodableFilenameError", "validate_record_filename"]
