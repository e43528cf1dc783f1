"""Summary: Ports and errors for media probing.
Why: Let extraction swap ffprobe for mutagen without touching the record writer.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from ..domain.probe_result import ProbeResult


class ProbeError(Exception):
    """A single file could not be probed; the file is skipped."""


class ProbeUnavailableError(ProbeError):
    """The probe tool itself is missing; publishing cannot continue."""


@runtime_checkable
class MediaProbePort(Protocol):
    """Port for reading title, artist, and cover art from an audio file."""

    def probe(self, path: Path) -> ProbeResult:
        """Return tags for ``path`` or raise ``ProbeError``."""
        ...


__all__ = ["MediaProbePort", "ProbeError", "ProbeUnavailableError"]
