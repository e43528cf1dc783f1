"""Where: src/radiopress/platform/probe/ffprobe.py
What: Media probe built on the external ffprobe and ffmpeg binaries.
Why: Match what browsers can decode by asking the same demuxers ffmpeg uses.
"""

from __future__ import annotations

import json
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any, Final

from radiopress.features.extraction.domain.probe_result import ProbeResult, sniff_image_mime
from radiopress.features.extraction.usecases.ports import ProbeError, ProbeUnavailableError
from radiopress.platform.logging import logger

DEFAULT_TIMEOUT_SECONDS: Final[float] = 60.0


def _lookup_tag(tags: Mapping[str, Any], key: str) -> str | None:
    """Case-insensitive tag lookup; containers disagree on ``title`` vs ``TITLE``."""

    for name, value in tags.items():
        if name.lower() == key and isinstance(value, str) and value.strip():
            return value
    return None


class FFprobeMediaProbe:
    """Read tags with ``ffprobe`` and the attached picture with ``ffmpeg``."""

    def __init__(
        self,
        ffprobe_binary: str = "ffprobe",
        ffmpeg_binary: str = "ffmpeg",
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._ffprobe = ffprobe_binary
        self._ffmpeg = ffmpeg_binary
        self._timeout = timeout

    def probe(self, path: Path) -> ProbeResult:
        payload = self._read_tags(path)
        cover = self._read_cover(path)
        return ProbeResult(
            title=self._tag_from(payload, "title"),
            artist=self._tag_from(payload, "artist"),
            cover=cover,
            cover_mime=sniff_image_mime(cover or b""),
        )

    def _read_tags(self, path: Path) -> dict[str, Any]:
        completed = self._run(
            [
                self._ffprobe,
                "-v",
                "quiet",
                "-print_format",
                "json",
                "-show_format",
                "-show_streams",
                str(path),
            ]
        )
        if completed.returncode != 0:
            raise ProbeError(f"ffprobe exited with status {completed.returncode}")
        try:
            decoded = json.loads(completed.stdout.decode("utf-8", errors="replace") or "{}")
        except json.JSONDecodeError as exc:
            raise ProbeError(f"ffprobe returned invalid JSON: {exc}") from exc
        return decoded if isinstance(decoded, dict) else {}

    @staticmethod
    def _tag_from(payload: Mapping[str, Any], key: str) -> str | None:
        format_tags = payload.get("format", {}).get("tags", {})
        value = _lookup_tag(format_tags, key) if isinstance(format_tags, dict) else None
        if value is not None:
            return value
        # Ogg containers keep Vorbis comments on the audio stream.
        for stream in payload.get("streams", []):
            stream_tags = stream.get("tags", {}) if isinstance(stream, dict) else {}
            if isinstance(stream_tags, dict):
                value = _lookup_tag(stream_tags, key)
                if value is not None:
                    return value
        return None

    def _read_cover(self, path: Path) -> bytes | None:
        completed = self._run(
            [
                self._ffmpeg,
                "-v",
                "quiet",
                "-i",
                str(path),
                "-an",
                "-c:v",
                "copy",
                "-frames:v",
                "1",
                "-f",
                "image2pipe",
                "-",
            ]
        )
        if completed.returncode != 0 or not completed.stdout:
            logger.debug("No cover art found in %s", path)
            return None
        return completed.stdout

    def _run(self, command: Sequence[str]) -> subprocess.CompletedProcess[bytes]:
        try:
            return subprocess.run(
                list(command),
                capture_output=True,
                check=False,
                timeout=self._timeout,
            )
        except FileNotFoundError as exc:
            raise ProbeUnavailableError(
                f"{command[0]} not found; install ffmpeg or set probe_backend = \"mutagen\""
            ) from exc
        except subprocess.TimeoutExpired as exc:
            raise ProbeError(f"{command[0]} timed out after {self._timeout:.0f}s") from exc


__all__ = ["DEFAULT_TIMEOUT_SECONDS", "FFprobeMediaProbe"]
