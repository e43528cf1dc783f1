"""Media element stand-in with no audio output.

Where: src/radiopress/features/playback/adapters/headless_media.py
What: Track source, playhead, and pause state the way an HTML audio element would.
Why: Let the ``simulate`` command and tests drive a real session without a browser.
"""

from __future__ import annotations

from radiopress.features.playback.usecases.ports import PlaybackRejectedError

AUTOPLAY_REJECTION = (
    "NotAllowedError: play() failed because the user didn't interact with the document first."
)


class HeadlessMediaElement:
    """Silent media resource; the driver decides when events fire."""

    def __init__(self, *, track_seconds: float = 180.0, block_autoplay: bool = False) -> None:
        self.volume: float = 1.0
        self.src: str | None = None
        self.paused: bool = True
        self.current_time: float = 0.0
        self.loads: list[str] = []
        self._track_seconds = track_seconds
        self._metadata_loaded = False
        self._block_autoplay = block_autoplay

    @property
    def duration(self) -> float | None:
        return self._track_seconds if self._metadata_loaded else None

    def load(self, url: str) -> None:
        self.src = url
        self.loads.append(url)
        self.paused = True
        self.current_time = 0.0
        self._metadata_loaded = False

    def finish_loading(self) -> None:
        """Mark metadata as available, as ``loadedmetadata`` would."""
        self._metadata_loaded = True

    def allow_autoplay(self) -> None:
        self._block_autoplay = False

    def play(self) -> None:
        if self._block_autoplay:
            raise PlaybackRejectedError(AUTOPLAY_REJECTION)
        self.paused = False

    def pause(self) -> None:
        self.paused = True

    def seek(self, seconds: float) -> None:
        limit = self.duration or 0.0
        self.current_time = min(max(seconds, 0.0), limit)


__all__ = ["AUTOPLAY_REJECTION", "HeadlessMediaElement"]
