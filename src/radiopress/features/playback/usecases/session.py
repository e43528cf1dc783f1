"""Playback session state machine.

Where: src/radiopress/features/playback/usecases/session.py
What: Drive one media resource through idle/loading/ready/playing/paused/error.
Why: Make every transition explicit so views become a projection of state.

Transitions run on the caller's thread. Media events are fed in through the
``on_media_*`` methods; delayed recovery goes through the scheduler port.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import Final
from urllib.parse import quote

from radiopress.config.settings import FILENAME_PLACEHOLDER
from radiopress.platform.logging import logger

from ...catalog.domain.models import Catalog, Track
from ..domain.artist_filter import ArtistFilter
from ..domain.sequencer import PlaybackSequencer
from ..domain.state import (
    AUTOPLAY_PROMPT,
    PlaybackError,
    PlaybackErrorKind,
    PlaybackState,
    PlaybackStatus,
    RepeatMode,
)
from .player_settings import PlayerSettings
from .ports import MediaElementPort, PlaybackRejectedError, SchedulerPort

ERROR_SKIP_DELAY: Final[float] = 1.0

StateListener = Callable[[PlaybackState], None]


class PlaybackSession:
    """Own the playback state for one catalog and one media resource."""

    def __init__(
        self,
        catalog: Catalog,
        media: MediaElementPort,
        settings: PlayerSettings,
        scheduler: SchedulerPort,
        sequencer: PlaybackSequencer,
        *,
        audio_url_template: str,
        artist_filter: ArtistFilter | None = None,
    ) -> None:
        if len(catalog) == 0:
            raise ValueError("PlaybackSession requires a non-empty catalog")
        if FILENAME_PLACEHOLDER not in audio_url_template:
            raise ValueError(f"audio_url_template must contain {FILENAME_PLACEHOLDER}")

        self._catalog = catalog
        self._media = media
        self._settings = settings
        self._scheduler = scheduler
        self._sequencer = sequencer
        self._filter = artist_filter
        self._audio_url_template = audio_url_template
        self._listeners: list[StateListener] = []

        # Bumped on every load so timers armed for an older source are ignored.
        self._generation = 0
        self._has_user_interacted = False
        self._first_track = True
        self._resume_on_ready = False

        self._state = PlaybackState(
            volume=settings.get_volume(),
            repeat=settings.get_repeat(),
            shuffle=sequencer.shuffle,
        )
        self._media.volume = self._state.volume
        _ = self._sequencer.rebuild(self._eligible_indices())

    # ------------------------------------------------------------------ views

    @property
    def state(self) -> PlaybackState:
        """A copy of the current state."""
        return dataclasses.replace(self._state)

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def sequencer(self) -> PlaybackSequencer:
        return self._sequencer

    @property
    def artist_filter(self) -> ArtistFilter | None:
        return self._filter

    @property
    def current_index(self) -> int:
        """Catalog index of the track at the current queue position."""
        return self._sequencer.catalog_index(self._state.queue_position)

    @property
    def current_track(self) -> Track:
        return self._catalog[self.current_index]

    def add_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def audio_url(self, track: Track) -> str:
        return self._audio_url_template.replace(FILENAME_PLACEHOLDER, quote(track.filename))

    # --------------------------------------------------------------- commands

    def start(self) -> None:
        """Load the first queue entry."""
        self.load_track(0)

    def mark_user_interaction(self) -> None:
        self._has_user_interacted = True

    def load_track(self, position: int) -> None:
        """Point the media resource at the track at ``position`` and start loading."""

        self._generation += 1
        self._state.queue_position = position
        self._state.position = 0.0
        track = self.current_track
        url = self.audio_url(track)
        self._transition(PlaybackStatus.LOADING)
        logger.debug("Loading audio file %s from %s", track.filename, url)
        self._media.load(url)

    def toggle_play(self) -> None:
        """Play when ready/paused, pause when playing."""

        status = self._state.status
        if status is PlaybackStatus.PLAYING:
            self._media.pause()
            self._transition(PlaybackStatus.PAUSED)
            return
        if status is PlaybackStatus.IDLE:
            self._resume_on_ready = True
            self.load_track(self._state.queue_position)
            return
        if status is PlaybackStatus.LOADING:
            self._resume_on_ready = True
            return
        if self._is_error(PlaybackErrorKind.TRACK_LOAD):
            # A skip is already scheduled.
            return
        self._start_playback()

    def next_track(self, *, resume: bool | None = None) -> None:
        """Advance through the sequencer and load the result."""

        advance = self._sequencer.next(self._state.queue_position)
        if advance.wrapped:
            logger.debug("End of queue reached (%s)", self._sequencer.end_of_queue.value)
        self._resume_on_ready = self._should_resume() if resume is None else resume
        self.load_track(advance.position)

    def previous_track(self, *, resume: bool | None = None) -> None:
        position = self._sequencer.previous(self._state.queue_position)
        self._resume_on_ready = self._should_resume() if resume is None else resume
        self.load_track(position)

    def seek(self, fraction: float) -> bool:
        """Seek to ``fraction`` of the duration; ignored while the duration is unknown."""

        duration = self._media.duration
        if not duration or duration <= 0:
            return False
        target = fraction * duration
        self._media.seek(target)
        self._state.position = min(max(target, 0.0), duration)
        self._notify()
        return True

    def set_volume(self, value: float) -> float:
        volume = min(1.0, max(0.0, float(value)))
        self._media.volume = volume
        self._state.volume = volume
        self._settings.set_volume(volume)
        self._notify()
        return volume

    def toggle_repeat(self) -> RepeatMode:
        self._state.repeat = self._state.repeat.toggled()
        self._settings.set_repeat(self._state.repeat)
        self._notify()
        return self._state.repeat

    def toggle_shuffle(self) -> bool:
        """Switch ordering mode, keeping the current track at its new queue position."""

        current = self.current_index
        enabled = not self._sequencer.shuffle
        _ = self._sequencer.set_shuffle(enabled)
        position = self._sequencer.position_of(current)
        self._state.queue_position = position if position is not None else 0
        self._state.shuffle = enabled
        self._settings.set_shuffle(enabled)
        self._notify()
        return enabled

    def toggle_artist(self, artist: str) -> bool:
        artist_filter = self._require_filter()
        changed = artist_filter.toggle(artist)
        if not changed:
            logger.info("Keeping '%s' enabled: at least one artist must stay selected", artist)
            return False
        self._apply_filter_change()
        return True

    def select_all_artists(self) -> None:
        self._require_filter().select_all()
        self._apply_filter_change()

    def select_none_artists(self) -> None:
        self._require_filter().select_none()
        self._apply_filter_change()

    def set_dark_mode(self, enabled: bool) -> None:
        self._settings.set_dark_mode(enabled)

    def set_filter_panel_visible(self, visible: bool) -> None:
        self._settings.set_filter_visible(visible)

    # ------------------------------------------------------------ media events

    def on_media_ready(self) -> None:
        if self._state.status is not PlaybackStatus.LOADING:
            return
        self._transition(PlaybackStatus.READY)

        first = self._first_track
        self._first_track = False
        resume = self._resume_on_ready
        self._resume_on_ready = False
        if resume or (first and self._has_user_interacted):
            self._start_playback()

    def on_time_update(self, seconds: float) -> None:
        self._state.position = seconds
        self._notify()

    def on_media_ended(self) -> None:
        if self._state.repeat is RepeatMode.ONE:
            self._resume_on_ready = True
            self.load_track(self._state.queue_position)
            return
        self.next_track(resume=True)

    def on_media_error(self, detail: str = "") -> None:
        """Record a track load failure and schedule a skip to the next track."""

        track = self.current_track
        logger.warning("Audio error for %s: %s", track.filename, detail or "unknown error")
        resume = self._should_resume()
        self._resume_on_ready = False
        self._transition(
            PlaybackStatus.ERROR,
            PlaybackError(PlaybackErrorKind.TRACK_LOAD, f"Cannot load audio file: {track.filename}"),
        )
        generation = self._generation

        def _skip() -> None:
            if generation != self._generation:
                return
            self.next_track(resume=resume)

        self._scheduler.call_later(ERROR_SKIP_DELAY, _skip)

    # ---------------------------------------------------------------- helpers

    def _start_playback(self) -> bool:
        try:
            self._media.play()
        except PlaybackRejectedError as exc:
            logger.info("Playback failed: %s", exc)
            self._transition(
                PlaybackStatus.ERROR,
                PlaybackError(PlaybackErrorKind.PLAYBACK_START, AUTOPLAY_PROMPT),
            )
            return False
        self._transition(PlaybackStatus.PLAYING)
        return True

    def _apply_filter_change(self) -> None:
        artist_filter = self._require_filter()
        self._settings.set_enabled_artists(artist_filter.enabled_in_order())
        resume = self._should_resume()
        _ = self._sequencer.rebuild(self._eligible_indices())
        self._resume_on_ready = resume
        self.load_track(0)

    def _eligible_indices(self) -> list[int]:
        if self._filter is None:
            return list(range(len(self._catalog)))
        return self._filter.eligible_indices(self._catalog)

    def _require_filter(self) -> ArtistFilter:
        if self._filter is None:
            raise RuntimeError("This session has no artist filter")
        return self._filter

    def _should_resume(self) -> bool:
        return self._state.is_playing or self._resume_on_ready

    def _is_error(self, kind: PlaybackErrorKind) -> bool:
        error = self._state.error
        return self._state.status is PlaybackStatus.ERROR and error is not None and error.kind is kind

    def _transition(self, status: PlaybackStatus, error: PlaybackError | None = None) -> None:
        previous = self._state.status
        self._state.status = status
        self._state.error = error
        if previous is not status:
            logger.debug("Playback %s -> %s", previous.value, status.value)
        self._notify()

    def _notify(self) -> None:
        snapshot = self.state
        for listener in self._listeners:
            listener(snapshot)


__all__ = ["ERROR_SKIP_DELAY", "PlaybackSession", "StateListener"]
