"""Application service for inspecting catalogs and driving headless sessions.

Builds the same sequencer, filter, and settings wiring the generated pages use
so the CLI can preview play order and replay playback scenarios offline.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Final, final

from radiopress.config.settings import SiteSettings
from radiopress.features.catalog import Catalog, CatalogLoader, ResourceFetcherPort, Track
from radiopress.features.catalog.adapters import fetcher_for
from radiopress.features.playback import (
    ArtistFilter,
    EndOfQueuePolicy,
    PlaybackSequencer,
    PlaybackSession,
    PlaybackState,
    PlaybackStatus,
    PlayerSettings,
    RepeatMode,
    SiteVariant,
)
from radiopress.features.playback.adapters import (
    HeadlessMediaElement,
    InMemoryKeyValueStore,
    ManualScheduler,
)
from radiopress.features.playback.usecases import ERROR_SKIP_DELAY, KeyValueStorePort
from radiopress.platform.logging import logger

SIMULATED_MEDIA_ERROR: Final[str] = "MEDIA_ERR_SRC_NOT_SUPPORTED"


@dataclass(frozen=True)
class SessionRequest:
    """How to configure a session.

    Attributes:
        variant: Which page's behaviour to reproduce.
        shuffle: Force shuffle on or off; ``None`` uses the stored preference.
        repeat: Force the repeat mode; ``None`` uses the stored preference.
        artists: Enabled artists; empty uses the stored filter.
        seed: Seed for shuffling, for reproducible output.
    """

    variant: SiteVariant = SiteVariant.RADIO
    shuffle: bool | None = None
    repeat: RepeatMode | None = None
    artists: tuple[str, ...] = ()
    seed: int | None = None


@dataclass(frozen=True, slots=True)
class QueuePreview:
    """Play order of a freshly built session."""

    tracks: list[Track]
    total: int
    shuffle: bool
    end_of_queue: EndOfQueuePolicy


@dataclass(frozen=True, slots=True)
class SimulationEvent:
    """One observable change during a simulation."""

    step: int
    clock: float
    status: PlaybackStatus
    queue_position: int
    filename: str
    title: str
    artist: str
    message: str | None = None


@dataclass(slots=True)
class SimulationReport:
    """Transitions and outcomes of a simulated run."""

    queue: list[Track] = field(default_factory=list)
    events: list[SimulationEvent] = field(default_factory=list)
    played: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


@final
class PlaybackService:
    """Application service wiring catalog loading and playback sessions."""

    def __init__(
        self,
        settings: SiteSettings,
        *,
        fetcher_factory: Callable[[str], ResourceFetcherPort] | None = None,
        store_factory: Callable[[], KeyValueStorePort] | None = None,
    ) -> None:
        self._settings = settings
        self._fetcher_factory: Callable[[str], ResourceFetcherPort] = fetcher_factory or fetcher_for
        self._store_factory: Callable[[], KeyValueStorePort] = (
            store_factory or InMemoryKeyValueStore
        )

    def load_catalog(self, source: str) -> Catalog:
        """Load the catalog published at ``source`` (directory or base URL).

        Raises:
            CatalogError: The catalog could not be loaded.
        """
        fetcher = self._fetcher_factory(source)
        logger.debug("Loading catalog from %s", fetcher.describe())
        return CatalogLoader(fetcher).load()

    def build_session(
        self,
        catalog: Catalog,
        request: SessionRequest,
        *,
        media: HeadlessMediaElement,
        scheduler: ManualScheduler,
        store: KeyValueStorePort | None = None,
    ) -> PlaybackSession:
        """Wire a session the way the page for ``request.variant`` does.

        Raises:
            ValueError: ``request.artists`` names an artist missing from the catalog,
                or the variant has no artist filter.
        """
        variant = request.variant
        namespace = (
            self._settings.radio_namespace
            if variant is SiteVariant.RADIO
            else self._settings.player_namespace
        )
        player_settings = PlayerSettings(store or self._store_factory(), namespace)

        if request.shuffle is not None:
            player_settings.set_shuffle(request.shuffle)
        if request.repeat is not None:
            player_settings.set_repeat(request.repeat)

        artist_filter = self._build_filter(catalog, variant, request.artists, player_settings)
        sequencer = PlaybackSequencer(
            shuffle=player_settings.get_shuffle(variant.default_shuffle),
            end_of_queue=variant.end_of_queue,
            rng=random.Random(request.seed),
        )
        return PlaybackSession(
            catalog,
            media,
            player_settings,
            scheduler,
            sequencer,
            audio_url_template=self._settings.audio_url_template,
            artist_filter=artist_filter,
        )

    def preview_queue(
        self,
        catalog: Catalog,
        request: SessionRequest,
        *,
        limit: int | None = None,
        store: KeyValueStorePort | None = None,
    ) -> QueuePreview:
        """Return tracks in the order the page would play them."""

        session = self.build_session(
            catalog,
            request,
            media=HeadlessMediaElement(),
            scheduler=ManualScheduler(),
            store=store,
        )
        sequencer = session.sequencer
        order = [catalog[index] for index in sequencer.queue]
        return QueuePreview(
            tracks=order if limit is None else order[: max(0, limit)],
            total=len(order),
            shuffle=sequencer.shuffle,
            end_of_queue=sequencer.end_of_queue,
        )

    def simulate(
        self,
        catalog: Catalog,
        request: SessionRequest,
        *,
        steps: int,
        fail: Iterable[str] = (),
        store: KeyValueStorePort | None = None,
    ) -> SimulationReport:
        """Play ``steps`` track attempts against a headless media element.

        Files named in ``fail`` raise a media error when loaded; every other
        track loads, plays to the end, and fires ``ended``.
        """
        failing = set(fail)
        media = HeadlessMediaElement()
        scheduler = ManualScheduler()
        session = self.build_session(
            catalog, request, media=media, scheduler=scheduler, store=store
        )
        report = SimulationReport(queue=[catalog[index] for index in session.sequencer.queue])
        step = 0
        last: tuple[PlaybackStatus, int, str | None] | None = None

        def _record(state: PlaybackState) -> None:
            nonlocal last
            message = state.error.message if state.error is not None else None
            key = (state.status, state.queue_position, message)
            if key == last:
                return
            last = key
            track = session.current_track
            report.events.append(
                SimulationEvent(
                    step=step,
                    clock=scheduler.now,
                    status=state.status,
                    queue_position=state.queue_position,
                    filename=track.filename,
                    title=track.title,
                    artist=track.artist,
                    message=message,
                )
            )

        session.add_listener(_record)
        # A visitor clicking the page; otherwise the first track only loads.
        session.mark_user_interaction()
        session.start()

        for step in range(1, steps + 1):
            track = session.current_track
            if track.filename in failing:
                session.on_media_error(SIMULATED_MEDIA_ERROR)
                report.failed.append(track.filename)
                _ = scheduler.advance(ERROR_SKIP_DELAY)
                continue

            media.finish_loading()
            session.on_media_ready()
            if session.state.status is not PlaybackStatus.PLAYING:
                logger.info("Playback did not start for %s", track.filename)
                break
            report.played.append(track.filename)
            duration = media.duration or 0.0
            session.on_time_update(duration)
            _ = scheduler.advance(duration)
            session.on_media_ended()

        return report

    @staticmethod
    def _build_filter(
        catalog: Catalog,
        variant: SiteVariant,
        artists: tuple[str, ...],
        player_settings: PlayerSettings,
    ) -> ArtistFilter | None:
        if not variant.uses_artist_filter:
            if artists:
                raise ValueError(f"The {variant.value} page has no artist filter; drop --artist")
            return None
        if artists:
            known = set(catalog.artists())
            unknown = [name for name in artists if name not in known]
            if unknown:
                raise ValueError(f"Unknown artist(s): {', '.join(unknown)}")
            artist_filter = ArtistFilter.for_catalog(catalog, artists)
            player_settings.set_enabled_artists(artist_filter.enabled_in_order())
            return artist_filter
        return ArtistFilter.for_catalog(catalog, player_settings.get_enabled_artists())


__all__ = [
    "PlaybackService",
    "QueuePreview",
    "SIMULATED_MEDIA_ERROR",
    "SessionRequest",
    "SimulationEvent",
    "SimulationReport",
]
