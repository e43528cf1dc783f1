"""Tests for publish, catalog, and simulation output."""

from io import StringIO
from pathlib import Path

from rich.console import Console

from radiopress.application.services.playback_service import SimulationEvent, SimulationReport
from radiopress.application.services.publish_service import PublishReport, TrackFailure
from radiopress.features.catalog import Catalog, Track
from radiopress.features.playback import PlaybackStatus
from radiopress.ui.cli.display import CatalogDisplay, PublishResultDisplay, SimulationDisplay


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=120, color_system=None), buffer


def _report(**overrides: object) -> PublishReport:
    report = PublishReport(
        music_root=Path("/music"),
        site_dir=Path("/music/site"),
        total_files=3,
        date="2024-06-01T10:00:00+00:00",
    )
    for key, value in overrides.items():
        setattr(report, key, value)
    return report


def test_summary_lists_failures_relative_to_root() -> None:
    console, buffer = _console()
    report = _report(failures=[TrackFailure(Path("/music/Band/bad.mp3"), "corrupt header")])

    PublishResultDisplay(console).show_report(report)

    out = buffer.getvalue()
    assert "Publish Summary:" in out
    assert "Audio files found: 3" in out
    assert "Tracks published: 0" in out
    assert "Skipped: 1" in out
    assert "Band/bad.mp3: corrupt header" in out
    assert "Last updated: 2024-06-01T10:00:00+00:00" in out


def test_preview_stops_before_site_details() -> None:
    console, buffer = _console()

    PublishResultDisplay(console).show_report(_report(dry_run=True))

    out = buffer.getvalue()
    assert "Publish Preview:" in out
    assert "Dry run: no files were written." in out
    assert "Site directory" not in out


def test_git_outcome_is_reported() -> None:
    console, buffer = _console()

    PublishResultDisplay(console).show_report(_report(committed=True, pushed_branch="master"))

    out = buffer.getvalue()
    assert "Committed site changes" in out
    assert "Pushed to origin/master" in out


def test_quiet_prints_nothing() -> None:
    console, buffer = _console()

    PublishResultDisplay(console).show_report(_report(), quiet=True)

    assert buffer.getvalue() == ""


def test_catalog_table(three_artist_catalog: Catalog) -> None:
    console, buffer = _console()

    CatalogDisplay(console).show_catalog(three_artist_catalog, "./site")

    out = buffer.getvalue()
    assert "Catalog: ./site" in out
    assert "Fourth" in out
    assert "4 tracks by 3 artist(s)" in out


def test_queue_table_mentions_remaining() -> None:
    console, buffer = _console()
    tracks = [Track("a.mp3", "Alpha", "X", "data:image/png;base64,AA==")]

    CatalogDisplay(console).show_queue(tracks, title="Player queue", total=5)

    out = buffer.getvalue()
    assert "Player queue" in out
    assert "yes" in out
    assert "...and 4 more." in out


def test_simulation_summary() -> None:
    console, buffer = _console()
    report = SimulationReport(
        queue=[Track("a.mp3", "Alpha", "X")],
        events=[
            SimulationEvent(1, 180.0, PlaybackStatus.ERROR, 0, "a.mp3", "Alpha", "X", "Cannot load audio file: a.mp3"),
        ],
        played=[],
        failed=["a.mp3"],
    )

    SimulationDisplay(console).show(report)

    out = buffer.getvalue()
    assert "Cannot load audio file: a.mp3" in out
    assert "180.0s" in out
    assert "Played: 0  Failed loads: 1  Queue length: 1" in out


def test_simulation_quiet_keeps_summary() -> None:
    console, buffer = _console()

    SimulationDisplay(console).show(SimulationReport(), quiet=True)

    assert buffer.getvalue().strip() == "Played: 0  Failed loads: 0  Queue length: 0"
