"""Render simulated playback transitions."""

from __future__ import annotations

from typing import ClassVar, final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from radiopress.application.services.playback_service import SimulationReport
from radiopress.features.playback import PlaybackStatus


@final
class SimulationDisplay:
    """Print the event log and outcome of a headless session."""

    _STATUS_STYLES: ClassVar[dict[PlaybackStatus, str]] = {
        PlaybackStatus.IDLE: "dim",
        PlaybackStatus.LOADING: "cyan",
        PlaybackStatus.READY: "blue",
        PlaybackStatus.PLAYING: "green",
        PlaybackStatus.PAUSED: "yellow",
        PlaybackStatus.ERROR: "red",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def show(self, report: SimulationReport, *, quiet: bool = False) -> None:
        if not quiet:
            table = Table(
                title="Playback transitions",
                show_header=True,
                header_style="bold magenta",
                box=box.SIMPLE_HEAD,
            )
            table.add_column("Step", justify="right", style="dim")
            table.add_column("Clock", justify="right", style="dim")
            table.add_column("Status")
            table.add_column("Pos", justify="right")
            table.add_column("Track")
            table.add_column("Detail", style="dim")
            for event in report.events:
                table.add_row(
                    str(event.step),
                    f"{event.clock:.1f}s",
                    Text(event.status.value, style=self._STATUS_STYLES[event.status]),
                    str(event.queue_position),
                    f"{event.artist} - {event.title}",
                    event.message or "",
                )
            self._console.print(table)

        self._console.print(
            f"Played: {len(report.played)}  Failed loads: {len(report.failed)}  "
            f"Queue length: {len(report.queue)}"
        )
