"""src/radiopress/ui/cli/display/catalog.py
What: Render catalogs and play queues as Rich tables.
Why: Give ``inspect`` and ``queue`` one consistent tabular layout.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from radiopress.features.catalog import Catalog, Track


@final
class CatalogDisplay:
    """Render catalog and queue tables."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def show_catalog(self, catalog: Catalog, source: str) -> None:
        table = self._table(f"Catalog: {source}")
        for index, track in enumerate(catalog):
            table.add_row(str(index), *self._cells(track))
        self._console.print(table)
        artists = catalog.artists()
        self._console.print(f"{len(catalog)} tracks by {len(artists)} artist(s)")

    def show_queue(
        self,
        tracks: Sequence[Track],
        *,
        title: str,
        total: int,
    ) -> None:
        table = self._table(title)
        for position, track in enumerate(tracks):
            table.add_row(str(position), *self._cells(track))
        self._console.print(table)
        if len(tracks) < total:
            self._console.print(f"...and {total - len(tracks)} more.")

    @staticmethod
    def _table(title: str) -> Table:
        table = Table(
            title=title,
            show_header=True,
            header_style="bold magenta",
            box=box.SIMPLE_HEAD,
        )
        table.add_column("#", justify="right", style="dim")
        table.add_column("Title", style="bold")
        table.add_column("Artist")
        table.add_column("File", style="dim")
        table.add_column("Cover")
        return table

    @staticmethod
    def _cells(track: Track) -> tuple[str, str, str, Text]:
        cover = Text("yes", style="green") if track.cover_image else Text("none", style="dim")
        return track.title, track.artist, track.filename, cover
