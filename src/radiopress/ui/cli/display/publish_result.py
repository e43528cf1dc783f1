"""src/radiopress/ui/cli/display/publish_result.py
What: Render the outcome of a publish run.
Why: Keep console output formatting consistent across the interface.
"""

from __future__ import annotations

from pathlib import Path
from typing import final

from rich.console import Console

from radiopress.application.services.publish_service import PublishReport


def _relative(path: Path, base: Path) -> str:
    try:
        return str(path.relative_to(base))
    except ValueError:
        return str(path)


@final
class PublishResultDisplay:
    """Handles publish result display in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_report(self, report: PublishReport, quiet: bool = False) -> None:
        """Display a publish summary.

        Args:
            report: Outcome of the run.
            quiet: Whether to suppress non-error output.
        """
        if quiet:
            return

        header = "Publish Preview" if report.dry_run else "Publish Summary"
        self.console.print(f"\n[bold]{header}:[/bold]")
        self.console.print(f"Audio files found: {report.total_files}")
        self.console.print(f"[green]Tracks published: {report.record_count}[/green]")

        if report.failures:
            self.console.print(f"[red]Skipped: {len(report.failures)}[/red]")
            for failure in report.failures:
                shown = _relative(failure.source_path, report.music_root)
                self.console.print(f"[red]  • {shown}: {failure.reason}[/red]")

        if report.dry_run:
            self.console.print("[yellow]Dry run: no files were written.[/yellow]")
            return

        self.console.print(f"Site directory: {report.site_dir}")
        if report.date:
            self.console.print(f"Last updated: {report.date}")
        if report.copied:
            self.console.print(f"Audio files copied: {len(report.copied)}")
        if report.committed:
            self.console.print("[blue]Committed site changes[/blue]")
        if report.pushed_branch:
            self.console.print(f"[blue]Pushed to origin/{report.pushed_branch}[/blue]")
