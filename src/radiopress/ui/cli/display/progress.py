"""Progress display functionality for CLI."""

from pathlib import Path
from typing import Any, Callable, Protocol, final, runtime_checkable

from rich.console import Console
from rich.progress import Progress, TaskID

from radiopress.application.services.publish_service import PublishReport, PublishRequest
from radiopress.platform.logging import PublishRichHandler, logger


@runtime_checkable
class PublishServiceLike(Protocol):
    """Protocol for application services that publish with progress reporting."""

    def publish(
        self,
        request: PublishRequest,
        progress_callback: Callable[[int, int, Path], None] | None = None,
    ) -> PublishReport:
        ...


def shared_console() -> Console | None:
    """Return the console the log handler renders to, so bars and logs interleave."""

    for handler in logger.handlers:
        if isinstance(handler, PublishRichHandler):
            return handler.console
    return None


@final
class ProgressDisplay:
    """Handles progress display in CLI."""

    def run_with_service(self, app: PublishServiceLike, request: PublishRequest) -> PublishReport:
        """Run a publish via the application service with a progress bar.

        Args:
            app: Application service instance used to orchestrate publishing.
            request: Publish parameters.

        Returns:
            PublishReport: Outcome of the run.
        """
        progress_kwargs: dict[str, Any] = {
            "transient": True,
            "redirect_stdout": False,
            "redirect_stderr": False,
        }
        progress_console = shared_console()
        if progress_console is not None:
            progress_kwargs["console"] = progress_console

        with Progress(**progress_kwargs) as progress:
            task_id: TaskID | None = None
            last_count = 0

            def _cb(processed: int, total: int, current_file: Path) -> None:
                nonlocal task_id, last_count
                _ = current_file  # consumed via logging elsewhere
                if task_id is None:
                    task_id = progress.add_task("[cyan]Extracting metadata...", total=total)
                advance = max(processed - last_count, 0)
                progress.update(
                    task_id,
                    advance=advance,
                    description=f"[cyan]Extracting metadata... {processed}/{total}",
                )
                last_count = processed

            return app.publish(request, _cb)
