"""src/radiopress/ui/cli/commands/publish.py
What: Execute publish runs via the CLI.
Why: Bridge parsed arguments with the publish application service.
"""

from collections.abc import Callable
from typing import final

from radiopress.application.services.publish_service import (
    PublishReport,
    PublishRequest,
    PublishSiteService,
)
from radiopress.config.config import Config
from radiopress.config.settings import SiteSettings
from radiopress.ui.cli.args.options import PublishArgs
from radiopress.ui.cli.display.progress import ProgressDisplay, shared_console
from radiopress.ui.cli.display.publish_result import PublishResultDisplay


@final
class PublishCommand:
    """Command for publishing a music folder."""

    def __init__(
        self,
        args: PublishArgs,
        *,
        service_factory: Callable[[SiteSettings], PublishSiteService] | None = None,
        result_display: PublishResultDisplay | None = None,
    ) -> None:
        self.args = args
        self.settings = SiteSettings.from_config(Config.load(), site_dir=args.site_dir)
        self.app = (service_factory or PublishSiteService)(self.settings)
        self.request = PublishRequest(
            music_root=args.music_root,
            site_dir=self.settings.site_dir,
            copy_audio=args.copy_audio,
            commit=args.commit,
            push=args.push,
            dry_run=args.dry_run,
            probe_backend=args.probe_backend,
        )
        self.progress_display = ProgressDisplay()
        self.result_display = result_display or PublishResultDisplay(shared_console())

    def execute(self) -> PublishReport:
        """Execute the publish command.

        Returns:
            PublishReport: Outcome of the run.
        """
        report = self.progress_display.run_with_service(self.app, self.request)
        self.result_display.show_report(report, quiet=self.args.quiet)
        return report
