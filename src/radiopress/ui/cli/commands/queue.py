"""Print the play order a page would use."""

from typing import final, override

from radiopress.ui.cli.args.options import QueueArgs
from radiopress.ui.cli.commands.executor import CatalogCommandExecutor
from radiopress.ui.cli.display.catalog import CatalogDisplay


@final
class QueueCommand(CatalogCommandExecutor):
    """Build the variant's play queue and print it."""

    args: QueueArgs

    @override
    def execute(self) -> None:
        catalog = self.load_catalog()
        request = self.session_request(self.args)
        preview = self.app.preview_queue(
            catalog,
            request,
            limit=self.args.limit,
            store=self.build_store(self.args.state_file),
        )
        if self.args.quiet:
            return
        order = "shuffled" if preview.shuffle else "catalog order"
        CatalogDisplay(self.console).show_queue(
            preview.tracks,
            title=(
                f"{request.variant.value.capitalize()} queue "
                f"({order}, then {preview.end_of_queue.value})"
            ),
            total=preview.total,
        )
