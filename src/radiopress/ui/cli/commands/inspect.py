"""Print a published catalog."""

from typing import final, override

from radiopress.ui.cli.args.options import InspectArgs
from radiopress.ui.cli.commands.executor import CatalogCommandExecutor
from radiopress.ui.cli.display.catalog import CatalogDisplay


@final
class InspectCommand(CatalogCommandExecutor):
    """Load a catalog and list every track."""

    args: InspectArgs

    @override
    def execute(self) -> None:
        catalog = self.load_catalog()
        if self.args.quiet:
            return
        CatalogDisplay(self.console).show_catalog(catalog, self.args.source)
