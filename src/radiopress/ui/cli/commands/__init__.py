"""Command execution package for CLI."""

from radiopress.ui.cli.commands.executor import CatalogCommandExecutor
from radiopress.ui.cli.commands.inspect import InspectCommand
from radiopress.ui.cli.commands.publish import PublishCommand
from radiopress.ui.cli.commands.queue import QueueCommand
from radiopress.ui.cli.commands.simulate import SimulateCommand

__all__ = [
    "CatalogCommandExecutor",
    "InspectCommand",
    "PublishCommand",
    "QueueCommand",
    "SimulateCommand",
]
