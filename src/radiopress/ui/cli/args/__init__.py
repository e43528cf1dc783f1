"""Command line argument handling package."""

from radiopress.ui.cli.args.parser import ArgumentParser
from radiopress.ui.cli.args.options import (
    CLIArgs,
    InspectArgs,
    PublishArgs,
    QueueArgs,
    SimulateArgs,
)

__all__ = ["ArgumentParser", "CLIArgs", "InspectArgs", "PublishArgs", "QueueArgs", "SimulateArgs"]
