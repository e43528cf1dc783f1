"""Command line interface package."""

from radiopress.ui.cli.cli import CommandProcessor, main

__all__ = ["CommandProcessor", "main"]
