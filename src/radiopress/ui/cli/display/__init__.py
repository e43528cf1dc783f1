"""Display management for CLI interface."""

from radiopress.ui.cli.display.catalog import CatalogDisplay
from radiopress.ui.cli.display.progress import ProgressDisplay
from radiopress.ui.cli.display.publish_result import PublishResultDisplay
from radiopress.ui.cli.display.simulation import SimulationDisplay

__all__ = ["CatalogDisplay", "ProgressDisplay", "PublishResultDisplay", "SimulationDisplay"]
