"""src/radiopress/ui/cli/commands/executor.py
What: Provide shared wiring for catalog-reading CLI commands.
Why: Reuse settings, service construction, and preference storage across commands.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from pathlib import Path

from rich.console import Console

from radiopress.application.services.playback_service import PlaybackService, SessionRequest
from radiopress.config.config import Config
from radiopress.config.settings import SiteSettings
from radiopress.features.catalog import Catalog
from radiopress.features.playback.adapters import InMemoryKeyValueStore, JsonFileKeyValueStore
from radiopress.features.playback.usecases import KeyValueStorePort
from radiopress.ui.cli.args.options import InspectArgs, QueueArgs, SimulateArgs


class CatalogCommandExecutor(ABC):
    """Base class for commands that load a published catalog."""

    args: InspectArgs | QueueArgs | SimulateArgs
    settings: SiteSettings
    app: PlaybackService
    console: Console

    def __init__(
        self,
        args: InspectArgs | QueueArgs | SimulateArgs,
        *,
        service_factory: Callable[[SiteSettings], PlaybackService] | None = None,
        console: Console | None = None,
    ) -> None:
        """Initialize command executor.

        Args:
            args: Command line arguments.
            service_factory: Builds the application service; tests inject doubles.
            console: Console used for tables and summaries.
        """
        self.args = args
        self.settings = SiteSettings.from_config(Config.load())
        self.app = (service_factory or PlaybackService)(self.settings)
        self.console = console or Console()

    @abstractmethod
    def execute(self) -> None:
        """Execute the command."""
        pass

    def load_catalog(self) -> Catalog:
        return self.app.load_catalog(self.args.source)

    @staticmethod
    def build_store(state_file: Path | None) -> KeyValueStorePort:
        if state_file is None:
            return InMemoryKeyValueStore()
        return JsonFileKeyValueStore(state_file.expanduser())

    @staticmethod
    def session_request(args: QueueArgs | SimulateArgs) -> SessionRequest:
        return SessionRequest(
            variant=args.variant,
            shuffle=args.shuffle,
            repeat=args.repeat if isinstance(args, SimulateArgs) else None,
            artists=args.artists,
            seed=args.seed,
        )
