"""Command line interface for radiopress."""

import sys
from typing import final

from radiopress.application.services.publish_service import NoAudioFilesError
from radiopress.features.catalog import CatalogError
from radiopress.features.extraction import ProbeUnavailableError
from radiopress.platform.git import GitCommandError
from radiopress.platform.logging import logger
from radiopress.ui.cli.args import ArgumentParser
from radiopress.ui.cli.args.options import CLIArgs, InspectArgs, PublishArgs, QueueArgs
from radiopress.ui.cli.commands import (
    InspectCommand,
    PublishCommand,
    QueueCommand,
    SimulateCommand,
)


@final
class CommandProcessor:
    """Command line interface processor."""

    @staticmethod
    def process_command(args_list: list[str] | None = None) -> None:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).
        """
        try:
            args: CLIArgs = ArgumentParser.process_args(args_list)

            if isinstance(args, PublishArgs):
                report = PublishCommand(args).execute()
                if report.record_count == 0:
                    logger.error("No tracks could be extracted; the site would be empty")
                    sys.exit(1)
                return

            if isinstance(args, InspectArgs):
                InspectCommand(args).execute()
            elif isinstance(args, QueueArgs):
                QueueCommand(args).execute()
            else:
                SimulateCommand(args).execute()
            return

        except KeyboardInterrupt:
            logger.info("\nOperation cancelled by user")
            sys.exit(130)
        except CatalogError as e:
            logger.error("%s (%s)", e.user_message, str(e) or type(e).__name__)
            sys.exit(1)
        except (NoAudioFilesError, ProbeUnavailableError, GitCommandError, ValueError) as e:
            logger.error("%s", str(e))
            sys.exit(1)
        except Exception as e:
            logger.error("An unexpected error occurred: %s", str(e))
            sys.exit(1)


def main() -> int:
    """Main entry point.

    Returns:
        int: Process exit code (0 on success). Note that underlying
        command processing may call ``sys.exit(...)`` on errors, so this
        return is only reached when processing completes successfully.
    """
    CommandProcessor.process_command()
    return 0
