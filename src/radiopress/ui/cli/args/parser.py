"""Command line argument parser."""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import final

from radiopress import __version__
from radiopress.config.config import Config
from radiopress.config.settings import ProbeBackend
from radiopress.features.playback.domain.state import RepeatMode
from radiopress.features.playback.domain.variant import SiteVariant
from radiopress.platform.logging import DEFAULT_LOG_FILE, logger, setup_logger
from radiopress.ui.cli.args.options import (
    CLIArgs,
    InspectArgs,
    PublishArgs,
    QueueArgs,
    SimulateArgs,
)


@final
class ArgumentParser:
    """Command line argument parser."""

    @staticmethod
    def create_parser() -> argparse.ArgumentParser:
        """Create argument parser.

        Returns:
            argparse.ArgumentParser: Configured argument parser.
        """
        parser = argparse.ArgumentParser(
            prog="radiopress",
            description="radiopress - publish a music folder as a static radio and player site.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
        )
        _ = parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

        subparsers = parser.add_subparsers(dest="command", required=True)

        publish_parser = subparsers.add_parser(
            "publish",
            help="Scan audio files and write the catalog and pages",
        )
        _ = publish_parser.add_argument(
            "music_root",
            type=str,
            help="Directory holding the audio files (usually the repository root)",
            metavar="MUSIC_ROOT",
        )
        _ = publish_parser.add_argument(
            "--site-dir",
            type=str,
            help="Output directory for the generated site (defaults to the configured site_dir)",
            metavar="DIR",
        )
        _ = publish_parser.add_argument(
            "--copy-audio",
            action="store_true",
            help="Copy audio files into the site as <filename>.mp3 and play them from there",
        )
        _ = publish_parser.add_argument(
            "--commit",
            action="store_true",
            help="Stage and commit the site directory",
        )
        _ = publish_parser.add_argument(
            "--push",
            action="store_true",
            help="Push after committing (origin main, then master)",
        )
        _ = publish_parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Scan and extract metadata without writing anything",
        )
        _ = publish_parser.add_argument(
            "--probe",
            choices=[backend.value for backend in ProbeBackend],
            help="Metadata probe to use (overrides probe_backend in the config)",
        )
        ArgumentParser._add_verbosity(publish_parser)

        inspect_parser = subparsers.add_parser(
            "inspect",
            help="Load a published catalog and list its tracks",
        )
        ArgumentParser._add_source(inspect_parser)
        ArgumentParser._add_verbosity(inspect_parser)

        queue_parser = subparsers.add_parser(
            "queue",
            help="Print the order in which a page would play the catalog",
        )
        ArgumentParser._add_session_options(queue_parser)
        _ = queue_parser.add_argument(
            "--limit",
            type=int,
            help="Show only the first N queue entries",
            metavar="N",
        )

        simulate_parser = subparsers.add_parser(
            "simulate",
            help="Drive a headless playback session and print its transitions",
        )
        ArgumentParser._add_session_options(simulate_parser)
        _ = simulate_parser.add_argument(
            "--steps",
            type=int,
            default=10,
            help="Number of track attempts to simulate (default: 10)",
            metavar="N",
        )
        _ = simulate_parser.add_argument(
            "--repeat-one",
            action="store_true",
            help="Replay the current track when it ends",
        )
        _ = simulate_parser.add_argument(
            "--fail",
            action="append",
            default=[],
            help="Treat FILENAME as unloadable (repeatable)",
            metavar="FILENAME",
        )

        return parser

    @staticmethod
    def process_args(args_list: Sequence[str] | None = None) -> CLIArgs:
        """Process command line arguments.

        Args:
            args_list: List of command line arguments (for testing).

        Returns:
            CLIArgs: Processed command line arguments.

        Raises:
            SystemExit: If validation fails.
        """
        parser = ArgumentParser.create_parser()
        parsed_args = parser.parse_args(args_list)

        # Set log level based on verbosity flags
        is_quiet = bool(getattr(parsed_args, "quiet", False))
        is_verbose = bool(getattr(parsed_args, "verbose", False))

        if is_quiet:
            log_level = logging.ERROR
        elif is_verbose:
            log_level = logging.DEBUG
        else:
            log_level = logging.INFO

        configuration = Config.load()
        log_file_path = configuration.log_file or DEFAULT_LOG_FILE
        _ = setup_logger(log_file=log_file_path, console_level=log_level)

        command: str = parsed_args.command

        if command == "publish":
            return ArgumentParser._process_publish(parsed_args)

        if command == "inspect":
            return InspectArgs(
                command="inspect",
                source=parsed_args.source,
                verbose=is_verbose,
                quiet=is_quiet,
            )

        if command == "queue":
            return ArgumentParser._process_queue(parsed_args)

        if command == "simulate":
            return ArgumentParser._process_simulate(parsed_args)

        logger.error("Unsupported command: %s", command)
        sys.exit(2)

    @staticmethod
    def _add_source(parser: argparse.ArgumentParser) -> None:
        _ = parser.add_argument(
            "source",
            type=str,
            help="Site directory or http(s) base URL of a published site",
            metavar="SOURCE",
        )

    @staticmethod
    def _add_verbosity(parser: argparse.ArgumentParser) -> None:
        group = parser.add_mutually_exclusive_group()
        _ = group.add_argument(
            "--verbose",
            action="store_true",
            help="Show detailed processing information",
        )
        _ = group.add_argument(
            "--quiet",
            action="store_true",
            help="Suppress all output except errors",
        )

    @staticmethod
    def _add_session_options(parser: argparse.ArgumentParser) -> None:
        """Apply shared configuration for session-style subparsers."""

        ArgumentParser._add_source(parser)
        _ = parser.add_argument(
            "--variant",
            choices=[variant.value for variant in SiteVariant],
            default=SiteVariant.RADIO.value,
            help="Which page's behaviour to reproduce (default: radio)",
        )
        _ = parser.add_argument(
            "--shuffle",
            action=argparse.BooleanOptionalAction,
            default=None,
            help="Force shuffle on or off (default: stored preference, then page default)",
        )
        _ = parser.add_argument(
            "--artist",
            action="append",
            default=[],
            dest="artists",
            help="Enable only the given artist (repeatable; radio variant only)",
            metavar="NAME",
        )
        _ = parser.add_argument(
            "--seed",
            type=int,
            help="Seed the shuffle for reproducible output",
        )
        _ = parser.add_argument(
            "--state-file",
            type=str,
            help="JSON file that keeps player preferences between runs",
            metavar="PATH",
        )
        ArgumentParser._add_verbosity(parser)

    @staticmethod
    def _process_publish(parsed_args: argparse.Namespace) -> PublishArgs:
        music_root = Path(parsed_args.music_root)
        if not music_root.is_dir():
            logger.error("Music root does not exist or is not a directory: %s", music_root)
            sys.exit(1)

        if parsed_args.push and not parsed_args.commit:
            logger.info("--push implies --commit")

        return PublishArgs(
            command="publish",
            music_root=music_root.resolve(),
            site_dir=Path(parsed_args.site_dir).resolve() if parsed_args.site_dir else None,
            copy_audio=parsed_args.copy_audio,
            commit=parsed_args.commit or parsed_args.push,
            push=parsed_args.push,
            dry_run=parsed_args.dry_run,
            probe_backend=ProbeBackend.from_user_input(parsed_args.probe) if parsed_args.probe else None,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_queue(parsed_args: argparse.Namespace) -> QueueArgs:
        limit = parsed_args.limit
        if limit is not None and limit <= 0:
            logger.error("Limit must be a positive integer; received %s", limit)
            sys.exit(1)

        return QueueArgs(
            command="queue",
            source=parsed_args.source,
            variant=SiteVariant.from_user_input(parsed_args.variant),
            shuffle=parsed_args.shuffle,
            artists=tuple(parsed_args.artists),
            limit=limit,
            seed=parsed_args.seed,
            state_file=Path(parsed_args.state_file) if parsed_args.state_file else None,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )

    @staticmethod
    def _process_simulate(parsed_args: argparse.Namespace) -> SimulateArgs:
        steps = parsed_args.steps
        if steps <= 0:
            logger.error("Steps must be a positive integer; received %s", steps)
            sys.exit(1)

        return SimulateArgs(
            command="simulate",
            source=parsed_args.source,
            variant=SiteVariant.from_user_input(parsed_args.variant),
            steps=steps,
            shuffle=parsed_args.shuffle,
            repeat=RepeatMode.ONE if parsed_args.repeat_one else None,
            artists=tuple(parsed_args.artists),
            fail=tuple(parsed_args.fail),
            seed=parsed_args.seed,
            state_file=Path(parsed_args.state_file) if parsed_args.state_file else None,
            verbose=parsed_args.verbose,
            quiet=parsed_args.quiet,
        )
