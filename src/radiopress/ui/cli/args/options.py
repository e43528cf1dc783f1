"""Command line argument options."""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal, final

from radiopress.config.settings import ProbeBackend
from radiopress.features.playback.domain.state import RepeatMode
from radiopress.features.playback.domain.variant import SiteVariant


@final
@dataclass(slots=True)
class PublishArgs:
    """Command line arguments for the ``publish`` subcommand."""

    command: Literal["publish"]
    music_root: Path
    site_dir: Path | None
    copy_audio: bool
    commit: bool
    push: bool
    dry_run: bool
    probe_backend: ProbeBackend | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class InspectArgs:
    """Command line arguments for the ``inspect`` subcommand."""

    command: Literal["inspect"]
    source: str
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class QueueArgs:
    """Command line arguments for the ``queue`` subcommand."""

    command: Literal["queue"]
    source: str
    variant: SiteVariant
    shuffle: bool | None
    artists: tuple[str, ...]
    limit: int | None
    seed: int | None
    state_file: Path | None
    verbose: bool
    quiet: bool


@final
@dataclass(slots=True)
class SimulateArgs:
    """Command line arguments for the ``simulate`` subcommand."""

    command: Literal["simulate"]
    source: str
    variant: SiteVariant
    steps: int
    shuffle: bool | None
    repeat: RepeatMode | None
    artists: tuple[str, ...]
    fail: tuple[str, ...]
    seed: int | None
    state_file: Path | None
    verbose: bool
    quiet: bool


CLIArgs = PublishArgs | InspectArgs | QueueArgs | SimulateArgs

__all__ = ["CLIArgs", "InspectArgs", "PublishArgs", "QueueArgs", "SimulateArgs"]
