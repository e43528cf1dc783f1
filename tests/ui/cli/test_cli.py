"""Tests for CLI dispatch and exit codes."""

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from radiopress.application.services.publish_service import NoAudioFilesError
from radiopress.features.catalog import EmptyCatalog
from radiopress.features.playback import SiteVariant
from radiopress.platform.git import GitCommandError
from radiopress.ui.cli import CommandProcessor, main
from radiopress.ui.cli.args import InspectArgs, PublishArgs, QueueArgs, SimulateArgs

PROCESS_ARGS = "radiopress.ui.cli.cli.ArgumentParser.process_args"


def _publish_args(tmp_path: Path) -> PublishArgs:
    return PublishArgs(
        command="publish",
        music_root=tmp_path,
        site_dir=None,
        copy_audio=False,
        commit=False,
        push=False,
        dry_run=False,
        probe_backend=None,
        verbose=False,
        quiet=False,
    )


def _inspect_args() -> InspectArgs:
    return InspectArgs(command="inspect", source="site", verbose=False, quiet=False)


def _exit_code(mocker: MockerFixture, args: object, command: str, **command_kwargs: object) -> int | str | None:
    _ = mocker.patch(PROCESS_ARGS, return_value=args)
    _ = mocker.patch(f"radiopress.ui.cli.cli.{command}", **command_kwargs)
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([])
    return excinfo.value.code


def test_publish_success(tmp_path: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch(PROCESS_ARGS, return_value=_publish_args(tmp_path))
    command = mocker.patch("radiopress.ui.cli.cli.PublishCommand")
    command.return_value.execute.return_value.record_count = 3

    CommandProcessor.process_command([])

    command.assert_called_once()


def test_publish_without_tracks_fails(tmp_path: Path, mocker: MockerFixture) -> None:
    _ = mocker.patch(PROCESS_ARGS, return_value=_publish_args(tmp_path))
    command = mocker.patch("radiopress.ui.cli.cli.PublishCommand")
    command.return_value.execute.return_value.record_count = 0

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([])

    assert excinfo.value.code == 1


@pytest.mark.parametrize(
    "error",
    [
        NoAudioFilesError(Path("/music"), (".mp3",)),
        GitCommandError(["git", "commit"], 1, "boom"),
        ValueError("Unknown artist(s): Z"),
        RuntimeError("unexpected"),
    ],
)
def test_errors_exit_with_one(tmp_path: Path, mocker: MockerFixture, error: Exception) -> None:
    code = _exit_code(mocker, _publish_args(tmp_path), "PublishCommand", side_effect=error)
    assert code == 1


def test_catalog_errors_exit_with_one(mocker: MockerFixture) -> None:
    mock_logger = mocker.patch("radiopress.ui.cli.cli.logger")

    code = _exit_code(
        mocker, _inspect_args(), "InspectCommand", side_effect=EmptyCatalog("site reports 0 tracks")
    )

    assert code == 1
    assert mock_logger.error.call_args.args[1] == "No music files found."


def test_keyboard_interrupt_exits_130(mocker: MockerFixture) -> None:
    code = _exit_code(mocker, _inspect_args(), "InspectCommand", side_effect=KeyboardInterrupt)
    assert code == 130


def test_dispatches_queue_and_simulate(mocker: MockerFixture) -> None:
    queue_args = QueueArgs(
        command="queue",
        source="site",
        variant=SiteVariant.RADIO,
        shuffle=None,
        artists=(),
        limit=None,
        seed=None,
        state_file=None,
        verbose=False,
        quiet=False,
    )
    simulate_args = SimulateArgs(
        command="simulate",
        source="site",
        variant=SiteVariant.PLAYER,
        steps=2,
        shuffle=None,
        repeat=None,
        artists=(),
        fail=(),
        seed=None,
        state_file=None,
        verbose=False,
        quiet=False,
    )
    _ = mocker.patch(PROCESS_ARGS, side_effect=[queue_args, simulate_args])
    queue = mocker.patch("radiopress.ui.cli.cli.QueueCommand")
    simulate = mocker.patch("radiopress.ui.cli.cli.SimulateCommand")

    CommandProcessor.process_command([])
    CommandProcessor.process_command([])

    queue.assert_called_once_with(queue_args)
    simulate.assert_called_once_with(simulate_args)


def test_main_returns_zero(mocker: MockerFixture) -> None:
    process = mocker.patch("radiopress.ui.cli.cli.CommandProcessor.process_command")

    assert main() == 0
    process.assert_called_once_with()


def test_inspect_end_to_end(
    tmp_path: Path, mocker: MockerFixture, capsys: pytest.CaptureFixture[str], site_writer
) -> None:
    _ = mocker.patch("radiopress.ui.cli.args.parser.setup_logger")
    site = site_writer(tmp_path / "site", ["(a.mp3=Alpha=Band=none)", "(b.mp3=Beta=Band=none)"])

    CommandProcessor.process_command(["inspect", str(site)])

    out = capsys.readouterr().out
    assert "Alpha" in out
    assert "2 tracks by 1 artist(s)" in out
