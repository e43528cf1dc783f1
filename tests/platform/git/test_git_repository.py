"""Tests for the git CLI wrapper."""

from __future__ import annotations

import subprocess
from datetime import datetime
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from radiopress.platform.git import GitCommandError, GitRepository, utc_now_iso

TARGET = "radiopress.platform.git.repository.subprocess.run"


def _completed(returncode: int = 0, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


def test_commit_date_uses_last_commit(mocker: MockerFixture, tmp_path: Path) -> None:
    run = mocker.patch(TARGET, return_value=_completed(stdout="2024-05-01T12:00:00+09:00\n"))

    assert GitRepository(tmp_path).commit_date() == "2024-05-01T12:00:00+09:00"
    assert run.call_args.args[0] == ["git", "log", "-1", "--format=%cI"]
    assert run.call_args.kwargs["cwd"] == tmp_path


def test_commit_date_falls_back_outside_git(mocker: MockerFixture, tmp_path: Path) -> None:
    _ = mocker.patch(TARGET, return_value=_completed(returncode=128, stderr="not a git repository"))

    stamp = GitRepository(tmp_path).commit_date()

    assert datetime.fromisoformat(stamp).utcoffset() is not None


def test_commit_date_without_git_binary(mocker: MockerFixture, tmp_path: Path) -> None:
    _ = mocker.patch(TARGET, side_effect=FileNotFoundError("git"))

    assert GitRepository(tmp_path).commit_date().endswith("+00:00")


def test_utc_now_iso_has_second_precision() -> None:
    parsed = datetime.fromisoformat(utc_now_iso())

    assert parsed.microsecond == 0


def test_is_repository(mocker: MockerFixture, tmp_path: Path) -> None:
    _ = mocker.patch(TARGET, return_value=_completed(stdout="true\n"))
    assert GitRepository(tmp_path).is_repository() is True

    _ = mocker.patch(TARGET, return_value=_completed(returncode=128))
    assert GitRepository(tmp_path).is_repository() is False


@pytest.mark.parametrize(("returncode", "expected"), [(0, False), (1, True)])
def test_has_staged_changes(
    mocker: MockerFixture, tmp_path: Path, returncode: int, expected: bool
) -> None:
    _ = mocker.patch(TARGET, return_value=_completed(returncode=returncode))

    assert GitRepository(tmp_path).has_staged_changes() is expected


def test_has_staged_changes_error(mocker: MockerFixture, tmp_path: Path) -> None:
    _ = mocker.patch(TARGET, return_value=_completed(returncode=129, stderr="usage"))

    with pytest.raises(GitCommandError) as excinfo:
        _ = GitRepository(tmp_path).has_staged_changes()

    assert excinfo.value.returncode == 129


def test_add_and_commit(mocker: MockerFixture, tmp_path: Path) -> None:
    run = mocker.patch(TARGET, return_value=_completed())
    repository = GitRepository(tmp_path, git_binary="/usr/bin/git")

    repository.add([tmp_path / "site"])
    repository.commit("Update site")

    assert run.call_args_list[0].args[0] == ["/usr/bin/git", "add", "--", str(tmp_path / "site")]
    assert run.call_args_list[1].args[0] == ["/usr/bin/git", "commit", "-m", "Update site"]


def test_failed_command_raises(mocker: MockerFixture, tmp_path: Path) -> None:
    _ = mocker.patch(TARGET, return_value=_completed(returncode=1, stderr="nothing to commit\n"))

    with pytest.raises(GitCommandError, match="nothing to commit") as excinfo:
        GitRepository(tmp_path).commit("msg")

    assert excinfo.value.command == ["git", "commit", "-m", "msg"]
    assert excinfo.value.stderr == "nothing to commit"


def test_missing_binary_raises(mocker: MockerFixture, tmp_path: Path) -> None:
    _ = mocker.patch(TARGET, side_effect=FileNotFoundError("git"))

    with pytest.raises(GitCommandError, match="not runnable"):
        GitRepository(tmp_path).add([tmp_path])


def test_push_tries_branches_in_order(mocker: MockerFixture, tmp_path: Path) -> None:
    run = mocker.patch(
        TARGET,
        side_effect=[_completed(returncode=1, stderr="no main"), _completed()],
    )

    assert GitRepository(tmp_path).push() == "master"
    assert [call.args[0][1:] for call in run.call_args_list] == [
        ["push", "origin", "main"],
        ["push", "origin", "master"],
    ]


def test_push_failure_returns_none(mocker: MockerFixture, tmp_path: Path) -> None:
    _ = mocker.patch(TARGET, return_value=_completed(returncode=1))

    assert GitRepository(tmp_path).push(branches=("gh-pages",)) is None
