"""Where: src/radiopress/platform/git/repository.py
What: Thin wrapper around the git CLI for dating, committing, and pushing a site.
Why: Keep subprocess handling out of the publish service.
"""

from __future__ import annotations

import subprocess
from collections.abc import Sequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Final

from radiopress.platform.logging import logger

PUSH_BRANCHES: Final[tuple[str, ...]] = ("main", "master")
DEFAULT_REMOTE: Final[str] = "origin"


class GitCommandError(RuntimeError):
    """A git command could not be run or exited with an error."""

    def __init__(self, command: Sequence[str], returncode: int | None, stderr: str = "") -> None:
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr.strip()
        detail = f"exit status {returncode}" if returncode is not None else "not runnable"
        message = f"{' '.join(self.command)} failed ({detail})"
        if self.stderr:
            message = f"{message}: {self.stderr}"
        super().__init__(message)


def utc_now_iso() -> str:
    """Current UTC time in ISO-8601 with second precision."""

    return datetime.now(UTC).replace(microsecond=0).isoformat()


class GitRepository:
    """Run git commands inside a working tree."""

    def __init__(self, root: Path, git_binary: str = "git") -> None:
        self._root = root
        self._git = git_binary

    @property
    def root(self) -> Path:
        return self._root

    def is_repository(self) -> bool:
        try:
            completed = self._run(["rev-parse", "--is-inside-work-tree"], check=False)
        except GitCommandError:
            return False
        return completed.returncode == 0 and completed.stdout.strip() == "true"

    def commit_date(self) -> str:
        """Return the last commit date (``%cI``), or UTC now outside git."""

        try:
            completed = self._run(["log", "-1", "--format=%cI"], check=False)
        except GitCommandError:
            return utc_now_iso()
        stamp = completed.stdout.strip()
        if completed.returncode != 0 or not stamp:
            return utc_now_iso()
        return stamp

    def add(self, paths: Sequence[Path]) -> None:
        self._run(["add", "--", *(str(path) for path in paths)])

    def has_staged_changes(self) -> bool:
        completed = self._run(["diff", "--cached", "--quiet"], check=False)
        # 0 means clean, 1 means differences; anything else is an error.
        if completed.returncode not in (0, 1):
            raise GitCommandError(
                [self._git, "diff", "--cached", "--quiet"], completed.returncode, completed.stderr
            )
        return completed.returncode == 1

    def commit(self, message: str) -> None:
        self._run(["commit", "-m", message])

    def push(self, remote: str = DEFAULT_REMOTE, branches: Sequence[str] = PUSH_BRANCHES) -> str | None:
        """Push to the first branch that accepts it.

        Returns:
            str | None: The branch pushed, or None when every attempt failed.
        """
        for branch in branches:
            completed = self._run(["push", remote, branch], check=False)
            if completed.returncode == 0:
                logger.info("Pushed to %s/%s", remote, branch)
                return branch
            logger.debug("Push to %s/%s failed: %s", remote, branch, completed.stderr.strip())
        logger.warning("Push failed for branches %s", ", ".join(branches))
        return None

    def _run(self, args: Sequence[str], *, check: bool = True) -> subprocess.CompletedProcess[str]:
        command = [self._git, *args]
        logger.debug("Running %s", " ".join(command))
        try:
            completed = subprocess.run(
                command,
                cwd=self._root,
                capture_output=True,
                text=True,
                check=False,
            )
        except (FileNotFoundError, NotADirectoryError) as exc:
            raise GitCommandError(command, None, str(exc)) from exc
        if check and completed.returncode != 0:
            raise GitCommandError(command, completed.returncode, completed.stderr)
        return completed


__all__ = ["DEFAULT_REMOTE", "GitCommandError", "GitRepository", "PUSH_BRANCHES", "utc_now_iso"]
