"""Shared path utilities for configuration, site, and log locations.

This module centralizes how the application discovers locations for
config and output files.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/radiopress.toml`` unless
  overridden by ``RADIOPRESS_CONFIG``.
- Site output: repository-root ``<repo_root>/site``.
- Logs: repository-root ``<repo_root>/logs/radiopress.log``.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Callable, Final


_ENV_CONFIG_PATH: Final[str] = "RADIOPRESS_CONFIG"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    mapping = env if env is not None else os.environ
    if env_var:
        candidate = mapping.get(env_var) or ""
        candidate = candidate.strip()
        if candidate:
            return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up from the working directory.

    Looks for markers like ``.git`` or ``pyproject.toml``. The site being
    published lives in the user's repository, so the search starts from the
    current working directory rather than from this package.

    Args:
        start: Starting directory. Defaults to the current working directory.

    Returns:
        Path: Detected repository root, or the starting directory when no
        marker is found.
    """
    here = (start or Path.cwd()).resolve()
    for p in [here, *here.parents]:
        if (p / ".git").exists() or (p / "pyproject.toml").exists():
            return p
    return here


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file.

    Portable layout: ``<repo_root>/config/radiopress.toml``.
    """
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=_ENV_CONFIG_PATH,
        default_factory=lambda: _detect_repo_root() / "config" / "radiopress.toml",
    )


def default_site_dir() -> Path:
    """Get the default directory the static site is written to."""

    return (_detect_repo_root() / "site").resolve()


def default_log_dir() -> Path:
    """Get the default directory for log files."""

    return (_detect_repo_root() / "logs").resolve()


def default_log_file() -> Path:
    """Get the default log file path."""

    return (default_log_dir() / "radiopress.log").resolve()


__all__ = [
    "default_config_path",
    "default_site_dir",
    "default_log_dir",
    "default_log_file",
    "resolve_overridable_path",
]
