"""Summary: Find publishable audio files under a repository root.
Why: Give counting, extraction, and copying one deterministic file list.
"""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path


def scan_audio_files(
    root: Path,
    extensions: Iterable[str],
    exclude_dirs: Iterable[Path] = (),
) -> list[Path]:
    """Return audio files below ``root`` sorted by relative path.

    Hidden directories (``.git`` and friends) and ``exclude_dirs`` are not
    descended into. Extensions are matched case-insensitively.

    Args:
        root: Directory to scan.
        extensions: Accepted suffixes including the leading dot.
        exclude_dirs: Directories to skip, typically the site output.

    Returns:
        list[Path]: Matching files.
    """
    wanted = {ext.lower() for ext in extensions}
    excluded = {path.resolve() for path in exclude_dirs}
    root = root.resolve()

    found: list[Path] = []
    for current, dirnames, filenames in os.walk(root):
        current_path = Path(current)
        dirnames[:] = sorted(
            name
            for name in dirnames
            if not name.startswith(".") and (current_path / name).resolve() not in excluded
        )
        for name in filenames:
            candidate = current_path / name
            if candidate.suffix.lower() in wanted and candidate.is_file():
                found.append(candidate)

    return sorted(found, key=lambda path: path.relative_to(root).as_posix())


__all__ = ["scan_audio_files"]
