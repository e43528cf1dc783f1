"""Where: src/radiopress/config/file_ops.py
What: Write config and site output files.
Why: A page fetching ``filedata.txt`` mid-publish must never see half a file.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

TEMP_SUFFIX = ".partial"


def create_if_missing(path: Path, render: Callable[[], str]) -> bool:
    """Write ``render()`` to ``path`` unless the file already exists.

    Returns:
        bool: ``True`` when this call created the file.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        with path.open("x", encoding="utf-8", newline="\n") as handle:
            _ = handle.write(render())
    except FileExistsError:
        return False
    return True


def write_text_file(path: Path, content: str) -> None:
    """Replace ``path`` with UTF-8 ``content`` in one step.

    The text goes to a sibling temporary file first and is renamed over the
    target, so readers see either the old or the new file. Line endings are
    always LF, matching what the page script and the loaders split on.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    partial = path.with_name(f".{path.name}{TEMP_SUFFIX}")
    try:
        with partial.open("w", encoding="utf-8", newline="\n") as handle:
            _ = handle.write(content)
        os.replace(partial, path)
    except OSError:
        partial.unlink(missing_ok=True)
        raise


__all__ = ["TEMP_SUFFIX", "create_if_missing", "write_text_file"]
