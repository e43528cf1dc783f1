"""Shared pytest fixtures for the radiopress test suite."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from radiopress.features.catalog import Catalog, Track


@pytest.fixture(autouse=True)
def isolated_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point repository-root detection at a temporary directory and reset the config singleton."""

    repo_root = tmp_path / "repo"
    repo_root.mkdir()
    _ = (repo_root / "pyproject.toml").write_text("[project]\nname='tmp'\n", encoding="utf-8")

    import radiopress.config.config as config_module
    import radiopress.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return repo_root

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    monkeypatch.delenv("RADIOPRESS_CONFIG", raising=False)

    original_instance = config_module.Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = config_module.Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    config_module.Config._instance = None  # pyright: ignore[reportPrivateUsage]
    config_module.Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    try:
        yield repo_root
    finally:
        config_module.Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        config_module.Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]


@pytest.fixture
def three_artist_catalog() -> Catalog:
    """Catalog with two tracks by A, one by B, and one by C."""

    return Catalog.of(
        [
            Track("a1.mp3", "First", "A"),
            Track("b1.mp3", "Second", "B"),
            Track("a2.mp3", "Third", "A"),
            Track("c1.mp3", "Fourth", "C"),
        ]
    )


def write_site(site_dir: Path, records: list[str], count: int | str | None = None) -> Path:
    """Write ``filecount.txt`` and ``filedata.txt`` into ``site_dir``."""

    site_dir.mkdir(parents=True, exist_ok=True)
    declared = len(records) if count is None else count
    _ = (site_dir / "filecount.txt").write_text(f"{declared}\n", encoding="utf-8")
    _ = (site_dir / "filedata.txt").write_text(
        "".join(f"{line}\n" for line in records), encoding="utf-8"
    )
    return site_dir


@pytest.fixture
def site_writer():
    """Expose :func:`write_site` to tests."""

    return write_site
