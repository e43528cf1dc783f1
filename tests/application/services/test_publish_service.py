"""Tests for the publish application service.

The probe and git are replaced with doubles; scanning, record writing, and
page rendering run for real against a temporary directory.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from radiopress.application.services.publish_service import (
    NoAudioFilesError,
    PublishRequest,
    PublishSiteService,
    build_probe,
    commit_message,
)
from radiopress.config.config import Config
from radiopress.config.settings import ProbeBackend, SiteSettings
from radiopress.features.catalog import CatalogLoader
from radiopress.features.catalog.adapters import LocalSiteFetcher
from radiopress.features.extraction import ProbeError, ProbeResult, ProbeUnavailableError
from radiopress.features.extraction.adapters import MutagenMediaProbe
from radiopress.platform.git import GitCommandError
from radiopress.platform.probe import FFprobeMediaProbe

COMMIT_DATE = "2024-06-01T10:00:00+00:00"


class TagProbe:
    """Probe double answering from a name-keyed table."""

    def __init__(self, results: dict[str, ProbeResult | Exception] | None = None) -> None:
        self.results = results or {}

    def probe(self, path: Path) -> ProbeResult:
        outcome = self.results.get(path.name, ProbeResult())
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def music_root(tmp_path: Path) -> Path:
    root = tmp_path / "music"
    for relative in ("Band/one.mp3", "Band/two.jlres3", "Solo/three.mp3", "notes.txt"):
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        _ = path.write_bytes(b"audio:" + relative.encode())
    return root


@pytest.fixture
def settings(music_root: Path) -> SiteSettings:
    return SiteSettings.from_config(
        Config(repository="owner/music"), site_dir=music_root / "site"
    )


@pytest.fixture
def git(mocker: MockerFixture):
    repository = mocker.Mock()
    repository.root = Path("/music")
    repository.commit_date.return_value = COMMIT_DATE
    repository.is_repository.return_value = True
    repository.has_staged_changes.return_value = True
    repository.push.return_value = "main"
    return repository


def _service(settings: SiteSettings, probe: TagProbe, git) -> PublishSiteService:
    return PublishSiteService(
        settings,
        probe_factory=lambda _settings, _backend: probe,
        git_factory=lambda _root: git,
    )


def test_publish_writes_catalog_and_pages(settings: SiteSettings, music_root: Path, git) -> None:
    probe = TagProbe({"one.mp3": ProbeResult(title="One", artist="Band")})

    report = _service(settings, probe, git).publish(PublishRequest(music_root))

    site = settings.site_dir
    assert report.total_files == 3
    assert report.record_count == 3
    assert report.date == COMMIT_DATE
    assert (site / "filecount.txt").read_text(encoding="utf-8") == "3\n"
    assert (site / "date.txt").read_text(encoding="utf-8") == f"{COMMIT_DATE}\n"
    assert (site / "filedata.txt").read_text(encoding="utf-8").splitlines() == [
        "(one.mp3=One=Band=none)",
        "(two.jlres3=two=Unknown Artist=none)",
        "(three.mp3=three=Unknown Artist=none)",
    ]
    assert "window.RADIOPRESS_CONFIG" in (site / "index.html").read_text(encoding="utf-8")
    assert (site / "player.html").is_file()
    assert {path.name for path in report.written} == {
        "filecount.txt",
        "filedata.txt",
        "date.txt",
        "index.html",
        "player.html",
    }
    git.commit.assert_not_called()


def test_published_site_loads_back(settings: SiteSettings, music_root: Path, git) -> None:
    probe = TagProbe({"three.mp3": ProbeResult(title="a=b", artist="Solo")})

    _ = _service(settings, probe, git).publish(PublishRequest(music_root))
    catalog = CatalogLoader(LocalSiteFetcher(settings.site_dir)).load()

    assert len(catalog) == 3
    assert catalog[2].title == "a=b"
    assert catalog.artists() == ["Unknown Artist", "Solo"]


def test_probe_failures_are_skipped(settings: SiteSettings, music_root: Path, git) -> None:
    probe = TagProbe({"two.jlres3": ProbeError("corrupt header")})

    report = _service(settings, probe, git).publish(PublishRequest(music_root))

    assert report.record_count == 2
    assert [failure.source_path.name for failure in report.failures] == ["two.jlres3"]
    assert report.failures[0].reason == "corrupt header"
    assert (settings.site_dir / "filecount.txt").read_text(encoding="utf-8") == "2\n"


def test_unavailable_probe_aborts(settings: SiteSettings, music_root: Path, git) -> None:
    probe = TagProbe({"one.mp3": ProbeUnavailableError("ffprobe not found")})

    with pytest.raises(ProbeUnavailableError):
        _ = _service(settings, probe, git).publish(PublishRequest(music_root))

    assert not (settings.site_dir / "filedata.txt").exists()


def test_dry_run_writes_nothing(
    settings: SiteSettings, music_root: Path, mocker: MockerFixture
) -> None:
    git_factory = mocker.Mock()
    service = PublishSiteService(
        settings, probe_factory=lambda _s, _b: TagProbe(), git_factory=git_factory
    )

    report = service.publish(PublishRequest(music_root, dry_run=True))

    assert report.dry_run
    assert report.record_count == 3
    assert report.written == []
    assert not settings.site_dir.exists()
    git_factory.assert_not_called()


def test_empty_music_root(settings: SiteSettings, tmp_path: Path, git) -> None:
    empty = tmp_path / "empty"
    empty.mkdir()

    with pytest.raises(NoAudioFilesError) as excinfo:
        _ = _service(settings, TagProbe(), git).publish(PublishRequest(empty))

    assert excinfo.value.extensions == (".mp3", ".jlres3")


def test_progress_callback(settings: SiteSettings, music_root: Path, git) -> None:
    calls: list[tuple[int, int, str]] = []

    _ = _service(settings, TagProbe(), git).publish(
        PublishRequest(music_root, dry_run=True),
        progress_callback=lambda done, total, path: calls.append((done, total, path.name)),
    )

    assert calls == [(1, 3, "one.mp3"), (2, 3, "two.jlres3"), (3, 3, "three.mp3")]


def test_copy_audio_switches_to_local_urls(
    settings: SiteSettings, music_root: Path, git
) -> None:
    report = _service(settings, TagProbe(), git).publish(
        PublishRequest(music_root, copy_audio=True)
    )

    site = settings.site_dir
    assert (site / "two.jlres3.mp3").read_bytes() == b"audio:Band/two.jlres3"
    assert len(report.copied) == 3
    assert '"audioUrlTemplate": "./{filename}.mp3"' in (site / "player.html").read_text(
        encoding="utf-8"
    )

    again = _service(settings, TagProbe(), git).publish(PublishRequest(music_root, copy_audio=True))
    assert again.total_files == 3


def test_commit_and_push(settings: SiteSettings, music_root: Path, git) -> None:
    report = _service(settings, TagProbe(), git).publish(PublishRequest(music_root, push=True))

    git.add.assert_called_once_with([settings.site_dir])
    git.commit.assert_called_once_with(commit_message(3, COMMIT_DATE))
    assert report.committed
    assert report.pushed_branch == "main"


def test_commit_without_changes(settings: SiteSettings, music_root: Path, git) -> None:
    git.has_staged_changes.return_value = False

    report = _service(settings, TagProbe(), git).publish(PublishRequest(music_root, commit=True))

    git.commit.assert_not_called()
    git.push.assert_not_called()
    assert not report.committed


def test_commit_outside_repository(settings: SiteSettings, music_root: Path, git) -> None:
    git.is_repository.return_value = False

    with pytest.raises(GitCommandError):
        _ = _service(settings, TagProbe(), git).publish(PublishRequest(music_root, commit=True))

    assert (settings.site_dir / "filedata.txt").exists()


def test_commit_message() -> None:
    assert commit_message(12, "2024-01-02") == (
        "Update radiopress site\n\n- Updated file count: 12 files\n- Updated on: 2024-01-02"
    )


def test_build_probe(settings: SiteSettings) -> None:
    assert isinstance(build_probe(settings), FFprobeMediaProbe)
    assert isinstance(build_probe(settings, ProbeBackend.MUTAGEN), MutagenMediaProbe)
