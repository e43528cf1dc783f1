"""Application service for publishing a static music site.

This layer wires scanning, probing, rendering, and git together so the CLI
only translates arguments and renders the resulting report.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import final

from radiopress.config.file_ops import write_text_file
from radiopress.config.settings import (
    DATE_NAME,
    FILECOUNT_NAME,
    FILEDATA_NAME,
    LOCAL_AUDIO_URL_TEMPLATE,
    ProbeBackend,
    SiteSettings,
)
from radiopress.features.extraction import (
    ExtractedTrack,
    MediaProbePort,
    MetadataExtractor,
    ProbeError,
    ProbeUnavailableError,
    scan_audio_files,
)
from radiopress.features.extraction.adapters import MutagenMediaProbe
from radiopress.features.playback.domain.variant import SiteVariant
from radiopress.features.site import PageOptions, SiteRenderer, page_name
from radiopress.platform.git import GitCommandError, GitRepository
from radiopress.platform.logging import logger
from radiopress.platform.probe import FFprobeMediaProbe

ProgressCallback = Callable[[int, int, Path], None]


class NoAudioFilesError(RuntimeError):
    """The music root holds no files with a publishable extension."""

    def __init__(self, root: Path, extensions: tuple[str, ...]) -> None:
        self.root = root
        self.extensions = extensions
        super().__init__(f"No audio files ({', '.join(extensions)}) found under {root}")


@dataclass(frozen=True)
class PublishRequest:
    """Input parameters for a publish run.

    Attributes:
        music_root: Directory scanned for audio files; also the git working tree.
        site_dir: Output directory; defaults to the configured site directory.
        copy_audio: Copy audio next to the pages as ``<filename>.mp3``.
        commit: Stage the site directory and commit it.
        push: Push after committing.
        dry_run: Scan and extract only; nothing is written.
        probe_backend: Override the configured probe.
    """

    music_root: Path
    site_dir: Path | None = None
    copy_audio: bool = False
    commit: bool = False
    push: bool = False
    dry_run: bool = False
    probe_backend: ProbeBackend | None = None


@dataclass(frozen=True, slots=True)
class TrackFailure:
    """A file that was skipped during extraction."""

    source_path: Path
    reason: str


@dataclass(slots=True)
class PublishReport:
    """Outcome of a publish run."""

    music_root: Path
    site_dir: Path
    total_files: int
    dry_run: bool = False
    tracks: list[ExtractedTrack] = field(default_factory=list)
    failures: list[TrackFailure] = field(default_factory=list)
    written: list[Path] = field(default_factory=list)
    copied: list[Path] = field(default_factory=list)
    date: str | None = None
    committed: bool = False
    pushed_branch: str | None = None

    @property
    def record_count(self) -> int:
        return len(self.tracks)


def build_probe(settings: SiteSettings, backend: ProbeBackend | None = None) -> MediaProbePort:
    """Construct the probe for ``backend`` (or the configured one)."""

    selected = backend or settings.probe_backend
    if selected is ProbeBackend.MUTAGEN:
        return MutagenMediaProbe()
    return FFprobeMediaProbe(settings.ffprobe_binary, settings.ffmpeg_binary)


def commit_message(track_count: int, date: str) -> str:
    return (
        "Update radiopress site\n\n"
        f"- Updated file count: {track_count} files\n"
        f"- Updated on: {date}"
    )


@final
class PublishSiteService:
    """Application service that orchestrates a publish run.

    Infrastructure is created through factories so tests can inject doubles.
    """

    def __init__(
        self,
        settings: SiteSettings,
        *,
        probe_factory: Callable[[SiteSettings, ProbeBackend | None], MediaProbePort] | None = None,
        git_factory: Callable[[Path], GitRepository] | None = None,
        renderer_factory: Callable[[], SiteRenderer] | None = None,
    ) -> None:
        self._settings = settings
        self._probe_factory = probe_factory or build_probe
        self._git_factory: Callable[[Path], GitRepository] = git_factory or GitRepository
        self._renderer_factory: Callable[[], SiteRenderer] = renderer_factory or SiteRenderer

    def publish(
        self,
        request: PublishRequest,
        progress_callback: ProgressCallback | None = None,
    ) -> PublishReport:
        """Run the publish pipeline.

        Args:
            request: Publish parameters.
            progress_callback: Receives (processed_count, total_count, current_file).

        Returns:
            PublishReport: Extracted tracks, skipped files, and written paths.

        Raises:
            NoAudioFilesError: The scan found nothing to publish.
            ProbeUnavailableError: The selected probe cannot run at all.
            GitCommandError: Committing was requested and git failed.
        """
        music_root = request.music_root.expanduser().resolve()
        site_dir = (request.site_dir or self._settings.site_dir).expanduser().resolve()
        extensions = self._settings.audio_extensions

        files = scan_audio_files(music_root, extensions, exclude_dirs=(site_dir,))
        logger.info(
            "Scanning %s",
            music_root,
            extra={
                "publish_event": "publish.scan.start",
                "source_path": str(music_root),
                "total_files": len(files),
            },
        )
        if not files:
            logger.warning(
                "No audio files under %s",
                music_root,
                extra={"publish_event": "publish.scan.no_files", "source_path": str(music_root)},
            )
            raise NoAudioFilesError(music_root, extensions)

        report = PublishReport(
            music_root=music_root,
            site_dir=site_dir,
            total_files=len(files),
            dry_run=request.dry_run,
        )
        self._extract_all(files, music_root, request, report, progress_callback)

        if request.dry_run:
            logger.info(
                "Dry run: %d of %d files would be published",
                report.record_count,
                report.total_files,
            )
            return report

        git = self._git_factory(music_root)
        report.date = git.commit_date()
        self._write_site(site_dir, report, request)

        if request.commit or request.push:
            self._commit_and_push(git, site_dir, report, request)

        logger.info(
            "Published %s",
            site_dir,
            extra={
                "publish_event": "publish.complete",
                "source_path": str(site_dir),
                "tracks": report.record_count,
            },
        )
        return report

    def _extract_all(
        self,
        files: list[Path],
        music_root: Path,
        request: PublishRequest,
        report: PublishReport,
        progress_callback: ProgressCallback | None,
    ) -> None:
        extractor = MetadataExtractor(
            self._probe_factory(self._settings, request.probe_backend),
            self._settings.unknown_artist,
        )
        total = len(files)
        for sequence, path in enumerate(files, start=1):
            event_extra = {
                "sequence": sequence,
                "total_files": total,
                "source_path": str(path),
                "base_path": str(music_root),
            }
            try:
                track = extractor.extract(path)
            except ProbeUnavailableError:
                raise
            except ProbeError as exc:
                report.failures.append(TrackFailure(path, str(exc)))
                logger.warning(
                    "Skipping %s: %s",
                    path,
                    exc,
                    extra={
                        **event_extra,
                        "publish_event": "publish.track.skip",
                        "error_message": str(exc),
                    },
                )
            else:
                report.tracks.append(track)
                logger.info(
                    "Extracted %s",
                    path,
                    extra={
                        **event_extra,
                        "publish_event": "publish.track.success",
                        "artist": track.artist,
                        "title": track.title,
                    },
                )
            if progress_callback is not None:
                progress_callback(sequence, total, path)

    def _write_site(self, site_dir: Path, report: PublishReport, request: PublishRequest) -> None:
        records = [track.to_record() for track in report.tracks]
        self._write(site_dir / FILECOUNT_NAME, f"{len(records)}\n", report)
        self._write(site_dir / FILEDATA_NAME, "".join(f"{line}\n" for line in records), report)
        self._write(site_dir / DATE_NAME, f"{report.date}\n", report)

        audio_url_template = None
        if request.copy_audio:
            audio_url_template = LOCAL_AUDIO_URL_TEMPLATE
            self._copy_audio(site_dir, report)

        renderer = self._renderer_factory()
        for variant in SiteVariant:
            options = PageOptions.for_variant(
                variant, self._settings, audio_url_template=audio_url_template
            )
            self._write(site_dir / page_name(variant), renderer.render(variant, options), report)

    def _copy_audio(self, site_dir: Path, report: PublishReport) -> None:
        seen: dict[str, Path] = {}
        for track in report.tracks:
            target = site_dir / f"{track.filename}.mp3"
            previous = seen.get(track.filename)
            if previous is not None:
                logger.warning(
                    "%s overwrites %s in the site directory (same file name)",
                    track.source_path,
                    previous,
                )
            seen[track.filename] = track.source_path
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = shutil.copy2(track.source_path, target)
            report.copied.append(target)
        logger.debug("Copied %d audio files into %s", len(report.copied), site_dir)

    @staticmethod
    def _write(path: Path, content: str, report: PublishReport) -> None:
        write_text_file(path, content)
        report.written.append(path)
        logger.info(
            "Wrote %s",
            path,
            extra={"publish_event": "publish.site.written", "source_path": str(path)},
        )

    def _commit_and_push(
        self,
        git: GitRepository,
        site_dir: Path,
        report: PublishReport,
        request: PublishRequest,
    ) -> None:
        if not git.is_repository():
            raise GitCommandError(["git", "rev-parse"], None, f"{git.root} is not a git repository")

        git.add([site_dir])
        if git.has_staged_changes():
            git.commit(commit_message(report.record_count, report.date or ""))
            report.committed = True
            logger.info(
                "Committed %s",
                site_dir,
                extra={
                    "publish_event": "publish.git.commit",
                    "source_path": str(site_dir),
                    "tracks": report.record_count,
                },
            )
        else:
            logger.info("No site changes to commit")

        if request.push:
            report.pushed_branch = git.push()


__all__ = [
    "NoAudioFilesError",
    "PublishReport",
    "PublishRequest",
    "PublishSiteService",
    "TrackFailure",
    "build_probe",
    "commit_message",
]
