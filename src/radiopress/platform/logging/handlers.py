"""Rich console handler for publish and playback events.

Where: platform/logging/handlers.py
What: Render structured ``publish_event`` log records with icons and compact paths.
Why: Keep per-track progress readable while plain messages fall through to Rich.
"""

from __future__ import annotations

import logging
from pathlib import PurePath, PurePosixPath, PureWindowsPath
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class PublishRichHandler(RichHandler):
    """Rich handler that styles publish events and shortens file paths."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "publish.scan.start": ("🔍", "cyan"),
        "publish.scan.no_files": ("ℹ️", "yellow"),
        "publish.track.success": ("🎵", "green"),
        "publish.track.skip": ("↪️", "yellow"),
        "publish.site.written": ("📄", "magenta"),
        "publish.git.commit": ("📦", "blue"),
        "publish.complete": ("✅", "green"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "publish.scan.start": "Scanning ",
        "publish.scan.no_files": "No audio files under ",
        "publish.track.success": "Extracted ",
        "publish.track.skip": "Skipped ",
        "publish.site.written": "Wrote ",
        "publish.git.commit": "Committed ",
        "publish.complete": "Published ",
    }
    _PATH_SEGMENT_LIMIT: ClassVar[int] = 3

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with the house defaults.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    def _format_path(self, path: str, base: str | None = None) -> Text:
        """Render ``path`` relative to ``base`` when possible, keeping the last segments."""

        pure_path = self._to_pure_path(path)
        display_path: PurePath = pure_path
        if base:
            base_path = self._to_pure_path(base)
            try:
                relative = pure_path.relative_to(base_path)
            except ValueError:
                relative = None
            if relative is not None and str(relative) not in {"", "."}:
                display_path = relative

        separator = "\\" if isinstance(display_path, PureWindowsPath) else "/"
        parts = [part for part in display_path.parts if part and part != display_path.anchor]
        truncated = len(parts) > self._PATH_SEGMENT_LIMIT
        if truncated:
            parts = parts[-self._PATH_SEGMENT_LIMIT :]

        text = Text()
        if truncated:
            _ = text.append("…" + separator, style=Style(color="magenta"))
        elif display_path.anchor:
            _ = text.append(display_path.anchor, style=Style(color="magenta"))
        for index, part in enumerate(parts):
            if index:
                _ = text.append(separator, style=Style(color="magenta"))
            _ = text.append(part, style=Style(color="white"))
        if not parts:
            _ = text.append(".", style=Style(color="white"))
        return text

    @staticmethod
    def _to_pure_path(raw_path: str) -> PurePath:
        """Return a platform-aware ``PurePath`` for the given raw string."""

        if "\\" in raw_path:
            return PureWindowsPath(raw_path)
        return PurePosixPath(raw_path)

    def _render_publish_message(self, record: logging.LogRecord) -> Text | None:
        """Render structured publish events with dedicated styling."""

        event = getattr(record, "publish_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))
        body = Text(style=Style(color=color))

        sequence = getattr(record, "sequence", None)
        total_files = getattr(record, "total_files", None)
        if event.startswith("publish.track") and isinstance(sequence, int) and sequence > 0:
            if isinstance(total_files, int) and total_files > 0:
                _ = body.append(f"[{sequence}/{total_files}] ")
            else:
                _ = body.append(f"[{sequence}] ")

        prefix = self._EVENT_PREFIXES.get(event)
        if prefix:
            _ = body.append(prefix)

        source_path = getattr(record, "source_path", None)
        if source_path:
            _ = body.append_text(
                self._format_path(str(source_path), base=getattr(record, "base_path", None))
            )

        details: list[str] = []
        if event == "publish.scan.start" and isinstance(total_files, int):
            details.append(f"files={total_files}")
        elif event == "publish.track.success":
            label = " - ".join(
                str(part)
                for part in (getattr(record, "artist", None), getattr(record, "title", None))
                if part
            )
            if label:
                details.append(label)
        elif event == "publish.track.skip":
            reason = getattr(record, "error_message", None)
            if reason:
                details.append(str(reason))
        elif event in {"publish.git.commit", "publish.complete"}:
            tracks = getattr(record, "tracks", None)
            if isinstance(tracks, int):
                details.append(f"tracks={tracks}")
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for publish events."""

        publish_text = self._render_publish_message(record)
        if publish_text is not None:
            return publish_text
        return super().render_message(record, message)


__all__ = ["PublishRichHandler"]
