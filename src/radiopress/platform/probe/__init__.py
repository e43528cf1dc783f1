"""External media probing tools."""

from .ffprobe import FFprobeMediaProbe

__all__ = ["FFprobeMediaProbe"]
