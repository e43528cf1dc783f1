"""Extraction adapters."""

from .mutagen_probe import MutagenMediaProbe

__all__ = ["MutagenMediaProbe"]
