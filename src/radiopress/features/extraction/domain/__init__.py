"""Extraction domain values."""

from .probe_result import DEFAULT_COVER_MIME, ExtractedTrack, ProbeResult, sniff_image_mime

__all__ = ["DEFAULT_COVER_MIME", "ExtractedTrack", "ProbeResult", "sniff_image_mime"]
