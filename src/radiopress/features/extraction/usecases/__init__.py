"""Extraction use cases."""

from .extractor import MetadataExtractor, UnencodableFilenameError, validate_record_filename
from .ports import MediaProbePort, ProbeError, ProbeUnavailableError
from .scanner import scan_audio_files

__all__ = [
    "MediaProbePort",
    "MetadataExtractor",
    "ProbeError",
    "ProbeUnavailableError",
    "UnencodableFilenameError",
    "scan_audio_files",
    "validate_record_filename",
]
