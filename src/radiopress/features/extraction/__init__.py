# Where: radiopress.features.extraction.__init__
# What: Expose scanning, probing ports, and the metadata extractor.
# Why: Provide a cohesive import surface for the publish service.

from .domain import ExtractedTrack, ProbeResult
from .usecases import (
    MediaProbePort,
    MetadataExtractor,
    ProbeError,
    ProbeUnavailableError,
    UnencodableFilenameError,
    scan_audio_files,
)

__all__ = [
    "ExtractedTrack",
    "MediaProbePort",
    "MetadataExtractor",
    "ProbeError",
    "ProbeResult",
    "ProbeUnavailableError",
    "UnencodableFilenameError",
    "scan_audio_files",
]
