# Where: radiopress.features.catalog.__init__
# What: Expose catalog models, record codec, and the loader.
# Why: Provide a cohesive import surface for the CLI and the publish service.

from .domain import (
    Catalog,
    CatalogError,
    CatalogUnavailable,
    EmptyCatalog,
    NoValidTracks,
    Track,
    format_record,
    parse_records,
)
from .usecases import CatalogLoader, ResourceFetcherPort, ResourceUnavailableError

__all__ = [
    "Catalog",
    "CatalogError",
    "CatalogLoader",
    "CatalogUnavailable",
    "EmptyCatalog",
    "NoValidTracks",
    "ResourceFetcherPort",
    "ResourceUnavailableError",
    "Track",
    "format_record",
    "parse_records",
]
