"""Catalog domain: tracks, record format, and load errors."""

from .errors import CatalogError, CatalogUnavailable, EmptyCatalog, NoValidTracks
from .models import Catalog, Track
from .record_format import (
    EQUAL_SENTINEL,
    NO_IMAGE,
    escape_field,
    format_record,
    parse_record,
    parse_records,
    unescape_field,
)

__all__ = [
    "EQUAL_SENTINEL",
    "NO_IMAGE",
    "Catalog",
    "CatalogError",
    "CatalogUnavailable",
    "EmptyCatalog",
    "NoValidTracks",
    "Track",
    "escape_field",
    "format_record",
    "parse_record",
    "parse_records",
    "unescape_field",
]
