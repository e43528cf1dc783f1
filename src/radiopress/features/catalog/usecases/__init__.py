"""Catalog use cases."""

from .loader import CatalogLoader
from .ports import ResourceFetcherPort, ResourceUnavailableError

__all__ = ["CatalogLoader", "ResourceFetcherPort", "ResourceUnavailableError"]
