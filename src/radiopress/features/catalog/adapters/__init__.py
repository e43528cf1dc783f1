"""Catalog adapters."""

from .site_fetchers import HttpSiteFetcher, LocalSiteFetcher, fetcher_for

__all__ = ["HttpSiteFetcher", "LocalSiteFetcher", "fetcher_for"]
