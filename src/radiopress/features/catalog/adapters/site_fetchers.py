"""Catalog resource fetchers.

Where: src/radiopress/features/catalog/adapters/site_fetchers.py
What: Read site resources from a local directory or a published base URL.
Why: The same loader serves ``inspect`` on a build output and on a live site.
"""

from __future__ import annotations

from pathlib import Path
from urllib.parse import urljoin

from radiopress.platform.http import HTTPClient, RequestsHTTPClient

from ..usecases.ports import ResourceFetcherPort, ResourceUnavailableError


class LocalSiteFetcher:
    """Fetch resources from files inside a site directory."""

    def __init__(self, site_dir: Path) -> None:
        self._site_dir = site_dir

    def fetch_text(self, name: str) -> str:
        path = self._site_dir / name
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ResourceUnavailableError(name, exc.strerror or str(exc)) from exc

    def describe(self) -> str:
        return str(self._site_dir)


class HttpSiteFetcher:
    """Fetch resources relative to a published site URL."""

    def __init__(self, base_url: str, client: HTTPClient | None = None) -> None:
        self._base_url = base_url if base_url.endswith("/") else f"{base_url}/"
        self._client = client or RequestsHTTPClient()

    def fetch_text(self, name: str) -> str:
        result = self._client.get_text(urljoin(self._base_url, name))
        if not result.ok or result.text is None:
            raise ResourceUnavailableError(name, result.error or f"HTTP {result.status}")
        return result.text

    def describe(self) -> str:
        return self._base_url


def fetcher_for(source: str) -> ResourceFetcherPort:
    """Pick a fetcher for a CLI ``SOURCE`` argument (URL or directory)."""

    if source.startswith(("http://", "https://")):
        return HttpSiteFetcher(source)
    return LocalSiteFetcher(Path(source).expanduser())


__all__ = ["HttpSiteFetcher", "LocalSiteFetcher", "fetcher_for"]
