"""Where: src/radiopress/platform/http/client.py
What: Minimal ``requests`` adapter for fetching published site resources.
Why: Decouple network concerns from catalog parsing and keep them mockable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import requests

from radiopress import __version__
from radiopress.platform.logging import logger

DEFAULT_TIMEOUT_SECONDS: float = 15.0


@dataclass(slots=True)
class HTTPResult:
    """An HTTP response reduced to what site loaders need."""

    status: int
    text: str | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.text is not None and 200 <= self.status < 300


class HTTPClient(Protocol):
    """Protocol for clients able to GET text bodies."""

    def get_text(self, url: str) -> HTTPResult:
        ...


class RequestsHTTPClient:
    """Perform single-attempt GET requests."""

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._session = session or requests.Session()
        self._timeout = timeout
        self._session.headers.setdefault("User-Agent", f"radiopress/{__version__}")

    def get_text(self, url: str) -> HTTPResult:
        try:
            response = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as exc:
            logger.debug("GET %s failed: %s", url, exc)
            return HTTPResult(status=0, text=None, error=str(exc))

        if not 200 <= response.status_code < 300:
            return HTTPResult(
                status=response.status_code,
                text=None,
                error=f"HTTP {response.status_code}",
            )
        # Site resources are UTF-8 whatever the Content-Type says.
        response.encoding = "utf-8"
        return HTTPResult(status=response.status_code, text=response.text)


__all__ = ["DEFAULT_TIMEOUT_SECONDS", "HTTPClient", "HTTPResult", "RequestsHTTPClient"]
