"""HTTP client adapters."""

from .client import DEFAULT_TIMEOUT_SECONDS, HTTPClient, HTTPResult, RequestsHTTPClient

__all__ = ["DEFAULT_TIMEOUT_SECONDS", "HTTPClient", "HTTPResult", "RequestsHTTPClient"]
