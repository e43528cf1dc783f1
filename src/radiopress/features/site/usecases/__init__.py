"""Site rendering use cases."""

from .renderer import PageOptions, SiteRenderer, page_name

__all__ = ["PageOptions", "SiteRenderer", "page_name"]
