# Where: radiopress.features.site.__init__
# What: Expose the static page renderer.
# Why: Keep template lookup behind one import for the publish service.

from .usecases import PageOptions, SiteRenderer, page_name

__all__ = ["PageOptions", "SiteRenderer", "page_name"]
