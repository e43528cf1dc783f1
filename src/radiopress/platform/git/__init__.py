"""Git command wrapper used by the publish pipeline."""

from .repository import GitCommandError, GitRepository, utc_now_iso

__all__ = ["GitCommandError", "GitRepository", "utc_now_iso"]
