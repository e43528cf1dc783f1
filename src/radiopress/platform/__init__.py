"""Infrastructure adapters: logging, media probing, git, HTTP."""
