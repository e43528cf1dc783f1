"""Feature packages: catalog, extraction, playback, site."""
