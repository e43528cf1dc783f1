"""Packaged page templates, stylesheet, and client script."""
