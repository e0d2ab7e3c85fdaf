"""Normalize and validate JSON order records."""

__version__ = "0.1.0"
