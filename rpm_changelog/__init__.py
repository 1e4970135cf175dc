"""Changelog generation and release bumping for RPM spec files."""

__version__ = "0.3.0"
