"""Pinboard — pin asset files for quick access and keep a history of unpinned ones."""

__version__ = "0.1.0"
