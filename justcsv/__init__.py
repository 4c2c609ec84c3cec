"""Simple CSV reader and writer for UTF-8 comma separated content."""

__version__ = "0.2.0"