"""Service layer for rss-html."""

from .writer import HTMLWriter, write_html

__all__ = ["HTMLWriter", "write_html"]
