"""RSS 2.0 feed to static HTML page converter."""

__version__ = "1.0.0"
