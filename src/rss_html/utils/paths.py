"""Path utilities for rss-html."""

import os
import re
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse


HOME_ENV_VAR = "RSS_HTML_HOME"


def slugify(name: str) -> str:
    """
    Normalize a name to slug format.

    Rules:
    - Convert to lowercase
    - Replace all hyphens with underscores
    - Replace any sequence of non-alphanumeric characters with a single underscore
    - Trim leading/trailing underscores

    Args:
        name: The name to slugify

    Returns:
        The slugified name
    """
    slug = name.lower()
    slug = slug.replace('-', '_')
    slug = re.sub(r'[^a-zA-Z0-9_]+', '_', slug)
    slug = slug.strip('_')

    return slug


def get_project_dir() -> Path:
    """
    Get the rss-html data directory.

    ``$RSS_HTML_HOME`` wins over the default ``~/.rss-html``.
    """
    home = os.environ.get(HOME_ENV_VAR)
    data_dir = Path(home).expanduser() if home else Path.home() / ".rss-html"
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir


def get_config_file_path() -> Path:
    """Get the path to the configuration file."""
    return get_project_dir() / "config.yaml"


def get_log_dir() -> Path:
    """Get the log directory path."""
    log_dir = get_project_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def default_output_name(source: str) -> str:
    """
    Derive an output file name from a feed URL or path.

    ``https://example.com/news/feed.xml`` becomes ``example_com_news_feed.html``.
    """
    parsed = urlparse(source)
    if parsed.scheme in ("http", "https"):
        stem = f"{parsed.netloc}{parsed.path}"
    else:
        stem = Path(source).name
    stem = re.sub(r'\.(xml|rss)$', '', stem, flags=re.IGNORECASE)
    return f"{slugify(stem) or 'feed'}.html"


def resolve_output_path(output: str, base_dir: Optional[Path] = None) -> Path:
    """Expand ``~`` and anchor relative paths at base_dir when given."""
    path = Path(output).expanduser()
    if base_dir is not None and not path.is_absolute():
        path = Path(base_dir).expanduser() / path
    return path
