"""Utility functions for rss-html."""

from .paths import (
    get_project_dir,
    slugify,
    get_config_file_path,
    get_log_dir,
    default_output_name,
    resolve_output_path,
)

__all__ = [
    "get_project_dir",
    "slugify",
    "get_config_file_path",
    "get_log_dir",
    "default_output_name",
    "resolve_output_path",
]
