"""Configuration management for rss-html."""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from . import __version__
from .utils.paths import get_config_file_path


class Config(BaseModel):
    """Main configuration for rss-html."""

    model_config = ConfigDict(extra="ignore")

    log_level: str = Field(default="INFO", description="Logging level")
    log_to_file: bool = Field(default=True, description="Also write logs to the project log directory")
    timeout: int = Field(default=30, description="HTTP request timeout in seconds")
    retry_attempts: int = Field(default=3, description="Number of retry attempts for failed requests")
    user_agent: str = Field(default=f"rss-html/{__version__}", description="HTTP User-Agent header")
    encoding: str = Field(default="utf-8", description="Output file encoding")
    output_dir: Optional[str] = Field(default=None, description="Base directory for relative output paths")
    wrap_missing_date: bool = Field(
        default=False,
        description="Wrap the missing-date text in a table cell",
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"Log level must be one of {allowed}")
        return v.upper()

    @field_validator('timeout', 'retry_attempts')
    @classmethod
    def validate_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Must not be negative")
        return v

    @field_validator('output_dir')
    @classmethod
    def expand_path(cls, v: Optional[str]) -> Optional[str]:
        if not v:
            return None
        return str(Path(v).expanduser())


def load_config(config_file: Optional[Path] = None) -> Config:
    """
    Load configuration from YAML file.

    Args:
        config_file: Optional path to config file. If None, uses default path.

    Returns:
        Config object
    """
    if config_file is None:
        config_file = get_config_file_path()

    if not config_file.exists():
        config = Config()
        save_config(config, config_file)
        logging.info(f"Created default config at {config_file}")
        return config

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        config = Config(**data)
        logging.debug(f"Loaded config from {config_file}")
        return config

    except (yaml.YAMLError, ValueError) as e:
        logging.error(f"Error loading config from {config_file}: {e}")
        raise


def save_config(config: Config, config_file: Optional[Path] = None) -> None:
    """
    Save configuration to YAML file.

    Args:
        config: Config object to save
        config_file: Optional path to config file. If None, uses default path.
    """
    if config_file is None:
        config_file = get_config_file_path()

    config_file.parent.mkdir(parents=True, exist_ok=True)

    try:
        with open(config_file, 'w', encoding='utf-8') as f:
            yaml.dump(config.model_dump(), f, default_flow_style=False, indent=2)

        logging.debug(f"Saved config to {config_file}")

    except (OSError, yaml.YAMLError) as e:
        logging.error(f"Error saving config to {config_file}: {e}")
        raise


def create_example_config() -> str:
    """Create an example configuration YAML string."""
    example_config = Config(
        log_level="INFO",
        timeout=20,
        retry_attempts=2,
        output_dir="~/feeds",
        wrap_missing_date=False,
    )

    return yaml.dump(example_config.model_dump(), default_flow_style=False, indent=2)
