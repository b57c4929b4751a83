"""Main rss-html application."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, Optional

from .config import create_example_config, load_config
from .core.feeds import FeedLoader, get_channel, is_rss2
from .core.renderer import FeedRenderer
from .services.writer import write_html
from .utils.paths import default_output_name, get_log_dir, get_project_dir, resolve_output_path


REJECTION_MESSAGE = "URL not valid RSS 2.0 file"


@dataclass
class ConversionResult:
    """Outcome of one conversion."""

    source: str
    converted: bool
    message: str
    output_path: Optional[Path] = None
    item_count: int = 0


class RSSHtmlApp:
    """Main rss-html application."""

    def __init__(self, config_file: Optional[Path] = None):
        """
        Initialize the application.

        Args:
            config_file: Optional path to configuration file
        """
        self.config = load_config(config_file)
        self.config_file = config_file

        self._setup_logging()

        self.loader = FeedLoader(
            timeout=self.config.timeout,
            retry_attempts=self.config.retry_attempts,
            user_agent=self.config.user_agent,
        )
        self.renderer = FeedRenderer(wrap_missing_date=self.config.wrap_missing_date)

        logging.debug("rss-html initialized")

    def _setup_logging(self) -> None:
        """Setup logging configuration."""
        log_level = getattr(logging, self.config.log_level.upper(), logging.INFO)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)
        root_logger.handlers = []
        root_logger.addHandler(console_handler)

        if self.config.log_to_file:
            file_handler = logging.FileHandler(get_log_dir() / "rss-html.log")
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    def set_verbose(self) -> None:
        """Switch every handler to DEBUG."""
        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)
        for handler in root_logger.handlers:
            handler.setLevel(logging.DEBUG)

    def convert(
        self,
        source: str,
        output: Optional[str] = None,
        prompt_output: Optional[Callable[[], str]] = None,
    ) -> ConversionResult:
        """
        Convert an RSS 2.0 feed into an HTML page.

        The output location is only resolved, and prompt_output only called,
        once the document has been validated. A rejected document produces
        no file.

        Args:
            source: Feed URL or local path
            output: Output file; when None prompt_output is asked
            prompt_output: Callable returning an output file name

        Returns:
            ConversionResult describing what happened

        Raises:
            FeedError: If the document cannot be loaded or has no channel
        """
        logging.debug(f"Converting {source}")
        root = self.loader.load(source)

        if not is_rss2(root):
            version = root.attribute_value("version") if root.is_tag else None
            logging.debug(f"Rejected {source}: root is {root.label!r}, version {version!r}")
            return ConversionResult(source=source, converted=False, message=REJECTION_MESSAGE)

        channel = get_channel(root)

        if output is None and prompt_output is not None:
            output = prompt_output()
        if not output:
            output = default_output_name(source)

        base_dir = Path(self.config.output_dir) if self.config.output_dir else None
        output_path = resolve_output_path(output, base_dir)

        item_count = write_html(output_path, channel, self.renderer, self.config.encoding)

        logging.info(f"Wrote {item_count} items to {output_path}")
        return ConversionResult(
            source=source,
            converted=True,
            message=f"Wrote {item_count} items to {output_path}",
            output_path=output_path,
            item_count=item_count,
        )

    def get_info(self) -> Dict:
        """
        Get application information.

        Returns:
            Dictionary with application info
        """
        from . import __version__

        return {
            "version": __version__,
            "project_dir": str(get_project_dir()),
            "config_file": str(self.config_file) if self.config_file else "default",
            "log_level": self.config.log_level,
            "timeout": self.config.timeout,
            "retry_attempts": self.config.retry_attempts,
            "output_dir": self.config.output_dir,
            "wrap_missing_date": self.config.wrap_missing_date,
        }

    def create_example_config(self) -> str:
        """Create example configuration."""
        return create_example_config()
