"""RSS document loading and validation."""

import logging
from pathlib import Path
from urllib.parse import urlparse
from xml.etree import ElementTree as ET

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .locator import RSSTag
from .tree import XMLNode, from_element


logger = logging.getLogger(__name__)

RSS_VERSION = "2.0"


class FeedError(Exception):
    """Base error for feed loading."""


class FeedUnavailableError(FeedError):
    """The document could not be fetched or read."""


class MalformedFeedError(FeedError):
    """The document is not well-formed XML or lacks a channel."""


class FeedLoader:
    """Fetches or reads an RSS document and parses it into an XMLNode tree."""

    def __init__(
        self,
        timeout: int = 30,
        retry_attempts: int = 3,
        user_agent: str = "rss-html/1.0",
    ):
        """
        Initialize the feed loader.

        Args:
            timeout: HTTP request timeout in seconds
            retry_attempts: Total retries for failed HTTP requests
            user_agent: User-Agent header sent with requests
        """
        self.timeout = timeout
        self.retry_attempts = retry_attempts
        self.session = self._create_session(user_agent)

    def _create_session(self, user_agent: str) -> requests.Session:
        """Create HTTP session with retry strategy."""
        session = requests.Session()

        retry_strategy = Retry(
            total=self.retry_attempts,
            backoff_factor=1,
            status_forcelist=[429, 500, 502, 503, 504],
        )

        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        session.headers.update({"User-Agent": user_agent})

        return session

    def load(self, source: str) -> XMLNode:
        """
        Load and parse an RSS document.

        Args:
            source: http(s) URL or local file path

        Returns:
            Root node of the parsed document

        Raises:
            FeedUnavailableError: If the document cannot be fetched or read
            MalformedFeedError: If the document is not well-formed XML
        """
        if urlparse(source).scheme in ("http", "https"):
            content = self._fetch(source)
        else:
            content = self._read(source)
        return self.parse(content, source)

    def _fetch(self, url: str) -> bytes:
        logger.debug(f"Fetching feed: {url}")
        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"HTTP error fetching feed {url}: {e}")
            raise FeedUnavailableError(f"Could not fetch {url}: {e}") from e

        logger.debug(f"Fetched {len(response.content)} bytes from {url}")
        return response.content

    def _read(self, path: str) -> bytes:
        logger.debug(f"Reading feed file: {path}")
        try:
            return Path(path).expanduser().read_bytes()
        except OSError as e:
            logger.error(f"Error reading feed file {path}: {e}")
            raise FeedUnavailableError(f"Could not read {path}: {e}") from e

    def parse(self, content: bytes, source: str = "<string>") -> XMLNode:
        """Parse raw XML into an XMLNode tree."""
        try:
            element = ET.fromstring(content)
        except ET.ParseError as e:
            logger.error(f"Malformed XML in {source}: {e}")
            raise MalformedFeedError(f"{source} is not well-formed XML: {e}") from e
        return from_element(element)


def is_rss2(root: XMLNode) -> bool:
    """Check the document root is ``<rss version="2.0">``."""
    return (
        root.is_tag
        and root.label == RSSTag.RSS.value
        and root.has_attribute("version")
        and root.attribute_value("version") == RSS_VERSION
    )


def get_channel(root: XMLNode) -> XMLNode:
    """
    Return the channel of a validated RSS document.

    Raises:
        MalformedFeedError: If the first child of the root is not a channel
    """
    if root.number_of_children() == 0:
        raise MalformedFeedError("RSS document has no <channel>")
    channel = root.child(0)
    if not channel.is_tag or channel.label != RSSTag.CHANNEL.value:
        raise MalformedFeedError(f"Expected <channel> as first element, found {channel}")
    return channel
