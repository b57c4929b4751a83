"""Core RSS to HTML transformation."""

from .feeds import FeedLoader, FeedError, FeedUnavailableError, MalformedFeedError, is_rss2, get_channel
from .locator import RSSTag, locate, find_child
from .renderer import FeedRenderer
from .tree import PreconditionError, XMLNode, from_element, text_content

__all__ = [
    "FeedLoader",
    "FeedError",
    "FeedUnavailableError",
    "MalformedFeedError",
    "is_rss2",
    "get_channel",
    "RSSTag",
    "locate",
    "find_child",
    "FeedRenderer",
    "PreconditionError",
    "XMLNode",
    "from_element",
    "text_content",
]
