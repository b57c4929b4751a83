"""Lookup of optional child elements by tag name."""

from enum import Enum
from typing import Optional, Union

from .tree import PreconditionError, XMLNode


class RSSTag(str, Enum):
    """Element names the converter recognizes."""

    RSS = "rss"
    CHANNEL = "channel"
    ITEM = "item"
    TITLE = "title"
    LINK = "link"
    DESCRIPTION = "description"
    PUB_DATE = "pubDate"
    SOURCE = "source"


TagName = Union[RSSTag, str]


def _tag_value(tag: TagName) -> str:
    return tag.value if isinstance(tag, RSSTag) else tag


def locate(node: XMLNode, tag: TagName) -> Optional[int]:
    """
    Find the index of a child element by name.

    Every direct child is scanned; when a document repeats an element the
    index of the last occurrence is returned. Text children never match.

    Args:
        node: Tag node to search
        tag: Element name to look for

    Returns:
        Child index, or None when no child carries the name

    Raises:
        PreconditionError: If node is a text node or tag is empty
    """
    name = _tag_value(tag)
    if not name:
        raise PreconditionError("tag name must not be empty")
    if not node.is_tag:
        raise PreconditionError(f"cannot locate <{name}> under a text node")

    index = None
    for i, child in enumerate(node.children):
        if child.is_tag and child.label == name:
            index = i
    return index


def find_child(node: XMLNode, tag: TagName) -> Optional[XMLNode]:
    """Return the child ``locate`` points at, or None."""
    index = locate(node, tag)
    if index is None:
        return None
    return node.child(index)
