"""Read-only XML node model consumed by the renderer."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple
from xml.etree import ElementTree as ET


class PreconditionError(Exception):
    """Raised when a caller violates a function's contract."""


@dataclass(frozen=True)
class XMLNode:
    """
    A node of a parsed XML document.

    A tag node carries an element name in ``label``, its attributes and an
    ordered tuple of children. A text node holds literal character data in
    ``label`` and never has attributes or children.
    """

    label: str
    attributes: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), hash=False, compare=True
    )
    children: Tuple["XMLNode", ...] = ()
    is_tag: bool = True

    @classmethod
    def tag(
        cls,
        label: str,
        attributes: Optional[Dict[str, str]] = None,
        children: Tuple["XMLNode", ...] = (),
    ) -> "XMLNode":
        """Create a tag node."""
        return cls(label, MappingProxyType(dict(attributes or {})), tuple(children), True)

    @classmethod
    def text(cls, value: str) -> "XMLNode":
        """Create a text node."""
        return cls(value, MappingProxyType({}), (), False)

    def number_of_children(self) -> int:
        return len(self.children)

    def child(self, index: int) -> "XMLNode":
        if not self.is_tag:
            raise PreconditionError("child() called on a text node")
        if not 0 <= index < len(self.children):
            raise PreconditionError(
                f"child index {index} out of range for <{self.label}> "
                f"with {len(self.children)} children"
            )
        return self.children[index]

    def has_attribute(self, name: str) -> bool:
        return self.is_tag and name in self.attributes

    def attribute_value(self, name: str) -> Optional[str]:
        if not self.is_tag:
            raise PreconditionError("attribute_value() called on a text node")
        return self.attributes.get(name)

    def __str__(self) -> str:
        if self.is_tag:
            return f"<{self.label}> ({len(self.children)} children)"
        return f"text({self.label!r})"


def text_content(node: XMLNode) -> str:
    """
    Return the text of a flat leaf element such as ``<title>text</title>``.

    The first child of a tag node holds its text by convention. Elements
    with no children, or whose first child is a tag, have no text.
    """
    if not node.is_tag:
        raise PreconditionError("text_content() called on a text node")
    if node.children and not node.children[0].is_tag:
        return node.children[0].label
    return ""


def from_element(element: ET.Element) -> XMLNode:
    """
    Build an ``XMLNode`` tree from an ElementTree element.

    Whitespace-only text between sub-elements is indentation and is dropped.
    A leaf element keeps its text verbatim, so ``<title> </title>`` still has
    a text child while ``<title/>`` has none.
    """
    subelements = list(element)
    children = []

    if not subelements:
        if element.text:
            children.append(XMLNode.text(element.text))
        return XMLNode.tag(element.tag, element.attrib, tuple(children))

    if element.text and element.text.strip():
        children.append(XMLNode.text(element.text))

    for sub in subelements:
        # Comments and processing instructions carry a callable tag.
        if isinstance(sub.tag, str):
            children.append(from_element(sub))
        if sub.tail and sub.tail.strip():
            children.append(XMLNode.text(sub.tail))

    return XMLNode.tag(element.tag, element.attrib, tuple(children))
