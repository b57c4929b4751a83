"""HTML rendering of an RSS 2.0 channel."""

import io
import logging
from typing import Optional, TextIO

from .fallbacks import FieldState, Scope, fallback_for
from .locator import RSSTag, find_child
from .tree import PreconditionError, XMLNode, text_content


logger = logging.getLogger(__name__)


def _require_tag(node: XMLNode, label: RSSTag) -> None:
    if node is None:
        raise PreconditionError(f"expected <{label.value}>, got None")
    if not node.is_tag or node.label != label.value:
        raise PreconditionError(f"expected a <{label.value}> tag, got {node}")


def _require_open(sink: TextIO) -> None:
    if sink is None:
        raise PreconditionError("output sink is None")
    if getattr(sink, "closed", False):
        raise PreconditionError("output sink is closed")


class FeedRenderer:
    """Writes the HTML page for a channel to a text sink."""

    def __init__(self, wrap_missing_date: bool = False):
        """
        Initialize the renderer.

        Args:
            wrap_missing_date: Put the missing-date text inside a table cell
                like the other columns instead of writing it bare
        """
        self.wrap_missing_date = wrap_missing_date

    def _field_text(self, parent: XMLNode, scope: Scope, tag: RSSTag) -> Optional[str]:
        """Text of a child field, its fallback, or None if neither exists."""
        node = find_child(parent, tag)
        if node is None:
            return fallback_for(scope, tag, FieldState.MISSING)
        text = text_content(node)
        if text == "":
            fallback = fallback_for(scope, tag, FieldState.EMPTY)
            if fallback is not None:
                return fallback
        return text

    def render_header(self, channel: XMLNode, sink: TextIO) -> None:
        """Write the document head, page heading, description and table header."""
        _require_tag(channel, RSSTag.CHANNEL)
        _require_open(sink)

        title = self._field_text(channel, Scope.CHANNEL, RSSTag.TITLE)

        sink.write("<html>\n")
        sink.write("<head>\n")
        sink.write("<title>\n")
        sink.write(f"{title}\n")
        sink.write("</title>\n")
        sink.write("</head>\n")
        sink.write("<body>\n")

        link = find_child(channel, RSSTag.LINK)
        if link is None:
            logger.debug("Channel has no <link>, rendering heading without anchor")
            sink.write(f"<h1>{title}</h1>\n")
        else:
            sink.write(f'<h1><a href="{text_content(link)}">{title}</a></h1>\n')

        description = self._field_text(channel, Scope.CHANNEL, RSSTag.DESCRIPTION)
        sink.write("<p>\n")
        sink.write(f"{description}\n")
        sink.write("</p>\n")

        sink.write('<table border="1">\n')
        sink.write("<tr>\n")
        sink.write("<th>Date</th>\n")
        sink.write("<th>Source</th>\n")
        sink.write("<th>News</th>\n")
        sink.write("</tr>\n")

    def render_item(self, item: XMLNode, sink: TextIO) -> None:
        """Write one table row for a news item."""
        _require_tag(item, RSSTag.ITEM)
        _require_open(sink)

        pub_date = find_child(item, RSSTag.PUB_DATE)
        source = find_child(item, RSSTag.SOURCE)
        title = find_child(item, RSSTag.TITLE)
        description = find_child(item, RSSTag.DESCRIPTION)
        link = find_child(item, RSSTag.LINK)

        sink.write("<tr>\n")

        if pub_date is not None:
            sink.write(f"<td>{text_content(pub_date)}</td>\n")
        else:
            missing = fallback_for(Scope.ITEM, RSSTag.PUB_DATE, FieldState.MISSING)
            if self.wrap_missing_date:
                sink.write(f"<td>{missing}</td>\n")
            else:
                sink.write(f"{missing}\n")

        if source is not None:
            url = source.attribute_value("url") or ""
            sink.write(f'<td><a href="{url}">{text_content(source)}</a></td>\n')
        else:
            missing = fallback_for(Scope.ITEM, RSSTag.SOURCE, FieldState.MISSING)
            sink.write(f"<td>{missing}</td>\n")

        sink.write("<td>")
        if link is not None:
            sink.write(f'<a href="{text_content(link)}">')

        if title is not None:
            sink.write(self._field_text(item, Scope.ITEM, RSSTag.TITLE))
        elif description is not None:
            sink.write(self._field_text(item, Scope.ITEM, RSSTag.DESCRIPTION))
        else:
            logger.debug("Item has neither <title> nor <description>")

        if link is not None:
            sink.write("</a>")
        sink.write("</td>\n")
        sink.write("</tr>\n")

    def render_footer(self, sink: TextIO) -> None:
        """Close the table, body and document."""
        _require_open(sink)
        sink.write("</table>\n")
        sink.write("</body>\n")
        sink.write("</html>\n")

    def render(self, channel: XMLNode, sink: TextIO) -> int:
        """
        Render a whole page for a channel.

        Rows follow the document order of the channel's ``item`` children;
        any other child is skipped.

        Returns:
            Number of item rows written
        """
        self.render_header(channel, sink)

        rows = 0
        for child in channel.children:
            if child.is_tag and child.label == RSSTag.ITEM.value:
                self.render_item(child, sink)
                rows += 1

        self.render_footer(sink)
        logger.debug(f"Rendered {rows} item rows")
        return rows

    def render_to_string(self, channel: XMLNode) -> str:
        """Render a page into a string."""
        buffer = io.StringIO()
        self.render(channel, buffer)
        return buffer.getvalue()
