"""Unit tests for the HTML output writer."""

import os
import stat

import pytest

from rss_html.core.renderer import FeedRenderer
from rss_html.core.tree import PreconditionError
from rss_html.services.writer import HTMLWriter, write_html

from conftest import leaf, tag


class TestHTMLWriterUnit:
    """Unit tests for HTMLWriter."""

    def test_writes_and_closes(self, tmp_path):
        target = tmp_path / "out" / "page.html"

        with HTMLWriter(target) as sink:
            sink.write("<html></html>\n")

        assert sink.closed
        assert target.read_text(encoding="utf-8") == "<html></html>\n"
        assert list(target.parent.glob("*.tmp")) == []

    def test_failure_leaves_no_output(self, tmp_path):
        target = tmp_path / "page.html"

        with pytest.raises(RuntimeError):
            with HTMLWriter(target) as sink:
                sink.write("<html>\n")
                raise RuntimeError("render failed")

        assert sink.closed
        assert not target.exists()
        assert list(tmp_path.glob("*.tmp")) == []

    def test_failure_keeps_previous_file(self, tmp_path):
        target = tmp_path / "page.html"
        target.write_text("old", encoding="utf-8")

        with pytest.raises(ValueError):
            with HTMLWriter(target) as sink:
                sink.write("new")
                raise ValueError("boom")

        assert target.read_text(encoding="utf-8") == "old"

    @pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
    def test_new_file_follows_umask(self, tmp_path):
        target = tmp_path / "page.html"
        previous = os.umask(0o022)
        try:
            with HTMLWriter(target) as sink:
                sink.write("<html></html>\n")
        finally:
            os.umask(previous)

        assert stat.S_IMODE(target.stat().st_mode) == 0o644

    @pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
    def test_replaced_file_keeps_its_mode(self, tmp_path):
        target = tmp_path / "page.html"
        target.write_text("old", encoding="utf-8")
        target.chmod(0o640)

        with HTMLWriter(target) as sink:
            sink.write("new")

        assert stat.S_IMODE(target.stat().st_mode) == 0o640
        assert target.read_text(encoding="utf-8") == "new"

    def test_failed_move_chains_the_cause(self, tmp_path):
        target = tmp_path / "page.html"
        target.mkdir()

        with pytest.raises(OSError) as exc_info:
            with HTMLWriter(target) as sink:
                sink.write("<html></html>\n")

        assert isinstance(exc_info.value.__cause__, OSError)
        assert list(tmp_path.glob("*.tmp")) == []

    def test_encoding(self, tmp_path):
        target = tmp_path / "page.html"

        with HTMLWriter(target, encoding="latin-1") as sink:
            sink.write("café")

        assert target.read_bytes() == "café".encode("latin-1")


class TestWriteHtmlUnit:
    """Unit tests for write_html."""

    def test_renders_channel_to_file(self, tmp_path):
        channel = tag(
            "channel",
            leaf("title", "T"),
            leaf("link", "http://x"),
            tag("item", leaf("title", "one")),
        )
        target = tmp_path / "page.html"

        rows = write_html(target, channel, FeedRenderer())

        assert rows == 1
        html = target.read_text(encoding="utf-8")
        assert html.startswith("<html>\n")
        assert html.endswith("</html>\n")

    def test_render_error_removes_partial_file(self, tmp_path):
        target = tmp_path / "page.html"

        # An <item> in place of <channel> violates render_header's contract.
        with pytest.raises(PreconditionError):
            write_html(target, tag("item"), FeedRenderer())

        assert not target.exists()
