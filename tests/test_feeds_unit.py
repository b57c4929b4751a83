"""Unit tests for feed loading and validation."""

from unittest.mock import Mock, patch

import pytest
import requests

from rss_html.core.feeds import (
    FeedLoader,
    FeedUnavailableError,
    MalformedFeedError,
    get_channel,
    is_rss2,
)
from rss_html.core.tree import XMLNode

from conftest import leaf, tag


class TestFeedLoaderUnit:
    """Unit tests for FeedLoader."""

    def test_load_local_file(self, tmp_path, sample_rss):
        feed_file = tmp_path / "feed.xml"
        feed_file.write_bytes(sample_rss)

        root = FeedLoader().load(str(feed_file))

        assert root.label == "rss"
        assert root.attribute_value("version") == "2.0"
        assert get_channel(root).label == "channel"

    def test_load_url_uses_session(self, sample_rss):
        loader = FeedLoader(timeout=5)
        response = Mock()
        response.content = sample_rss
        response.raise_for_status.return_value = None

        with patch.object(loader.session, "get", return_value=response) as mock_get:
            root = loader.load("https://example.com/feed.xml")

        mock_get.assert_called_once_with("https://example.com/feed.xml", timeout=5)
        assert is_rss2(root)

    def test_http_error_is_unavailable(self):
        loader = FeedLoader()

        with patch.object(loader.session, "get", side_effect=requests.ConnectionError("boom")):
            with pytest.raises(FeedUnavailableError):
                loader.load("http://example.com/feed.xml")

    def test_bad_status_is_unavailable(self):
        loader = FeedLoader()
        response = Mock()
        response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")

        with patch.object(loader.session, "get", return_value=response):
            with pytest.raises(FeedUnavailableError):
                loader.load("https://example.com/missing.xml")

    def test_missing_file_is_unavailable(self, tmp_path):
        with pytest.raises(FeedUnavailableError):
            FeedLoader().load(str(tmp_path / "nope.xml"))

    def test_malformed_xml(self):
        with pytest.raises(MalformedFeedError):
            FeedLoader().parse(b"<rss version='2.0'><channel>", "broken.xml")

    def test_user_agent_header(self):
        loader = FeedLoader(user_agent="tester/1.0")

        assert loader.session.headers["User-Agent"] == "tester/1.0"

    def test_atom_link_does_not_shadow_channel_link(self, sample_rss):
        channel = get_channel(FeedLoader().parse(sample_rss))

        links = [c for c in channel.children if c.label == "link"]
        assert len(links) == 1


class TestValidationUnit:
    """Unit tests for RSS 2.0 root validation."""

    def test_accepts_rss_2_0(self):
        assert is_rss2(tag("rss", tag("channel"), version="2.0"))

    @pytest.mark.parametrize("version", ["0.91", "2", "2.0 ", "1.0"])
    def test_rejects_other_versions(self, version):
        assert not is_rss2(tag("rss", tag("channel"), version=version))

    def test_rejects_missing_version(self):
        assert not is_rss2(tag("rss", tag("channel")))

    def test_rejects_other_root(self):
        assert not is_rss2(tag("feed", version="2.0"))

    def test_rejects_text_root(self):
        assert not is_rss2(XMLNode.text("rss"))

    def test_get_channel_without_children(self):
        with pytest.raises(MalformedFeedError):
            get_channel(tag("rss", version="2.0"))

    def test_get_channel_with_wrong_first_child(self):
        with pytest.raises(MalformedFeedError):
            get_channel(tag("rss", leaf("title", "T"), version="2.0"))
