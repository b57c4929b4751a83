"""Shared fixtures for rss-html tests."""

import pytest

from rss_html.core.tree import XMLNode


def leaf(label, text=None, **attributes):
    """Build a flat element, with a text child when text is given."""
    children = () if text is None else (XMLNode.text(text),)
    return XMLNode.tag(label, attributes, children)


def tag(label, *children, **attributes):
    return XMLNode.tag(label, attributes, tuple(children))


@pytest.fixture
def isolated_home(tmp_path, monkeypatch):
    """Keep config and log files out of the real home directory."""
    home = tmp_path / "home"
    monkeypatch.setenv("RSS_HTML_HOME", str(home))
    return home


@pytest.fixture
def sample_rss():
    return b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0" xmlns:atom="http://www.w3.org/2005/Atom">
  <channel>
    <title>My Feed</title>
    <link>http://x</link>
    <atom:link href="http://x/rss" rel="self"/>
    <description>All the news</description>
    <item>
      <pubDate>Mon</pubDate>
      <source url="http://s">S</source>
      <title>First</title>
      <link>http://i/1</link>
    </item>
    <item>
      <description>Second only has a description</description>
    </item>
  </channel>
</rss>
"""
