import logging

import pytest
from urllib.parse import urlsplit

from feedscout.core.errors import UrlNotFoundError
from feedscout.services.discovery.links import FeedType, HtmlFeedLink
from feedscout.services.discovery.resolve import (
    get_absolute_url,
    resolve_absolute_feed_url,
    resolve_feed_links,
)


def _link(url, title="Feed", feed_type=FeedType.RSS):
    return HtmlFeedLink(title=title, url=url, feed_type=feed_type)


def test_get_absolute_url_adds_scheme():
    """Test page urls without scheme"""
    assert get_absolute_url("codehollow.com") == "http://codehollow.com/"
    assert get_absolute_url("https://codehollow.com/blog") == "https://codehollow.com/blog"
    assert get_absolute_url("  HTTPS://codehollow.com ") == "https://codehollow.com/"


def test_get_absolute_url_invalid():
    """Test page url without host"""
    with pytest.raises(UrlNotFoundError):
        get_absolute_url("")


def test_relative_path():
    """Test path-relative link resolves under the page host"""
    result = resolve_absolute_feed_url("codehollow.com", _link("/feed"))

    assert urlsplit(result.url).hostname == "codehollow.com"
    assert result.url == "http://codehollow.com/feed"
    assert result.feed_type == FeedType.RSS


def test_relative_without_slash():
    """Test relative link without leading slash"""
    result = resolve_absolute_feed_url("https://example.com/", _link("feed.xml"))
    assert result.url == "https://example.com/feed.xml"


def test_absolute_unchanged():
    """Test absolute urls are returned unchanged"""
    result = resolve_absolute_feed_url("codehollow.com", _link("http://other.com/feed"))
    assert result.url == "http://other.com/feed"

    result = resolve_absolute_feed_url("codehollow.com", _link("HTTPS://other.com/feed"))
    assert result.url == "HTTPS://other.com/feed"


def test_protocol_relative():
    """Test protocol-relative urls get http"""
    result = resolve_absolute_feed_url("codehollow.com", _link("//cdn.com/feed"))
    assert result.url == "http://cdn.com/feed"


def test_other_scheme_is_absolute():
    """Test absolute uris with other schemes are kept"""
    result = resolve_absolute_feed_url("codehollow.com", _link("feed://example.com/rss"))
    assert result.url == "feed://example.com/rss"


def test_idempotent():
    """Test resolving twice gives the same link"""
    once = resolve_absolute_feed_url("codehollow.com", _link("/feed", title="A &amp; B"))
    twice = resolve_absolute_feed_url("codehollow.com", once)

    assert once == twice
    assert once.title == "A & B"


def test_title_decoded_and_type_kept():
    """Test title decoding and feed type preservation"""
    result = resolve_absolute_feed_url(
        "codehollow.com",
        _link("http://x.com/a", title="Tom &amp; Jerry", feed_type=FeedType.ATOM),
    )
    assert result.title == "Tom & Jerry"
    assert result.feed_type == FeedType.ATOM


@pytest.mark.parametrize("url", ["", "   ", "/"])
def test_empty_url_fails(url):
    """Test empty urls cannot be resolved"""
    with pytest.raises(UrlNotFoundError) as exc:
        resolve_absolute_feed_url("codehollow.com", _link(url))

    assert exc.value.page_url == "codehollow.com"
    assert exc.value.link_url == url


def test_bad_page_url_fails():
    """Test relative link on a page without host"""
    with pytest.raises(UrlNotFoundError) as exc:
        resolve_absolute_feed_url("", _link("/feed"))

    assert exc.value.link_url == "/feed"


def test_resolve_feed_links_skips_failures(caplog):
    """Test batch resolution keeps order and skips bad links"""
    links = [_link("/a"), _link(""), _link("//cdn.com/b")]

    with caplog.at_level(logging.WARNING):
        result = resolve_feed_links("codehollow.com", links)

    assert [r.url for r in result] == ["http://codehollow.com/a", "http://cdn.com/b"]
    assert "Skipping feed link" in caplog.text


@pytest.mark.parametrize("url", [
    "feed:http://x.com/rss",
    "feed:https://x.com/atom.xml",
    "mailto:feeds@x.com",
    "urn:uuid:60a76c80-d399-11d9-b93c-0003939e0af6",
])
def test_opaque_scheme_is_absolute(url):
    """Test absolute uris without // are returned as they are"""
    result = resolve_absolute_feed_url("codehollow.com", _link(url))
    assert result.url == url


def test_host_port_is_relative():
    """Test host:port is not taken for a scheme"""
    result = resolve_absolute_feed_url("codehollow.com", _link("localhost:8080/feed"))
    assert result.url == "http://codehollow.com/localhost:8080/feed"


def test_relative_with_spaces():
    """Test spaces in relative paths are escaped"""
    result = resolve_absolute_feed_url("codehollow.com", _link("/my feed.xml"))

    assert result.url == "http://codehollow.com/my%20feed.xml"
    assert resolve_absolute_feed_url("codehollow.com", result) == result


def test_get_absolute_url_protocol_relative():
    """Test //host page urls get the default scheme"""
    assert get_absolute_url("//codehollow.com/blog") == "http://codehollow.com/blog"
    assert get_absolute_url("//codehollow.com") == "http://codehollow.com/"
