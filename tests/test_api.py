from fastapi.testclient import TestClient

from feedscout.api import routes_feeds
from feedscout.core.errors import FeedFetchError
from feedscout.main import app
from feedscout.services.discovery.links import FeedType, HtmlFeedLink

client = TestClient(app)

HTML = """<link rel="alternate" type="application/rss+xml" title="A &amp; B" href="/feed">
<link rel="alternate" type="application/atom+xml" title="Sin href">"""


def test_health():
    """Test health endpoint"""
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_links_raw():
    """Test link discovery without page url"""
    response = client.post("/feeds/links", json={"html": HTML})

    assert response.status_code == 200
    assert response.json() == [
        {"title": "A & B", "url": "/feed", "feed_type": "rss"},
        {"title": "Sin href", "url": "", "feed_type": "atom"},
    ]


def test_links_resolved():
    """Test link discovery with page url skips unresolvable links"""
    response = client.post("/feeds/links", json={"html": HTML, "page_url": "codehollow.com"})

    assert response.json() == [
        {"title": "A & B", "url": "http://codehollow.com/feed", "feed_type": "rss"},
    ]


def test_resolve():
    """Test single link resolution"""
    response = client.post("/feeds/resolve", json={
        "page_url": "codehollow.com",
        "url": "//cdn.com/feed",
        "feed_type": "atom",
    })

    assert response.status_code == 200
    assert response.json() == {"title": "", "url": "http://cdn.com/feed", "feed_type": "atom"}


def test_resolve_unresolvable():
    """Test 422 when url cannot be resolved"""
    response = client.post("/feeds/resolve", json={"page_url": "codehollow.com", "url": ""})
    assert response.status_code == 422


def test_discover(monkeypatch):
    """Test discover endpoint with fetch stubbed"""
    monkeypatch.setattr(
        routes_feeds,
        "get_feed_urls_from_url",
        lambda url: [HtmlFeedLink("T", "http://x.com/feed", FeedType.RSS)],
    )
    response = client.get("/feeds/discover", params={"url": "x.com"})

    assert response.json() == [{"title": "T", "url": "http://x.com/feed", "feed_type": "rss"}]


def test_discover_fetch_error(monkeypatch):
    """Test 502 on download failure"""
    def boom(url):
        raise FeedFetchError(url, "timeout")

    monkeypatch.setattr(routes_feeds, "get_feed_urls_from_url", boom)
    response = client.get("/feeds/discover", params={"url": "x.com"})

    assert response.status_code == 502


def test_read(monkeypatch):
    """Test read endpoint with download stubbed"""
    from feedscout.services.ingest import fetch

    rss = b"""<?xml version="1.0"?><rss version="2.0"><channel><title>T</title>
    <item><title>I</title><link>http://x.com/i</link><pubDate>Thu, 22 Dec 2016 17:36:00 +0000</pubDate></item>
    </channel></rss>"""
    monkeypatch.setattr(fetch, "download_bytes", lambda url: rss)
    response = client.get("/feeds/read", params={"url": "x.com/feed"})

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "T"
    assert body["feed_type"] == "rss"
    assert body["items"][0]["title"] == "I"
    assert body["items"][0]["published"].startswith("2016-12-22T17:36:00")
