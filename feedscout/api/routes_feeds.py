from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from feedscout.core.errors import FeedFetchError, FeedParseError, UrlNotFoundError
from feedscout.services.discovery.links import FeedType, HtmlFeedLink, discover_feed_links
from feedscout.services.discovery.resolve import resolve_absolute_feed_url, resolve_feed_links
from feedscout.services.ingest.fetch import get_feed_urls_from_url
from feedscout.services.ingest.rss import read_feed_from_url

router = APIRouter()


class LinksRequest(BaseModel):
    html: str
    page_url: str | None = None


class ResolveRequest(BaseModel):
    page_url: str
    url: str
    title: str = ""
    feed_type: FeedType = FeedType.RSS


def _link_out(link: HtmlFeedLink) -> dict:
    return {"title": link.title, "url": link.url, "feed_type": link.feed_type.value}


@router.post("/links")
def parse_links(body: LinksRequest):
    """
    Links a feeds dentro del html enviado. Con page_url se devuelven absolutos
    (los que no se pueden resolver se omiten).
    """
    links = discover_feed_links(body.html)
    if body.page_url:
        links = resolve_feed_links(body.page_url, links)
    return [_link_out(link) for link in links]


@router.post("/resolve")
def resolve_link(body: ResolveRequest):
    link = HtmlFeedLink(title=body.title, url=body.url, feed_type=body.feed_type)
    try:
        return _link_out(resolve_absolute_feed_url(body.page_url, link))
    except UrlNotFoundError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/discover")
def discover(url: str = Query(..., min_length=1)):
    try:
        links = get_feed_urls_from_url(url)
    except UrlNotFoundError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except FeedFetchError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return [_link_out(link) for link in links]


@router.get("/read")
def read(url: str = Query(..., min_length=1), limit: int = Query(20, ge=1, le=200)):
    try:
        feed = read_feed_from_url(url)
    except UrlNotFoundError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except FeedFetchError as e:
        raise HTTPException(status_code=502, detail=str(e))
    except FeedParseError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return {
        "title": feed.title,
        "link": feed.link,
        "feed_type": feed.feed_type,
        "version": feed.version,
        "language": feed.language,
        "last_updated": feed.last_updated,
        "items": [{
            "id": it.id,
            "title": it.title,
            "link": it.link,
            "published": it.published,
            "description": it.description,
            "hash": it.hash,
            "enclosures": [{"url": e.url, "length": e.length, "type": e.media_type} for e in it.enclosures],
            "media": [{"url": m.url, "medium": m.medium.value, "is_default": m.is_default} for m in it.media],
        } for it in feed.items[:limit]],
    }
