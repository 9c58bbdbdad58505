from __future__ import annotations

import logging

import httpx

from feedscout.core.config import settings
from feedscout.core.errors import FeedFetchError
from feedscout.services.discovery.links import HtmlFeedLink, discover_feed_links
from feedscout.services.discovery.resolve import get_absolute_url, resolve_feed_links

logger = logging.getLogger(__name__)


def _get(url: str) -> httpx.Response:
    full_url = get_absolute_url(url)
    try:
        with httpx.Client(
            follow_redirects=True,
            timeout=settings.http_timeout,
            headers={"User-Agent": settings.user_agent},
        ) as client:
            response = client.get(full_url)
            response.raise_for_status()
            return response
    except httpx.HTTPError as e:
        logger.warning("Download failed for %s: %s", full_url, e)
        raise FeedFetchError(full_url, str(e)) from e


def download(url: str) -> str:
    return _get(url).text


def download_bytes(url: str) -> bytes:
    return _get(url).content


def get_feed_urls_from_url(url: str, *, resolve: bool = True) -> list[HtmlFeedLink]:
    """
    Descarga la página y devuelve los feeds que enlaza.
    Con resolve=True las urls vienen absolutas (las que no se pueden resolver se omiten).
    """
    page_url = get_absolute_url(url)
    links = discover_feed_links(download(page_url))
    logger.info("Found %d feed links on %s", len(links), page_url)
    if not resolve:
        return links
    return resolve_feed_links(page_url, links)
