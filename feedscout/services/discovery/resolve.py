from __future__ import annotations

import html
import logging
import re
from typing import Iterable
from urllib.parse import quote, urlsplit, urlunsplit

from feedscout.core.config import settings
from feedscout.core.errors import UrlNotFoundError
from feedscout.services.discovery.links import HtmlFeedLink

logger = logging.getLogger(__name__)

SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*://")
# "feed:http://...", "mailto:...", "urn:..."; "localhost:8080/feed" no cuenta
OPAQUE_SCHEME_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.\-]*:(?![0-9])\S")
# caracteres que no se escapan al unir la ruta relativa
PATH_SAFE = "/:?#[]@!$&'()*+,;=%~"


def get_absolute_url(url: str) -> str:
    """
    Recibe una url con o sin esquema y devuelve la url completa.

    get_absolute_url("codehollow.com") -> "http://codehollow.com/"
    """
    raw = (url or "").strip()
    if raw.startswith("//"):
        raw = f"{settings.default_scheme}:{raw}"
    elif not SCHEME_RE.match(raw):
        raw = f"{settings.default_scheme}://{raw}"

    try:
        parts = urlsplit(raw)
        host = parts.hostname
    except ValueError:
        raise UrlNotFoundError(url) from None
    if not host:
        raise UrlNotFoundError(url)

    return urlunsplit((parts.scheme.lower(), parts.netloc, parts.path or "/", parts.query, parts.fragment))


def _is_absolute(url: str) -> bool:
    return bool(SCHEME_RE.match(url) or OPAQUE_SCHEME_RE.match(url))


def _is_absolute_http(url: str) -> bool:
    try:
        parts = urlsplit(url)
        host = parts.hostname
    except ValueError:
        return False
    return parts.scheme in ("http", "https") and bool(host)


def resolve_absolute_feed_url(page_url: str, link: HtmlFeedLink) -> HtmlFeedLink:
    """
    Devuelve el link con la url absoluta, relativa a la página donde se encontró.

    - http(s)://... se devuelve tal cual
    - //cdn.com/feed -> http://cdn.com/feed
    - /feed con página "codehollow.com" -> http://codehollow.com/feed

    Lanza UrlNotFoundError si no hay forma de obtener una url absoluta.
    """
    tmp_url = html.unescape(link.url or "").strip()
    title = html.unescape(link.title or "")

    if tmp_url.lower().startswith(("http://", "https://")):
        return HtmlFeedLink(title=title, url=tmp_url, feed_type=link.feed_type)

    # caso especial: protocol-relative
    if tmp_url.startswith("//"):
        tmp_url = "http:" + tmp_url

    if _is_absolute(tmp_url):
        return HtmlFeedLink(title=title, url=tmp_url, feed_type=link.feed_type)

    relative = quote(tmp_url.lstrip("/"), safe=PATH_SAFE)
    if relative:
        try:
            page = get_absolute_url(page_url)
        except UrlNotFoundError:
            raise UrlNotFoundError(page_url, link.url) from None

        candidate = page.rstrip("/") + "/" + relative
        if _is_absolute_http(candidate):
            return HtmlFeedLink(title=title, url=candidate, feed_type=link.feed_type)

    raise UrlNotFoundError(page_url, link.url)


def resolve_feed_links(page_url: str, links: Iterable[HtmlFeedLink]) -> list[HtmlFeedLink]:
    """
    Resuelve un lote de links manteniendo el orden.
    Los que no se pueden resolver se registran y se omiten.
    """
    out = []
    for link in links:
        try:
            out.append(resolve_absolute_feed_url(page_url, link))
        except UrlNotFoundError as e:
            logger.warning("Skipping feed link: %s", e)
    return out
