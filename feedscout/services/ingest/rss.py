from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

import feedparser

from feedscout.core.config import settings
from feedscout.core.errors import FeedParseError
from feedscout.services.ingest.dedupe import canonical_hash
from feedscout.services.ingest.locales import DateLocale
from feedscout.services.ingest.models import Enclosure, Feed, FeedItem, MediaContent
from feedscout.services.ingest.normalize import (
    clean_html,
    parse_bool_lenient,
    parse_datetime_lenient,
    parse_int_lenient,
    parse_medium_lenient,
)

logger = logging.getLogger(__name__)


def _date(node: Any, key: str, locale: DateLocale) -> Optional[datetime]:
    # Primero el texto crudo con nuestro parser; feedparser solo como respaldo
    dt = parse_datetime_lenient(node.get(key), locale)
    if dt is None and node.get(f"{key}_parsed"):
        dt = datetime(*node.get(f"{key}_parsed")[:6], tzinfo=timezone.utc)
    return dt


def _feed_type(version: str) -> str:
    if version.startswith("rss"):
        return "rss"
    if version.startswith("atom"):
        return "atom"
    return "unknown"


def _enclosures(entry: Any) -> tuple[Enclosure, ...]:
    return tuple(
        Enclosure(
            url=enc.get("href", "") or "",
            length=parse_int_lenient(enc.get("length")),
            media_type=enc.get("type", "") or "",
        )
        for enc in entry.get("enclosures", [])
    )


def _media(entry: Any) -> tuple[MediaContent, ...]:
    return tuple(
        MediaContent(
            url=m.get("url", "") or "",
            medium=parse_medium_lenient(m.get("medium")),
            media_type=m.get("type", "") or "",
            file_size=parse_int_lenient(m.get("filesize")),
            is_default=parse_bool_lenient(m.get("isdefault")),
            duration=parse_int_lenient(m.get("duration")),
            width=parse_int_lenient(m.get("width")),
            height=parse_int_lenient(m.get("height")),
        )
        for m in entry.get("media_content", [])
    )


def _item(entry: Any, locale: DateLocale) -> FeedItem:
    title = entry.get("title", "") or ""
    link = entry.get("link", "") or ""
    content = ""
    if entry.get("content"):
        content = entry["content"][0].get("value", "") or ""

    return FeedItem(
        id=entry.get("id", "") or link,
        title=title[:500],
        link=link[:1000],
        description=clean_html(entry.get("summary", ""), settings.max_content_chars),
        content=clean_html(content, settings.max_content_chars),
        author=entry.get("author", "") or "",
        published=_date(entry, "published", locale),
        updated=_date(entry, "updated", locale),
        hash=canonical_hash(title, link),
        categories=tuple(t.get("term") for t in entry.get("tags", []) if t.get("term")),
        enclosures=_enclosures(entry),
        media=_media(entry),
    )


def read_feed(content: str | bytes, *, locale: DateLocale = None) -> Feed:
    """
    Parsea un documento RSS/Atom (xml) y lo pasa a las entidades canónicas.
    Fechas, enteros, booleanos y medium pasan por los normalizadores lenientes.
    """
    if isinstance(content, str):
        # feedparser trata un str como url o ruta si puede; forzamos documento
        content = content.encode("utf-8")
    locale = locale or settings.date_locale

    parsed = feedparser.parse(content)
    version = parsed.get("version", "") or ""
    if not version and not parsed.entries:
        raise FeedParseError(f"Not a feed document: {parsed.get('bozo_exception', 'no feed found')}")
    if parsed.bozo:
        logger.info("Feed parsed with errors: %s", parsed.get("bozo_exception"))

    f = parsed.feed
    items = tuple(_item(e, locale) for e in parsed.entries[:settings.max_entries])
    logger.debug("Read %s feed with %d items", version or "unknown", len(items))

    return Feed(
        title=f.get("title", "") or "",
        link=f.get("link", "") or "",
        description=f.get("subtitle", "") or "",
        language=f.get("language", "") or "",
        copyright=f.get("rights", "") or "",
        last_updated=_date(f, "updated", locale),
        feed_type=_feed_type(version),
        version=version,
        image_url=(f.get("image") or {}).get("href", "") or "",
        items=items,
    )


def read_feed_from_file(path: str | Path, *, locale: DateLocale = None) -> Feed:
    return read_feed(Path(path).read_bytes(), locale=locale)


def read_feed_from_url(url: str, *, locale: DateLocale = None) -> Feed:
    from feedscout.services.ingest.fetch import download_bytes

    return read_feed(download_bytes(url), locale=locale)
