"""
Descubrimiento de feeds en páginas HTML
=======================================

Busca tags ``<link rel="alternate" ...>`` que apunten a feeds RSS/Atom, p.ej.:

    <link rel="alternate" type="application/rss+xml" title="Blog" href="http://blog.example.com/feed.xml">
    <link rel="alternate" type="application/atom+xml" title="News" href="https://www.heise.de/newsticker/heise-atom.xml">

No es un parser HTML: basta con encontrar los tags bien formados.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FeedType(str, Enum):
    RSS = "rss"
    ATOM = "atom"


@dataclass(frozen=True)
class HtmlFeedLink:
    """Referencia a un feed encontrada en una página HTML"""
    title: str
    url: str  # tal cual viene en el HTML (puede ser relativa o vacía)
    feed_type: FeedType


LINK_TAG_RE = re.compile(r'<link[^>]*rel="alternate"[^>]*>', re.DOTALL)

SUPPORTED_TYPES = ("application/rss", "application/atom")


def get_attribute(attribute: str, tag: str) -> str:
    """
    Lee un atributo de un tag html, p.ej. get_attribute("title", '<link title="x">') -> "x".
    Devuelve "" si no existe.
    """
    pattern = re.escape(attribute) + r'\s*=\s*"(?P<val>[^"]*)"'
    m = re.search(pattern, tag, re.IGNORECASE)
    if not m:
        return ""
    return m.group("val")


def feed_link_from_tag(tag: str) -> Optional[HtmlFeedLink]:
    """
    Convierte un tag <link> en HtmlFeedLink.
    Solo soporta application/rss y application/atom; otro type -> None.
    """
    link_tag = html.unescape(tag)
    feed_type = get_attribute("type", link_tag).lower()

    if not any(t in feed_type for t in SUPPORTED_TYPES):
        return None

    return HtmlFeedLink(
        title=get_attribute("title", link_tag),
        url=get_attribute("href", link_tag),
        feed_type=FeedType.RSS if "rss" in feed_type else FeedType.ATOM,
    )


def discover_feed_links(html_content: str | None) -> list[HtmlFeedLink]:
    """
    Devuelve todos los links a feeds de la página, en orden de aparición.
    No deduplica: eso lo decide quien llama.
    """
    if not html_content:
        return []

    out = []
    for m in LINK_TAG_RE.finditer(html_content):
        link = feed_link_from_tag(m.group(0))
        if link is not None:
            out.append(link)
    return out
