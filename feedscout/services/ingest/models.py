from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class Medium(str, Enum):
    """Clasificación del contenido de un media:content / enclosure"""
    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"
    DOCUMENT = "document"
    EXECUTABLE = "executable"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Enclosure:
    url: str
    length: Optional[int]  # bytes
    media_type: str


@dataclass(frozen=True)
class MediaContent:
    """Elemento media:content (Media RSS)"""
    url: str
    medium: Medium
    media_type: str
    file_size: Optional[int]
    is_default: Optional[bool]
    duration: Optional[int]  # segundos
    width: Optional[int]
    height: Optional[int]


@dataclass(frozen=True)
class FeedItem:
    id: str
    title: str
    link: str
    description: str
    content: str
    author: str
    published: Optional[datetime]
    updated: Optional[datetime]
    hash: str
    categories: tuple[str, ...] = ()
    enclosures: tuple[Enclosure, ...] = ()
    media: tuple[MediaContent, ...] = ()


@dataclass(frozen=True)
class Feed:
    title: str
    link: str
    description: str
    language: str
    copyright: str
    last_updated: Optional[datetime]
    feed_type: str  # rss | atom | unknown
    version: str  # p.ej. rss20, atom10 (feedparser)
    image_url: str
    items: tuple[FeedItem, ...] = field(default_factory=tuple)
