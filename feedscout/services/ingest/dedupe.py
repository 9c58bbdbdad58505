import hashlib
from urllib.parse import urlsplit, urlunsplit


def canonical_url(url: str) -> str:
    """Sin fragmento ni slash final, en minúsculas"""
    raw = (url or "").strip().lower()
    if not raw:
        return ""
    try:
        parts = urlsplit(raw)
    except ValueError:
        return raw
    path = parts.path.rstrip("/")
    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, ""))


def canonical_hash(title: str, url: str) -> str:
    raw = (title or "").strip().lower() + "|" + canonical_url(url)
    return hashlib.sha256(raw.encode("utf-8")).hexdigest()
