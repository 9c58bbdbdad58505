# feedscout/core/errors.py
from __future__ import annotations


class FeedScoutError(Exception):
    """Base de todos los errores del paquete"""


class UrlNotFoundError(FeedScoutError, ValueError):
    """
    No se pudo obtener una URL absoluta a partir de la página y el link.

    No es reintentable: la entrada está mal formada.
    """

    def __init__(self, page_url: str | None, link_url: str | None = None):
        self.page_url = page_url
        self.link_url = link_url
        if link_url is None:
            msg = f"Could not get an absolute url out of {page_url!r}"
        else:
            msg = f"Could not get the absolute url out of {page_url!r} and {link_url!r}"
        super().__init__(msg)


class FeedFetchError(FeedScoutError):
    def __init__(self, url: str, reason: str = ""):
        self.url = url
        self.reason = reason
        msg = f"Could not download {url}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)


class FeedParseError(FeedScoutError):
    pass
