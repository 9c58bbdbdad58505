from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Optional

from bs4 import BeautifulSoup
from dateutil import parser as dateutil_parser

from feedscout.services.ingest.locales import DateLocale, get_parserinfo
from feedscout.services.ingest.models import Medium

# Zonas RFC-822 y algunas habituales en feeds (segundos respecto a UTC)
TZ_ABBREVIATIONS: dict[str, int] = {
    "UT": 0,
    "UTC": 0,
    "GMT": 0,
    "Z": 0,
    "WET": 0,
    "BST": 3600,
    "CET": 3600,
    "MEZ": 3600,
    "CEST": 7200,
    "MESZ": 7200,
    "EET": 7200,
    "EEST": 10800,
    "EST": -18000,
    "EDT": -14400,
    "CST": -21600,
    "CDT": -18000,
    "MST": -25200,
    "MDT": -21600,
    "PST": -28800,
    "PDT": -25200,
    "AKST": -32400,
    "AKDT": -28800,
    "HST": -36000,
    "JST": 32400,
    "AEST": 36000,
    "AEDT": 39600,
}

INT_RE = re.compile(r"^\s*[+-]?[0-9]+\s*$")

MEDIUMS = {m.value: m for m in Medium if m is not Medium.UNKNOWN}


def clean_html(text: str | None, max_chars: int = 8000) -> str:
    if not text:
        return ""
    soup = BeautifulSoup(text, "lxml")
    cleaned = soup.get_text(" ", strip=True)
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    return cleaned[:max_chars]


def _tzinfos(name: str | None, offset: int | None) -> Optional[tzinfo]:
    # dateutil llama esto en cada parse; una zona desconocida cuenta como fallo
    if offset is not None:
        return timezone.utc if offset == 0 else timezone(timedelta(seconds=offset))
    if name:
        seconds = TZ_ABBREVIATIONS.get(name.upper())
        if seconds is None:
            raise ValueError(f"unknown timezone {name!r}")
        return timezone(timedelta(seconds=seconds))
    return None


def _try_parse(text: str, info: dateutil_parser.parserinfo, assume_utc: bool) -> Optional[datetime]:
    if not text:
        return None
    try:
        dt = dateutil_parser.parser(info).parse(text, tzinfos=_tzinfos)
        if dt.tzinfo is None:
            # sin zona: UTC si se indica, si no hora local del sistema
            dt = dt.replace(tzinfo=timezone.utc) if assume_utc else dt.astimezone()
        return dt.astimezone(timezone.utc)
    except (ValueError, OverflowError, OSError, TypeError):
        return None


def parse_datetime_lenient(text: str | None, locale: DateLocale = None) -> Optional[datetime]:
    """
    Parsea fechas de feeds reales, que rara vez respetan RFC-822 / ISO-8601.

    Intentos, en orden (el primero que funcione gana):
      1. el string completo
      2. lo que viene después de la primera coma ("Do, 22 Dez 2016 ...")
      3. sin el último token (zona mal escrita, texto basura), asumiendo UTC
      4. igual que 3 pero sin asumir UTC

    Devuelve datetime en UTC o None. Nunca lanza.
    """
    if text is None or not str(text).strip():
        return None
    text = str(text)
    info = get_parserinfo(locale)

    dt = _try_parse(text, info, assume_utc=False)
    if dt is not None:
        return dt

    if "," in text:
        dt = _try_parse(text.split(",", 1)[1].strip(), info, assume_utc=False)
        if dt is not None:
            return dt

    if " " in text:
        truncated = text.rsplit(" ", 1)[0].strip()
        dt = _try_parse(truncated, info, assume_utc=True)
        if dt is None:
            dt = _try_parse(truncated, info, assume_utc=False)

    return dt


def parse_int_lenient(text: str | None) -> Optional[int]:
    if text is None:
        return None
    text = str(text)
    if not INT_RE.match(text):
        return None
    return int(text)


def parse_bool_lenient(text: str | None) -> Optional[bool]:
    """Solo "true"/"false" (sin distinguir mayúsculas). Cualquier otra cosa -> None"""
    if not text:
        return None
    value = str(text).lower()
    if value == "true":
        return True
    if value == "false":
        return False
    return None


def parse_medium_lenient(text: str | None) -> Medium:
    if not text:
        return Medium.UNKNOWN
    return MEDIUMS.get(str(text).lower(), Medium.UNKNOWN)
