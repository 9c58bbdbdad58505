"""
Nombres de días y meses por idioma para dateutil.

Los feeds en alemán, francés, etc. publican fechas tipo RFC-822 con nombres
locales ("Do, 22 Dez 2016 17:36:00 +0000"). dateutil solo entiende inglés salvo
que se le pase un parserinfo con las tablas del idioma.
"""

from __future__ import annotations

import re
from typing import Union

from dateutil import parser as dateutil_parser

EN = dateutil_parser.parserinfo


def _with_english(english: list, localized: list) -> list:
    """Nombres en inglés + los del idioma, como hace un parser con cultura"""
    return [tuple(en) + tuple(loc) for en, loc in zip(english, localized)]


class GermanParserInfo(dateutil_parser.parserinfo):
    WEEKDAYS = _with_english(EN.WEEKDAYS, [
        ("Mo", "Montag"),
        ("Di", "Dienstag"),
        ("Mi", "Mittwoch"),
        ("Do", "Donnerstag"),
        ("Fr", "Freitag"),
        ("Sa", "Samstag"),
        ("So", "Sonntag"),
    ])
    MONTHS = _with_english(EN.MONTHS, [
        ("Jan", "Januar", "Jän", "Jänner"),
        ("Feb", "Februar"),
        ("Mär", "Mrz", "März"),
        ("Apr", "April"),
        ("Mai",),
        ("Jun", "Juni"),
        ("Jul", "Juli"),
        ("Aug", "August"),
        ("Sep", "Sept", "September"),
        ("Okt", "Oktober"),
        ("Nov", "November"),
        ("Dez", "Dezember"),
    ])
    JUMP = dateutil_parser.parserinfo.JUMP + ["um", "Uhr"]


# "mar" es martes/mardi/martedì y también marzo/mars: se deja solo como mes,
# el día de la semana no aporta nada al resultado.
class FrenchParserInfo(dateutil_parser.parserinfo):
    WEEKDAYS = _with_english(EN.WEEKDAYS, [
        ("lun", "lundi"),
        ("mardi",),
        ("mer", "mercredi"),
        ("jeu", "jeudi"),
        ("ven", "vendredi"),
        ("sam", "samedi"),
        ("dim", "dimanche"),
    ])
    MONTHS = _with_english(EN.MONTHS, [
        ("janv", "janvier"),
        ("févr", "fevr", "février", "fevrier"),
        ("mars", "mar"),
        ("avr", "avril"),
        ("mai",),
        ("juin",),
        ("juil", "juillet"),
        ("août", "aout"),
        ("sept", "septembre"),
        ("oct", "octobre"),
        ("nov", "novembre"),
        ("déc", "dec", "décembre", "decembre"),
    ])
    JUMP = dateutil_parser.parserinfo.JUMP + ["le", "à"]


class SpanishParserInfo(dateutil_parser.parserinfo):
    WEEKDAYS = _with_english(EN.WEEKDAYS, [
        ("lun", "lunes"),
        ("martes",),
        ("mié", "mie", "miércoles", "miercoles"),
        ("jue", "jueves"),
        ("vie", "viernes"),
        ("sáb", "sab", "sábado", "sabado"),
        ("dom", "domingo"),
    ])
    MONTHS = _with_english(EN.MONTHS, [
        ("ene", "enero"),
        ("feb", "febrero"),
        ("mar", "marzo"),
        ("abr", "abril"),
        ("may", "mayo"),
        ("jun", "junio"),
        ("jul", "julio"),
        ("ago", "agosto"),
        ("sep", "sept", "septiembre"),
        ("oct", "octubre"),
        ("nov", "noviembre"),
        ("dic", "diciembre"),
    ])
    JUMP = dateutil_parser.parserinfo.JUMP + ["de", "del"]


class ItalianParserInfo(dateutil_parser.parserinfo):
    WEEKDAYS = _with_english(EN.WEEKDAYS, [
        ("lun", "lunedì", "lunedi"),
        ("martedì", "martedi"),
        ("mer", "mercoledì", "mercoledi"),
        ("gio", "giovedì", "giovedi"),
        ("ven", "venerdì", "venerdi"),
        ("sab", "sabato"),
        ("dom", "domenica"),
    ])
    MONTHS = _with_english(EN.MONTHS, [
        ("gen", "gennaio"),
        ("feb", "febbraio"),
        ("mar", "marzo"),
        ("apr", "aprile"),
        ("mag", "maggio"),
        ("giu", "giugno"),
        ("lug", "luglio"),
        ("ago", "agosto"),
        ("set", "settembre"),
        ("ott", "ottobre"),
        ("nov", "novembre"),
        ("dic", "dicembre"),
    ])


class DutchParserInfo(dateutil_parser.parserinfo):
    WEEKDAYS = _with_english(EN.WEEKDAYS, [
        ("ma", "maandag"),
        ("di", "dinsdag"),
        ("wo", "woensdag"),
        ("do", "donderdag"),
        ("vr", "vrijdag"),
        ("za", "zaterdag"),
        ("zo", "zondag"),
    ])
    MONTHS = _with_english(EN.MONTHS, [
        ("jan", "januari"),
        ("feb", "februari"),
        ("mrt", "maart"),
        ("apr", "april"),
        ("mei",),
        ("jun", "juni"),
        ("jul", "juli"),
        ("aug", "augustus"),
        ("sep", "sept", "september"),
        ("okt", "oktober"),
        ("nov", "november"),
        ("dec", "december"),
    ])


DEFAULT_PARSERINFO = dateutil_parser.parserinfo()

# Formatos europeos: 05.12.2016 es 5 de diciembre
PARSERINFOS: dict[str, dateutil_parser.parserinfo] = {
    "en": DEFAULT_PARSERINFO,
    "de": GermanParserInfo(dayfirst=True),
    "fr": FrenchParserInfo(dayfirst=True),
    "es": SpanishParserInfo(dayfirst=True),
    "it": ItalianParserInfo(dayfirst=True),
    "nl": DutchParserInfo(dayfirst=True),
}

DateLocale = Union[str, dateutil_parser.parserinfo, None]


def get_parserinfo(locale: DateLocale = None) -> dateutil_parser.parserinfo:
    """
    "de", "de-DE", "de_DE" -> tablas en alemán.
    Idioma desconocido o None -> inglés.
    """
    if isinstance(locale, dateutil_parser.parserinfo):
        return locale
    if not locale:
        return DEFAULT_PARSERINFO
    lang = re.split(r"[-_.]", str(locale).strip(), maxsplit=1)[0].lower()
    return PARSERINFOS.get(lang, DEFAULT_PARSERINFO)
