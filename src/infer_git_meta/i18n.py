"""Locale services: name collation and list joining."""

from __future__ import annotations

import functools
from typing import Protocol

import icu
from babel import Locale, UnknownLocaleError
from babel.lists import format_list

DEFAULT_LOCALE = "en"


class Collator(Protocol):
    def compare(self, a: str, b: str) -> int: ...


class ListFormatter(Protocol):
    def format(self, items: list[str]) -> str: ...


def normalize_locales(locales: str | list[str] | tuple[str, ...] | None) -> tuple[str, ...]:
    if isinstance(locales, str):
        items = [locales]
    else:
        items = list(locales or [])
    out = tuple(s.strip() for s in items if isinstance(s, str) and s.strip())
    return out or (DEFAULT_LOCALE,)


def resolve_locale(locales: str | list[str] | tuple[str, ...] | None) -> Locale:
    """Pick the first requested locale Babel knows, falling back to English."""
    for tag in normalize_locales(locales):
        try:
            return Locale.parse(tag.replace("-", "_"))
        except (ValueError, UnknownLocaleError):
            continue
    return Locale.parse(DEFAULT_LOCALE)


@functools.lru_cache(maxsize=None)
def _icu_collator(locale_id: str) -> icu.Collator:
    return icu.Collator.createInstance(icu.Locale(locale_id))


class IcuCollator:
    """
    ICU collation tailored to the first usable requested locale.

    Accented and non-Latin names sort where that locale expects them: `Ö`
    beside `O` in English, after `Z` in Swedish.
    """

    def __init__(self, locales: str | list[str] | tuple[str, ...] | None = None) -> None:
        self.locale = resolve_locale(locales)
        self._collator = _icu_collator(str(self.locale))

    def compare(self, a: str, b: str) -> int:
        return self._collator.compare(a, b)


class BabelListFormatter:
    def __init__(self, locales: str | list[str] | tuple[str, ...] | None = None, style: str = "standard") -> None:
        self.locale = resolve_locale(locales)
        self.style = style

    def format(self, items: list[str]) -> str:
        if not items:
            return ""
        return format_list(list(items), style=self.style, locale=self.locale)
