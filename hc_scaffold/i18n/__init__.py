"""
Translation tables and the active locale.

The active locale is process-wide, like a page's language: templates read
it through ``get_text`` while they render.
"""

from contextlib import contextmanager
from typing import Dict, Iterator, List

from hc_scaffold.config import DEFAULT_LOCALE
from hc_scaffold.i18n.strings import STRINGS

_strings: Dict[str, Dict[str, str]] = {}
_locale = DEFAULT_LOCALE


def load_strings(table: Dict[str, Dict[str, str]]) -> None:
    """Merge a ``{locale: {key: text}}`` table into the loaded strings."""
    for locale, strings in table.items():
        _strings.setdefault(locale, {}).update(strings)


def list_locales() -> List[str]:
    return list(_strings)


def set_locale(locale: str) -> None:
    global _locale
    if locale not in _strings:
        raise ValueError(f"Unknown locale '{locale}'")
    _locale = locale


def get_locale() -> str:
    return _locale


def get_text(key: str, *args: object) -> str:
    """Translate ``key`` in the active locale.

    Falls back to the default locale, then to the key itself. Positional
    ``args`` fill ``{0}``-style placeholders.
    """
    text = _strings.get(_locale, {}).get(key)
    if text is None:
        text = _strings.get(DEFAULT_LOCALE, {}).get(key, key)
    if args:
        text = text.format(*args)
    return text


@contextmanager
def using_locale(locale: str) -> Iterator[str]:
    """Temporarily switch the active locale."""
    previous = get_locale()
    set_locale(locale)
    try:
        yield locale
    finally:
        set_locale(previous)


load_strings(STRINGS)

__all__ = [
    "load_strings",
    "list_locales",
    "set_locale",
    "get_locale",
    "get_text",
    "using_locale",
]
