"""Localized string tables and language negotiation."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from . import en, pirate
from .strings import LanguageSpec, StringTable

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = LanguageSpec(lang="en-US", table=en.STRINGS)

LANGUAGES: Sequence[LanguageSpec] = (
    DEFAULT_LANGUAGE,
    LanguageSpec(lang="pirate", table=pirate.STRINGS),
)


def _base(lang: str) -> str:
    return lang.split("-")[0].lower()


def find_language(lang: Optional[str], languages: Sequence[LanguageSpec] = LANGUAGES) -> LanguageSpec:
    """Return the best matching language for ``lang``.

    The exact tag wins, then the first entry sharing the base language
    (``en`` matches ``en-US``), then :data:`DEFAULT_LANGUAGE`.
    """

    requested = (lang or "").strip()
    for language in languages:
        if language.lang == requested:
            return language
    if requested:
        for language in languages:
            if _base(language.lang) == _base(requested):
                return language
    logger.debug("No string table for '%s', using %s", requested, DEFAULT_LANGUAGE.lang)
    return DEFAULT_LANGUAGE


def strings_for(lang: Optional[str]) -> StringTable:
    return find_language(lang).table


__all__ = [
    "DEFAULT_LANGUAGE",
    "LANGUAGES",
    "LanguageSpec",
    "StringTable",
    "find_language",
    "strings_for",
]
