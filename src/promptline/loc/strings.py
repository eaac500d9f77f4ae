"""Shape of a localized string table."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class StringTable:
    """Fixed user-facing strings used by the console and the prompt engine."""

    default_name: str
    default_banner: str
    text_choice_not_char: str
    text_choice_not_lower: str
    no_help: str
    invalid_response: str
    bad_format: str
    not_an_integer: str
    range_error: str
    true_string: str
    false_string: str
    acknowledge: str


@dataclass(frozen=True)
class LanguageSpec:
    lang: str
    table: StringTable


__all__ = ["StringTable", "LanguageSpec"]
