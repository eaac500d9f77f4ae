"""Raw command-line arguments used as default values for prompts."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .verbosity import Verbosity, parse_verbosity

DEFAULT_LANG = "en"


@dataclass(frozen=True)
class ParsedArguments:
    """Arguments split into engine options and prompt default values."""

    verbosity: Verbosity = Verbosity.INFO
    lang: str = DEFAULT_LANG
    values: Mapping[str, Any] = field(default_factory=dict)
    positionals: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)

    def __contains__(self, name: object) -> bool:
        return name in self.values


def _split_options(argv: Sequence[str]) -> Tuple[Dict[str, Any], List[str]]:
    values: Dict[str, Any] = {}
    positionals: List[str] = []
    tokens = list(argv)
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if token == "--":
            positionals.extend(tokens[index:])
            break
        if not token.startswith("--"):
            positionals.append(token)
            continue

        key, sep, inline = token[2:].partition("=")
        if sep:
            values[key] = inline
        elif index < len(tokens) and not tokens[index].startswith("--"):
            values[key] = tokens[index]
            index += 1
        elif key.startswith("no-"):
            values[key[3:]] = False
        else:
            values[key] = True
    return values, positionals


def parse_arguments(argv: Optional[Sequence[str]] = None) -> ParsedArguments:
    """Parse ``argv`` into :class:`ParsedArguments`.

    ``--verbose`` and ``--lang`` configure the engine; every other option is
    kept as a raw value keyed by its name.
    """

    values, positionals = _split_options(argv or ())
    verbose = values.pop("verbose", None)
    lang = values.pop("lang", None)
    if isinstance(verbose, bool):
        verbose = None
    if not isinstance(lang, str) or not lang:
        lang = DEFAULT_LANG
    return ParsedArguments(
        verbosity=parse_verbosity(verbose),
        lang=lang,
        values=values,
        positionals=tuple(positionals),
    )


__all__ = ["DEFAULT_LANG", "ParsedArguments", "parse_arguments"]
