"""Verbosity levels and the display policy for console message kinds."""

from __future__ import annotations

import enum
from typing import Mapping, Optional, Union


class Verbosity(enum.IntEnum):
    """Verbosity levels ordered from most to least verbose."""

    ALL = 0
    TRACE = 1
    DEBUG = 2
    INFO = 3
    WARNING = 4
    ERROR = 5
    NONE = 6


DEFAULT_VERBOSITY = Verbosity.INFO

# Labels, descriptions and completions share the error floor so that only an
# explicit NONE silences them.
VERBOSITY_FLOORS: Mapping[str, Verbosity] = {
    "label": Verbosity.ERROR,
    "description": Verbosity.ERROR,
    "complete": Verbosity.ERROR,
    "error": Verbosity.ERROR,
    "warning": Verbosity.WARNING,
    "info": Verbosity.INFO,
    "success": Verbosity.INFO,
    "debug": Verbosity.DEBUG,
    "trace": Verbosity.TRACE,
}

_ALIASES = {"warn": Verbosity.WARNING}


def verbosity_floor(kind: str) -> Optional[Verbosity]:
    """Return the least verbose level at which ``kind`` is still shown."""

    return VERBOSITY_FLOORS.get(str(kind))


def should_display(kind: str, configured: Verbosity) -> bool:
    """Return ``True`` when a message of ``kind`` is shown at ``configured``.

    Kinds without a floor are always shown.
    """

    floor = verbosity_floor(kind)
    if floor is None:
        return True
    return Verbosity(configured) <= floor


def parse_verbosity(value: Union[None, int, str, Verbosity]) -> Verbosity:
    """Normalise a user supplied verbosity into a :class:`Verbosity`.

    Integers are clamped into the valid range, names are matched
    case-insensitively and ``None`` selects :data:`DEFAULT_VERBOSITY`.
    """

    if value is None:
        return DEFAULT_VERBOSITY
    if isinstance(value, Verbosity):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Invalid verbosity: {value!r}")
    if isinstance(value, int):
        return Verbosity(min(max(value, Verbosity.ALL), Verbosity.NONE))

    text = str(value).strip()
    try:
        return parse_verbosity(int(text))
    except ValueError:
        pass

    lowered = text.lower()
    if lowered in _ALIASES:
        return _ALIASES[lowered]
    try:
        return Verbosity[lowered.upper()]
    except KeyError as exc:
        raise ValueError(f"Invalid verbosity: {value!r}") from exc


__all__ = [
    "Verbosity",
    "DEFAULT_VERBOSITY",
    "VERBOSITY_FLOORS",
    "verbosity_floor",
    "should_display",
    "parse_verbosity",
]
