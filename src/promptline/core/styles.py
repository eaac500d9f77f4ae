"""Colour and emphasis applied to console text."""

from __future__ import annotations

from typing import Callable, Dict

from termcolor import colored

StyleFunc = Callable[[str], str]


def _plain(text: str) -> str:
    return text


TEXT_STYLES: Dict[str, StyleFunc] = {
    "label": _plain,
    "description": lambda text: colored(text, color="cyan"),
    "complete": lambda text: colored(text, color="green"),
    "error": lambda text: colored(text, color="red"),
    "warning": lambda text: colored(text, color="yellow"),
    "info": lambda text: colored(text, color="blue"),
    "success": lambda text: colored(text, color="green"),
    "debug": lambda text: colored(text, color="dark_grey", attrs=["dark"]),
    "trace": lambda text: colored(text, color="dark_grey", attrs=["dark"]),
}


def style(kind: str, text: str) -> str:
    """Return ``text`` decorated for the message ``kind``.

    Unknown kinds are returned unchanged.
    """

    return TEXT_STYLES.get(str(kind), _plain)(text)


def bold(text: str, color: str | None = None) -> str:
    return colored(text, color=color, attrs=["bold"])


def tint(text: str, color: str | None) -> str:
    return colored(text, color=color)


__all__ = ["TEXT_STYLES", "style", "bold", "tint"]
