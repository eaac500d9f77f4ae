"""User interface abstractions for reading input from the console."""

from __future__ import annotations

import asyncio
import sys
from typing import Protocol

import click


class UserInterface(Protocol):
    """Protocol describing the console IO operations the engine relies on.

    Implementations may return plain values or awaitables; the engine awaits
    whatever it receives.
    """

    def read_line(self, text: str, default: str = "") -> str:
        """Read one line of input, returning ``default`` on an empty answer."""

    def read_confirm(self, text: str) -> bool:
        """Ask a yes/no question and return ``True`` on acceptance."""

    def echo(self, message: str = "") -> None:
        """Write a line to the console."""


class ClickUserInterface:
    """Default :mod:`click`-backed implementation of :class:`UserInterface`."""

    def __init__(self, *, stdin=None) -> None:
        self._stdin = stdin or sys.stdin

    def _interactive(self) -> bool:
        isatty = getattr(self._stdin, "isatty", None)
        return bool(isatty and isatty())

    def read_line(self, text: str, default: str = "") -> str:
        try:
            return click.prompt(
                text,
                default=default,
                show_default=False,
                prompt_suffix=" ",
                type=str,
            )
        except click.Abort:
            # Without a terminal an exhausted stdin reads as an empty answer.
            if self._interactive():
                raise
            return ""

    def read_confirm(self, text: str) -> bool:
        try:
            return click.confirm(text, default=False)
        except click.Abort:
            if self._interactive():
                raise
            return False

    def echo(self, message: str = "") -> None:
        click.echo(message)


class ThreadedUserInterface:
    """Run the blocking reads of another interface on a worker thread.

    Lets prompt lists share an event loop with other tasks; output is
    written directly.
    """

    def __init__(self, ui: UserInterface) -> None:
        self.ui = ui

    async def read_line(self, text: str, default: str = "") -> str:
        return await asyncio.to_thread(self.ui.read_line, text, default)

    async def read_confirm(self, text: str) -> bool:
        return await asyncio.to_thread(self.ui.read_confirm, text)

    def echo(self, message: str = "") -> None:
        self.ui.echo(message)


__all__ = ["UserInterface", "ClickUserInterface", "ThreadedUserInterface"]
