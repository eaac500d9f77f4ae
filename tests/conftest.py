from __future__ import annotations

import re
from typing import Iterable, List, Optional

from promptline.core.console import Console
from promptline.core.verbosity import Verbosity
from promptline.loc import strings_for

ANSI = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return ANSI.sub("", text)


class ScriptedUI:
    """User interface that replays canned answers and records everything shown."""

    def __init__(self, lines: Iterable[str] = (), confirms: Iterable[bool] = ()) -> None:
        self.lines: List[str] = list(lines)
        self.confirms: List[bool] = list(confirms)
        self.prompts: List[str] = []
        self.defaults: List[str] = []
        self.confirm_prompts: List[str] = []
        self.output: List[str] = []

    def read_line(self, text: str, default: str = "") -> str:
        self.prompts.append(strip_ansi(text))
        self.defaults.append(default)
        if not self.lines:
            raise AssertionError(f"Unexpected prompt: {strip_ansi(text)}")
        return self.lines.pop(0)

    def read_confirm(self, text: str) -> bool:
        self.confirm_prompts.append(strip_ansi(text))
        if not self.confirms:
            raise AssertionError(f"Unexpected confirmation: {strip_ansi(text)}")
        return self.confirms.pop(0)

    def echo(self, message: str = "") -> None:
        self.output.append(strip_ansi(message))

    @property
    def text(self) -> str:
        return "\n".join(self.output)


class AsyncScriptedUI(ScriptedUI):
    """Same as :class:`ScriptedUI` but every read is a coroutine."""

    async def read_line(self, text: str, default: str = "") -> str:  # type: ignore[override]
        return ScriptedUI.read_line(self, text, default)

    async def read_confirm(self, text: str) -> bool:  # type: ignore[override]
        return ScriptedUI.read_confirm(self, text)


def make_console(ui, *, verbosity: Verbosity = Verbosity.INFO, lang: Optional[str] = "en") -> Console:
    return Console(ui, strings_for(lang), display_name="TST", verbosity=verbosity)
