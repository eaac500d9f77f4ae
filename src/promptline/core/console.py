"""Name-prefixed console output gated by the configured verbosity."""

from __future__ import annotations

from typing import Callable, Mapping, Optional

from ..loc import StringTable
from .errors import ChoiceConfigurationError
from .styles import bold, style, tint
from .ui import UserInterface
from .verbosity import Verbosity, should_display


class Console:
    """Render messages as ``[name] message`` through a :class:`UserInterface`."""

    def __init__(
        self,
        ui: UserInterface,
        strings: StringTable,
        *,
        display_name: str,
        color: Optional[str] = "blue",
        separator: str = ":",
        verbosity: Verbosity = Verbosity.INFO,
    ) -> None:
        self.ui = ui
        self.strings = strings
        self.display_name = display_name
        self.color = color
        self.separator = separator
        self.verbosity = verbosity

    @property
    def name(self) -> str:
        return tint(f"[{self.display_name}]", self.color)

    def formatted_print(self, message: str, formatter: Callable[[str], str]) -> None:
        self.ui.echo(f"{self.name} {formatter(message)}")

    def level_print(self, kind: str, message: str) -> None:
        if not should_display(kind, self.verbosity):
            return
        self.show(kind, message)

    def show(self, kind: str, message: str) -> None:
        """Print ``message`` styled for ``kind`` without consulting the verbosity."""

        self.formatted_print(message, lambda text: style(kind, text))

    def print_banner(self, banner: str) -> None:
        self.ui.echo(banner)

    def describe(self, message: str) -> None:
        self.formatted_print(message, lambda text: bold(tint(text, self.color)))

    def write(self, message: str) -> None:
        self.level_print("label", message)

    def complete(self, message: str) -> None:
        self.level_print("complete", message)

    def error(self, message: str) -> None:
        self.level_print("error", message)

    def warn(self, message: str) -> None:
        self.level_print("warning", message)

    def info(self, message: str) -> None:
        self.level_print("info", message)

    def success(self, message: str) -> None:
        self.level_print("success", message)

    def debug(self, message: str) -> None:
        self.level_print("debug", message)

    def trace(self, message: str) -> None:
        self.level_print("trace", message)

    def check_choices(self, choices: Mapping[str, str]) -> None:
        """Raise :class:`ChoiceConfigurationError` for malformed choice keys."""

        for key in choices:
            if len(key) != 1:
                raise ChoiceConfigurationError(self.strings.text_choice_not_char)
            if key.lower() != key:
                raise ChoiceConfigurationError(self.strings.text_choice_not_lower)

    def choice_hint(self, choices: Optional[Mapping[str, str]], default: Optional[str] = None) -> str:
        """Return the ``[a/B/?]`` hint, upper-casing the default choice."""

        if not choices:
            return ""
        self.check_choices(choices)
        keys = [key.upper() if default and key == default else key for key in choices]
        return f"[{'/'.join(keys)}/?]"

    def list_choices(self, choices: Mapping[str, str]) -> None:
        indent = "\n" + " " * (len(self.display_name) + 3)
        self.describe(indent.join(f"{key} - {description}" for key, description in choices.items()))

    def prompt_message(self, message: str, hint: str = "") -> str:
        text = f"{self.name} {message} {self.separator} {hint}".rstrip()
        return bold(text)


__all__ = ["Console"]
