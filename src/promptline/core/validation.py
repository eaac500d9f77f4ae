"""Input collection with validation, transformation and retries.

Each ``read_*`` coroutine keeps asking until the response passes every
check. A rejected response prints an explanatory line and the same prompt
is shown again. Answering ``?`` shows help and never counts as an attempt.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional, Union

from .console import Console
from .descriptors import (
    ConfirmInput,
    InputDescriptor,
    NumericInput,
    PromptKind,
    TextInput,
    YesNoInput,
)
from .errors import PromptConfigurationError, RetryLimitExceeded
from .resolver import call_maybe_async, maybe_await, resolve_message
from .results import ResultView

logger = logging.getLogger(__name__)

HELP_REQUEST = "?"
YES = "y"
NO = "n"

_TRUTHY = {"y", "yes", "true", "on", "1"}


def parse_number(text: str) -> Optional[float]:
    """Return ``text`` as a finite float, or ``None`` when it is not one."""

    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def format_number(value: Union[int, float]) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def coerce_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


class _Attempts:
    """Counts rejected responses for one descriptor."""

    def __init__(self, name: Optional[str], limit: Optional[int]) -> None:
        self.name = name
        self.limit = limit
        self.count = 0

    def reject(self, reason: str) -> None:
        self.count += 1
        logger.info("Rejected response for '%s' (%s), attempt %d", self.name, reason, self.count)
        if self.limit is not None and self.count >= self.limit:
            raise RetryLimitExceeded(self.name, self.count)


class InputPipeline:
    """Collects validated values for input descriptors."""

    def __init__(self, console: Console, *, max_attempts: Optional[int] = None) -> None:
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.console = console
        self.max_attempts = max_attempts

    @property
    def strings(self):
        return self.console.strings

    async def collect(self, descriptor: InputDescriptor, results: ResultView, default: Any = None) -> Any:
        """Route ``descriptor`` to the matching reader and return its value."""

        kind = descriptor.kind
        if kind is PromptKind.TEXT:
            return await self.read_text(descriptor, results, default=default)
        if kind is PromptKind.NUMERIC:
            return await self.read_number(descriptor, results, default=default)
        if kind is PromptKind.YESNO:
            return await self.read_yes_no(descriptor, results, default=default)
        if kind is PromptKind.CONFIRM:
            return await self.read_confirm(descriptor, results)
        raise PromptConfigurationError(f"'{kind}' prompts do not collect input")

    async def _read_line(self, text: str, default_text: str) -> str:
        response = await maybe_await(self.console.ui.read_line(text, default_text))
        clean = (response if isinstance(response, str) else "").strip()
        return clean or default_text.strip()

    def _show_help(self, help_text: Optional[str], choices: Optional[Mapping[str, str]] = None) -> None:
        if help_text:
            self.console.describe(help_text)
        if choices:
            self.console.list_choices(choices)
        if not help_text and not choices:
            self.console.warn(self.strings.no_help)

    async def read_text(self, descriptor: TextInput, results: ResultView, default: Any = None) -> Any:
        strings = self.strings
        if default is None:
            default = descriptor.default_value
        default_text = "" if default is None else str(default)

        message = await resolve_message(descriptor.message, results) or ""
        help_text = await resolve_message(descriptor.help_text, results)
        hint = self.console.choice_hint(descriptor.choices, default_text)
        prompt_text = self.console.prompt_message(message, hint)
        pattern = descriptor.compiled_pattern()
        attempts = _Attempts(descriptor.name, self.max_attempts)

        while True:
            response = await self._read_line(prompt_text, default_text)

            if response == HELP_REQUEST:
                self._show_help(help_text, descriptor.choices)
                continue

            if descriptor.required and not response:
                self.console.describe(strings.invalid_response)
                attempts.reject("required")
                continue

            if descriptor.choices is not None and response not in descriptor.choices:
                self.console.describe(strings.invalid_response)
                attempts.reject("choice")
                continue

            if descriptor.validator is not None:
                error = await call_maybe_async(descriptor.validator, response)
                if error:
                    self.console.describe(str(error))
                    attempts.reject("validator")
                    continue

            if pattern is not None and not pattern.search(response):
                self.console.describe(f"{strings.bad_format} {descriptor.format or pattern.pattern}")
                attempts.reject("format")
                continue

            if descriptor.transform is not None:
                return await call_maybe_async(descriptor.transform, response)
            return response

    async def read_number(self, descriptor: NumericInput, results: ResultView, default: Any = None) -> Any:
        strings = self.strings
        if default is None:
            default = descriptor.default_value
        if isinstance(default, bool):
            # A bare ``--flag`` argument carries no number.
            default_text = ""
        elif isinstance(default, (int, float)):
            default_text = format_number(default)
        else:
            default_text = str(default or "")

        message = await resolve_message(descriptor.message, results) or ""
        help_text = await resolve_message(descriptor.help_text, results)
        prompt_text = self.console.prompt_message(message)
        attempts = _Attempts(descriptor.name, self.max_attempts)

        while True:
            response = await self._read_line(prompt_text, default_text)

            if response == HELP_REQUEST:
                self._show_help(help_text)
                continue

            number: Optional[Union[int, float]] = parse_number(response)
            if number is None:
                if descriptor.required:
                    self.console.describe(strings.invalid_response)
                    attempts.reject("not a number")
                    continue
                # Optional prompts carry NaN into the remaining checks.
                number = math.nan

            if descriptor.integer:
                if not float(number).is_integer():
                    self.console.describe(strings.not_an_integer)
                    attempts.reject("not an integer")
                    continue
                number = int(number)

            if descriptor.has_range and not (descriptor.min <= number <= descriptor.max):
                bounds = f"{format_number(descriptor.min)}, {format_number(descriptor.max)}"
                self.console.describe(f"{strings.range_error} {bounds}.")
                attempts.reject("out of range")
                continue

            if not response:
                return None

            if descriptor.validator is not None:
                error = await call_maybe_async(descriptor.validator, number)
                if error:
                    self.console.describe(str(error))
                    attempts.reject("validator")
                    continue

            if descriptor.transform is not None:
                return await call_maybe_async(descriptor.transform, number)
            return number

    async def read_yes_no(self, descriptor: YesNoInput, results: ResultView, default: Any = None) -> bool:
        if default is None:
            default = descriptor.default_value
        choices = {YES: self.strings.true_string, NO: self.strings.false_string}
        question = TextInput(
            name=descriptor.name,
            message=descriptor.message,
            help_text=descriptor.help_text,
            required=descriptor.required,
            choices=choices,
        )
        response = await self.read_text(question, results, default=YES if coerce_bool(default) else NO)
        value = response == YES
        return not value if descriptor.negate else value

    async def read_confirm(self, descriptor: ConfirmInput, results: ResultView) -> bool:
        message = await resolve_message(descriptor.message, results) or ""
        prompt_text = self.console.prompt_message(message)
        return bool(await maybe_await(self.console.ui.read_confirm(prompt_text)))


__all__ = [
    "InputPipeline",
    "parse_number",
    "format_number",
    "coerce_bool",
]
