"""Exceptions raised by the prompt engine."""

from __future__ import annotations


class PromptlineError(Exception):
    """Base class for errors raised by :mod:`promptline`."""


class PromptConfigurationError(PromptlineError, ValueError):
    """Raised when a prompt descriptor is malformed.

    These errors point at a mistake by the author of the prompt list, not at
    the user's input, so they are never retried.
    """


class ChoiceConfigurationError(PromptConfigurationError):
    """Raised when a choices mapping uses keys that are not single lowercase characters."""


class RetryLimitExceeded(PromptlineError):
    """Raised when a prompt is rejected more times than the configured limit."""

    def __init__(self, name: str | None, attempts: int) -> None:
        label = name or "<prompt>"
        super().__init__(f"Prompt '{label}' rejected {attempts} responses")
        self.name = name
        self.attempts = attempts


__all__ = [
    "PromptlineError",
    "PromptConfigurationError",
    "ChoiceConfigurationError",
    "RetryLimitExceeded",
]
