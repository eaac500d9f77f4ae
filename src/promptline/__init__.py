"""Declarative, localized command-line prompts."""

from promptline.cli.app import Cli, CliConfig, PromptRun
from promptline.core import (
    ChoiceConfigurationError,
    ConfirmInput,
    Divergence,
    NumericInput,
    ParsedArguments,
    PromptConfigurationError,
    PromptKind,
    PromptlineError,
    ResultAccumulator,
    RetryLimitExceeded,
    TextInput,
    TextPrompt,
    UserInterface,
    Verbosity,
    YesNoInput,
)
from promptline.loc import strings_for

__all__ = [
    "ChoiceConfigurationError",
    "Cli",
    "CliConfig",
    "ConfirmInput",
    "Divergence",
    "NumericInput",
    "ParsedArguments",
    "PromptConfigurationError",
    "PromptKind",
    "PromptRun",
    "PromptlineError",
    "ResultAccumulator",
    "RetryLimitExceeded",
    "TextInput",
    "TextPrompt",
    "UserInterface",
    "Verbosity",
    "YesNoInput",
    "strings_for",
]
