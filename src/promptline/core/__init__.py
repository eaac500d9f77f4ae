"""Prompt orchestration engine."""

from .arguments import ParsedArguments, parse_arguments
from .console import Console
from .descriptors import (
    ConfirmInput,
    Divergence,
    NumericInput,
    PromptKind,
    TextInput,
    TextPrompt,
    YesNoInput,
    coerce_descriptor,
)
from .dispatcher import Dispatcher
from .errors import (
    ChoiceConfigurationError,
    PromptConfigurationError,
    PromptlineError,
    RetryLimitExceeded,
)
from .results import ResultAccumulator
from .ui import ClickUserInterface, ThreadedUserInterface, UserInterface
from .validation import InputPipeline
from .verbosity import Verbosity, parse_verbosity, should_display

__all__ = [
    "ChoiceConfigurationError",
    "ClickUserInterface",
    "ThreadedUserInterface",
    "ConfirmInput",
    "Console",
    "Dispatcher",
    "Divergence",
    "InputPipeline",
    "NumericInput",
    "ParsedArguments",
    "PromptConfigurationError",
    "PromptKind",
    "PromptlineError",
    "ResultAccumulator",
    "RetryLimitExceeded",
    "TextInput",
    "TextPrompt",
    "UserInterface",
    "Verbosity",
    "YesNoInput",
    "coerce_descriptor",
    "parse_arguments",
    "parse_verbosity",
    "should_display",
]
