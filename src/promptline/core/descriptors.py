"""Declarative prompt descriptors.

Every descriptor carries a ``kind`` tag. The dispatcher routes on that tag
alone, so a descriptor can never match more than one handling path.
Descriptors may be written as the dataclasses below or as plain mappings
with a ``type`` key, which :func:`coerce_descriptor` converts.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, field, fields
from typing import Any, Awaitable, Callable, Dict, FrozenSet, Mapping, Optional, Pattern, Sequence, Union

from .errors import PromptConfigurationError
from .resolver import Message
from .results import ResultView


class PromptKind(str, enum.Enum):
    """Tags for every descriptor variant."""

    LABEL = "label"
    DESCRIPTION = "description"
    COMPLETE = "complete"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    SUCCESS = "success"
    DEBUG = "debug"
    TRACE = "trace"
    TEXT = "text"
    NUMERIC = "numeric"
    YESNO = "yesno"
    CONFIRM = "confirm"
    DIVERGENCE = "divergence"

    def __str__(self) -> str:
        return self.value


TEXT_KINDS: FrozenSet[PromptKind] = frozenset(
    {
        PromptKind.LABEL,
        PromptKind.DESCRIPTION,
        PromptKind.COMPLETE,
        PromptKind.ERROR,
        PromptKind.WARNING,
        PromptKind.INFO,
        PromptKind.SUCCESS,
        PromptKind.DEBUG,
        PromptKind.TRACE,
    }
)

INPUT_KINDS: FrozenSet[PromptKind] = frozenset(
    {PromptKind.TEXT, PromptKind.NUMERIC, PromptKind.YESNO, PromptKind.CONFIRM}
)

Predicate = Callable[[ResultView], Union[bool, Awaitable[bool]]]
Validator = Callable[[Any], Union[Optional[str], Awaitable[Optional[str]]]]
Transform = Callable[[Any], Any]
Selector = Callable[[ResultView], Union[str, Awaitable[str]]]
AcknowledgementCallback = Callable[[ResultView, bool], Any]


@dataclass
class TextPrompt:
    """Informational text, optionally gated or acknowledged."""

    kind: PromptKind
    message: Message
    when: Optional[Predicate] = None
    required: bool = False
    acknowledge: bool = False
    on_acknowledgement: Optional[AcknowledgementCallback] = None

    def __post_init__(self) -> None:
        self.kind = _coerce_kind(self.kind)
        if self.kind not in TEXT_KINDS:
            raise PromptConfigurationError(f"'{self.kind}' is not an informational text kind")


@dataclass
class TextInput:
    name: str
    message: Message
    help_text: Optional[Message] = None
    default_value: Optional[str] = None
    required: bool = False
    choices: Optional[Mapping[str, str]] = None
    validator: Optional[Validator] = None
    pattern: Optional[Union[str, Pattern[str]]] = None
    format: Optional[str] = None
    transform: Optional[Transform] = None
    kind: PromptKind = field(default=PromptKind.TEXT, init=False)

    def compiled_pattern(self) -> Optional[Pattern[str]]:
        if self.pattern is None:
            return None
        if isinstance(self.pattern, str):
            return re.compile(self.pattern)
        return self.pattern


@dataclass
class NumericInput:
    name: str
    message: Message
    help_text: Optional[Message] = None
    default_value: Optional[float] = None
    required: bool = False
    integer: bool = False
    min: Optional[float] = None
    max: Optional[float] = None
    validator: Optional[Validator] = None
    transform: Optional[Transform] = None
    kind: PromptKind = field(default=PromptKind.NUMERIC, init=False)

    @property
    def has_range(self) -> bool:
        return self.min is not None and self.max is not None


@dataclass
class YesNoInput:
    name: str
    message: Message
    help_text: Optional[Message] = None
    default_value: bool = False
    required: bool = False
    negate: bool = False
    kind: PromptKind = field(default=PromptKind.YESNO, init=False)


@dataclass
class ConfirmInput:
    name: str
    message: Message
    kind: PromptKind = field(default=PromptKind.CONFIRM, init=False)


@dataclass
class Divergence:
    """Branch point choosing one named sub-list of descriptors."""

    select: Selector
    branches: Mapping[str, Sequence[Any]]
    kind: PromptKind = field(default=PromptKind.DIVERGENCE, init=False)


InputDescriptor = Union[TextInput, NumericInput, YesNoInput, ConfirmInput]
Descriptor = Union[TextPrompt, TextInput, NumericInput, YesNoInput, ConfirmInput, Divergence]

_KIND_ALIASES = {
    "warn": PromptKind.WARNING,
    "bool": PromptKind.YESNO,
    "text-async": PromptKind.TEXT,
    "numeric-async": PromptKind.NUMERIC,
}

_FACTORIES = {
    PromptKind.TEXT: TextInput,
    PromptKind.NUMERIC: NumericInput,
    PromptKind.YESNO: YesNoInput,
    PromptKind.CONFIRM: ConfirmInput,
    PromptKind.DIVERGENCE: Divergence,
}

_KEY_ALIASES = {
    "helpText": "help_text",
    "defaultValue": "default_value",
    "validationFn": "validator",
    "validationRegex": "pattern",
    "transformFn": "transform",
    "onAcknowledgement": "on_acknowledgement",
}


def _coerce_kind(value: Any) -> PromptKind:
    if isinstance(value, PromptKind):
        return value
    text = str(value)
    if text in _KIND_ALIASES:
        return _KIND_ALIASES[text]
    try:
        return PromptKind(text)
    except ValueError as exc:
        raise PromptConfigurationError(f"Unknown prompt type: {value!r}") from exc


def coerce_descriptor(entry: Any) -> Descriptor:
    """Return ``entry`` as a descriptor dataclass.

    Raises
    ------
    PromptConfigurationError
        If ``entry`` is neither a descriptor nor a mapping describing one.
    """

    if isinstance(entry, (TextPrompt, TextInput, NumericInput, YesNoInput, ConfirmInput, Divergence)):
        return entry
    if not isinstance(entry, Mapping):
        raise PromptConfigurationError(f"Cannot interpret prompt descriptor: {entry!r}")

    options: Dict[str, Any] = {_KEY_ALIASES.get(key, key): value for key, value in entry.items()}
    kind = _coerce_kind(options.pop("type", options.pop("kind", None)))

    if kind in TEXT_KINDS:
        factory: Any = TextPrompt
        options["kind"] = kind
    else:
        factory = _FACTORIES[kind]

    accepted = {item.name for item in fields(factory) if item.init}
    unknown = sorted(set(options) - accepted)
    if unknown:
        raise PromptConfigurationError(f"Unsupported options for '{kind}' prompt: {', '.join(unknown)}")
    try:
        return factory(**options)
    except TypeError as exc:
        raise PromptConfigurationError(f"Invalid '{kind}' prompt: {exc}") from exc


__all__ = [
    "PromptKind",
    "TEXT_KINDS",
    "INPUT_KINDS",
    "TextPrompt",
    "TextInput",
    "NumericInput",
    "YesNoInput",
    "ConfirmInput",
    "Divergence",
    "Descriptor",
    "InputDescriptor",
    "coerce_descriptor",
]
