"""Resolution of literal or computed prompt text and user callbacks."""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Optional, Union

from .results import ResultView

MessageFunc = Callable[[ResultView], Union[str, Awaitable[str]]]
Message = Union[str, MessageFunc]


async def call_maybe_async(func: Callable[..., Any], *args: Any) -> Any:
    """Call ``func`` and await the result when it is awaitable."""

    result = func(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


async def maybe_await(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


async def resolve_message(message: Optional[Message], results: ResultView) -> Optional[str]:
    """Return the concrete text for ``message``.

    Strings are returned untouched. Callables receive the results view and
    may be coroutines; any exception they raise propagates to the caller.
    """

    if message is None or isinstance(message, str):
        return message
    resolved = await call_maybe_async(message, results)
    return "" if resolved is None else str(resolved)


__all__ = ["Message", "MessageFunc", "call_maybe_async", "maybe_await", "resolve_message"]
