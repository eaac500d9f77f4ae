"""Walks a list of prompt descriptors and fills a result accumulator."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Optional

from .arguments import ParsedArguments
from .console import Console
from .descriptors import (
    INPUT_KINDS,
    TEXT_KINDS,
    Divergence,
    InputDescriptor,
    PromptKind,
    TextPrompt,
    coerce_descriptor,
)
from .errors import PromptConfigurationError
from .resolver import call_maybe_async, resolve_message
from .results import ResultAccumulator
from .styles import style
from .validation import InputPipeline
from .verbosity import should_display

logger = logging.getLogger(__name__)


class Dispatcher:
    """Runs prompt descriptors in order, one at a time.

    Informational text is displayed or suppressed, input prompts are passed
    through the :class:`InputPipeline` and divergences recurse into the
    selected branch with the same accumulator. User callbacks only ever see
    a read-only snapshot of the results.
    """

    def __init__(
        self,
        console: Console,
        pipeline: InputPipeline,
        *,
        arguments: Optional[ParsedArguments] = None,
    ) -> None:
        self.console = console
        self.pipeline = pipeline
        self.arguments = arguments or ParsedArguments()

    async def run(self, prompts: Iterable[Any], results: ResultAccumulator) -> ResultAccumulator:
        for entry in prompts:
            descriptor = coerce_descriptor(entry)
            kind = descriptor.kind
            logger.debug("Dispatching '%s' prompt", kind)

            if kind is PromptKind.DIVERGENCE:
                await self.diverge(descriptor, results)
            elif kind in TEXT_KINDS:
                await self.display(descriptor, results)
            elif kind in INPUT_KINDS:
                await self.collect(descriptor, results)
            else:
                raise PromptConfigurationError(f"Unhandled prompt kind: {kind}")
        return results

    async def collect(self, descriptor: InputDescriptor, results: ResultAccumulator) -> Any:
        default = self.arguments.get(descriptor.name)
        value = await self.pipeline.collect(descriptor, results.snapshot(), default=default)
        results.set(descriptor.name, value)
        return value

    async def should_show(self, descriptor: TextPrompt, results: ResultAccumulator) -> bool:
        """Apply acknowledge > required > when > verbosity, in that order."""

        if descriptor.acknowledge or descriptor.required:
            return True
        if descriptor.when is not None:
            return bool(await call_maybe_async(descriptor.when, results.snapshot()))
        return should_display(str(descriptor.kind), self.console.verbosity)

    async def display(self, descriptor: TextPrompt, results: ResultAccumulator) -> None:
        if not await self.should_show(descriptor, results):
            logger.debug("Suppressed '%s' text", descriptor.kind)
            return

        message = await resolve_message(descriptor.message, results.snapshot()) or ""
        if descriptor.acknowledge:
            await self.acknowledge(descriptor, message, results)
        else:
            self.console.show(str(descriptor.kind), message)

    async def acknowledge(self, descriptor: TextPrompt, message: str, results: ResultAccumulator) -> bool:
        """Ask for acknowledgement of ``message`` and report it to the callback.

        A mapping returned by the callback is written into the results.
        """

        console = self.console
        styled = style(str(descriptor.kind), message)
        text = f"{console.name} {styled} {console.strings.acknowledge}"
        outcome = bool(await call_maybe_async(console.ui.read_confirm, text))
        logger.debug("Acknowledgement outcome: %s", outcome)

        if descriptor.on_acknowledgement is not None:
            updates = await call_maybe_async(descriptor.on_acknowledgement, results.snapshot(), outcome)
            if updates is not None:
                if not isinstance(updates, Mapping):
                    raise PromptConfigurationError("Acknowledgement callbacks must return a mapping or None")
                results.update(updates)
        return outcome

    async def diverge(self, descriptor: Divergence, results: ResultAccumulator) -> None:
        key = await call_maybe_async(descriptor.select, results.snapshot())
        branch = descriptor.branches.get(key)
        if branch is None:
            logger.debug("No branch named %r, skipping divergence", key)
            return
        logger.debug("Entering branch %r", key)
        await self.run(branch, results)


__all__ = ["Dispatcher"]
