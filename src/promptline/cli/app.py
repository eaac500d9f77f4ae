import asyncio
import logging
import os
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, List, Optional, Sequence

from promptline.core.arguments import ParsedArguments, parse_arguments
from promptline.core.console import Console
from promptline.core.descriptors import ConfirmInput, NumericInput, TextInput, YesNoInput
from promptline.core.dispatcher import Dispatcher
from promptline.core.results import ResultAccumulator
from promptline.core.ui import ClickUserInterface, ThreadedUserInterface, UserInterface
from promptline.core.validation import InputPipeline
from promptline.core.verbosity import Verbosity, parse_verbosity
from promptline.cli.ui_helpers import CLIUIHelpers
from promptline.loc import LanguageSpec, find_language


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def configure_logging(log_dir: str = "./log", level: int = logging.DEBUG) -> str:
    """Send log records to ``<log_dir>/promptline.log`` and return that path."""

    os.makedirs(log_dir, exist_ok=True)
    filename = os.path.join(log_dir, "promptline.log")
    logging.basicConfig(level=level, format=LOG_FORMAT, filename=filename)
    return filename


@dataclass
class CliConfig:
    """Presentation and behaviour settings for a :class:`Cli`."""

    args: Sequence[str] = field(default_factory=list)
    banner: Optional[str] = None
    color: Optional[str] = "blue"
    display_name: Optional[str] = None
    separator: str = ":"
    max_attempts: Optional[int] = None
    verbosity: Optional[str] = None
    lang: Optional[str] = None
    banner_font: Optional[str] = None
    threaded_input: bool = False


@dataclass
class PromptRun:
    """Values collected by :meth:`Cli.request` with the options in effect."""

    data: Dict[str, Any]
    verbosity: Verbosity
    lang: str


class Cli:
    """Console front end running declarative prompt lists."""

    def __init__(
        self,
        config: Optional[CliConfig] = None,
        *,
        ui: Optional[UserInterface] = None,
        helpers: Optional[CLIUIHelpers] = None,
    ):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.config = config or CliConfig()
        self.ui = ui or ClickUserInterface()
        if self.config.threaded_input:
            self.ui = ThreadedUserInterface(self.ui)
        self.arguments: ParsedArguments = self._parse_arguments()
        self.language: LanguageSpec = find_language(self.arguments.lang)
        self.strings = self.language.table
        self.display_name = self.config.display_name or self.strings.default_name
        self.banner = self.config.banner or f"{self.display_name} - {self.strings.default_banner}"
        self.helpers = helpers or CLIUIHelpers(
            font=self.config.banner_font or "slant",
            color=self.config.color,
        )
        self.console = Console(
            self.ui,
            self.strings,
            display_name=self.display_name,
            color=self.config.color,
            separator=self.config.separator,
            verbosity=self.arguments.verbosity,
        )
        self.pipeline = InputPipeline(self.console, max_attempts=self.config.max_attempts)
        self.dispatcher = Dispatcher(self.console, self.pipeline, arguments=self.arguments)
        self.logger.info(
            "Initialized %s (lang=%s, verbosity=%s)",
            self.display_name,
            self.language.lang,
            self.verbosity.name,
        )

    def _parse_arguments(self) -> ParsedArguments:
        """Parse the raw args; explicit ``verbosity``/``lang`` settings win."""

        arguments = parse_arguments(self.config.args)
        if self.config.verbosity is not None:
            arguments = replace(arguments, verbosity=parse_verbosity(self.config.verbosity))
        if self.config.lang:
            arguments = replace(arguments, lang=self.config.lang)
        return arguments

    ###-------------------------------------------------------------###
    ###                     Options                                 ###
    ###-------------------------------------------------------------###

    @property
    def raw_args(self) -> List[str]:
        return list(self.config.args)

    @property
    def args(self) -> Dict[str, Any]:
        return dict(self.arguments.values)

    @property
    def lang(self) -> str:
        return self.arguments.lang

    @property
    def verbosity(self) -> Verbosity:
        return self.arguments.verbosity

    @property
    def name(self) -> str:
        return self.console.name

    ###-------------------------------------------------------------###
    ###                     Output                                  ###
    ###-------------------------------------------------------------###

    def print_banner(self) -> None:
        if self.config.banner_font:
            self.helpers.display_banner(self.ui.echo, self.display_name, self.banner)
        else:
            self.console.print_banner(self.banner)

    def describe(self, message: str) -> None:
        self.console.describe(message)

    def write(self, message: str) -> None:
        self.console.write(message)

    def complete(self, message: str) -> None:
        self.console.complete(message)

    def error(self, message: str) -> None:
        self.console.error(message)

    def warn(self, message: str) -> None:
        self.console.warn(message)

    def info(self, message: str) -> None:
        self.console.info(message)

    def success(self, message: str) -> None:
        self.console.success(message)

    def debug(self, message: str) -> None:
        self.console.debug(message)

    def trace(self, message: str) -> None:
        self.console.trace(message)

    def print_results(self, results: Dict[str, Any]) -> None:
        self.ui.echo(self.helpers.render_results(results))

    ###-------------------------------------------------------------###
    ###                     Prompt lists                            ###
    ###-------------------------------------------------------------###

    async def prompt_async(self, prompts: Iterable[Any]) -> Dict[str, Any]:
        """Print the banner, run ``prompts`` and return the collected values.

        A synchronous UI such as :class:`ClickUserInterface` blocks the event
        loop while it waits for input. Set ``CliConfig.threaded_input`` when
        the loop runs other tasks so reads happen on a worker thread.
        """

        self.print_banner()
        results = ResultAccumulator()
        await self.dispatcher.run(prompts, results)
        self.logger.info("Prompt run collected %d field(s)", len(results))
        return results.to_dict()

    def prompt(self, prompts: Iterable[Any]) -> Dict[str, Any]:
        """Synchronous wrapper around :meth:`prompt_async`.

        Must not be called from a running event loop.
        """

        return asyncio.run(self.prompt_async(prompts))

    async def request_async(self, requests: Iterable[Any]) -> PromptRun:
        results = ResultAccumulator()
        await self.dispatcher.run(requests, results)
        return PromptRun(data=results.to_dict(), verbosity=self.verbosity, lang=self.lang)

    def request(self, requests: Iterable[Any]) -> PromptRun:
        """Run ``requests`` without a banner and report the options in effect."""

        return asyncio.run(self.request_async(requests))

    ###-------------------------------------------------------------###
    ###                     Single prompts                          ###
    ###-------------------------------------------------------------###

    def _snapshot(self):
        return ResultAccumulator().snapshot()

    async def prompt_text_async(self, message, **options) -> Any:
        descriptor = TextInput(name=options.pop("name", ""), message=message, **options)
        return await self.pipeline.read_text(descriptor, self._snapshot())

    async def prompt_number_async(self, message, **options) -> Any:
        descriptor = NumericInput(name=options.pop("name", ""), message=message, **options)
        return await self.pipeline.read_number(descriptor, self._snapshot())

    async def prompt_yes_no_async(self, message, **options) -> bool:
        descriptor = YesNoInput(name=options.pop("name", ""), message=message, **options)
        return await self.pipeline.read_yes_no(descriptor, self._snapshot())

    async def confirm_async(self, message) -> bool:
        return await self.pipeline.read_confirm(ConfirmInput(name="", message=message), self._snapshot())

    def prompt_text(self, message, **options) -> Any:
        return asyncio.run(self.prompt_text_async(message, **options))

    def prompt_number(self, message, **options) -> Any:
        return asyncio.run(self.prompt_number_async(message, **options))

    def prompt_yes_no(self, message, **options) -> bool:
        return asyncio.run(self.prompt_yes_no_async(message, **options))

    def confirm(self, message) -> bool:
        return asyncio.run(self.confirm_async(message))


def _remember_acknowledgement(_results, acknowledged: bool) -> Dict[str, Any]:
    return {"ack_warning": acknowledged}


DEMO_PROMPTS: List[Any] = [
    YesNoInput(name="okay", message="Are you okay?"),
    {
        "type": "text",
        "name": "host",
        "message": "What is the device name?",
        "helpText": "Up to 15 letters or digits, stored in upper case.",
        "validationRegex": r"^[a-zA-Z0-9]{1,15}$",
        "format": "Hostname of 1 to 15 alpha-numeric characters",
        "transformFn": str.upper,
        "required": True,
    },
    {
        "type": "numeric",
        "name": "port",
        "message": lambda results: f"Which port should {results['host']} listen on?",
        "defaultValue": 8080,
        "integer": True,
        "min": 1,
        "max": 65535,
    },
    {
        "type": "warning",
        "message": lambda results: "This is a warning",
        "required": True,
        "acknowledge": True,
        "onAcknowledgement": _remember_acknowledgement,
    },
    {
        "type": "divergence",
        "select": lambda results: "acknowledged" if results.get("ack_warning") else "notAcknowledged",
        "branches": {
            "acknowledged": [
                {"type": "info", "message": "Warning was acknowledged", "required": True},
            ],
            "notAcknowledged": [
                {"type": "warning", "message": "Warning was NOT acknowledged", "required": True},
            ],
        },
    },
    {"type": "debug", "message": "Demo prompts finished"},
]


def main(
    config: Optional[CliConfig] = None,
    *,
    ui: Optional[UserInterface] = None,
    prompts: Optional[Sequence[Any]] = None,
    cli: Optional[Cli] = None,
) -> Dict[str, Any]:
    """Run the demonstration prompts and print what was collected."""

    cmd = cli or Cli(config, ui=ui)
    results = cmd.prompt(DEMO_PROMPTS if prompts is None else prompts)
    cmd.complete("Done.")
    cmd.print_results(results)
    return results


__all__ = ["Cli", "CliConfig", "PromptRun", "DEMO_PROMPTS", "configure_logging", "main"]
