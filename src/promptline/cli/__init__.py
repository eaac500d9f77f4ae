"""Command-line interface entry points for promptline."""

from __future__ import annotations

import click

from promptline.core.errors import PromptlineError

from .app import Cli, CliConfig, PromptRun, configure_logging, main as _app_main


@click.command(context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
@click.option("--verbose", type=str, default=None, help="Verbosity level name (all..none) or number (0-6).")
@click.option("--lang", type=str, default=None, help="Language tag used for built-in messages.")
@click.option("--name", "display_name", type=str, default=None, help="Name shown before every message.")
@click.option("--banner", type=str, default=None, help="Banner printed before the prompts.")
@click.option("--max-attempts", type=click.IntRange(min=1), default=None, help="Give up after this many rejected answers.")
@click.option("--log-dir", type=click.Path(file_okay=False), default="./log", show_default=True, help="Directory for log files.")
@click.option("--figlet/--no-figlet", default=True, help="Render the banner with pyfiglet.")
@click.pass_context
def main(
    ctx: click.Context,
    verbose: str | None,
    lang: str | None,
    display_name: str | None,
    banner: str | None,
    max_attempts: int | None,
    log_dir: str,
    figlet: bool,
) -> None:
    """Run the demonstration prompts.

    Unrecognised ``--key value`` options become default answers for the
    prompt with the same name.
    """

    configure_logging(log_dir)

    configuration = CliConfig(
        args=list(ctx.args),
        verbosity=verbose,
        lang=lang,
        banner=banner,
        display_name=display_name,
        max_attempts=max_attempts,
        banner_font="slant" if figlet else None,
    )
    try:
        _app_main(config=configuration)
    except PromptlineError as exc:
        raise click.ClickException(str(exc)) from exc


__all__ = ["Cli", "CliConfig", "PromptRun", "main"]
