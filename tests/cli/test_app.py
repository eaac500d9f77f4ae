import asyncio
import threading

import pytest
from click.testing import CliRunner

import promptline.cli as cli_module
from conftest import ScriptedUI
from promptline.cli import app
from promptline.cli.app import DEMO_PROMPTS, Cli, CliConfig
from promptline.core.descriptors import PromptKind, TextInput, TextPrompt
from promptline.core.errors import RetryLimitExceeded
from promptline.core.verbosity import Verbosity


def test_defaults_come_from_the_string_table():
    ui = ScriptedUI()
    cli = Cli(ui=ui)

    assert cli.display_name == "CLI"
    assert cli.banner == "CLI - Welcome to the CLI"
    assert cli.verbosity is Verbosity.INFO
    assert cli.lang == "en"


def test_arguments_configure_language_and_verbosity():
    cli = Cli(CliConfig(args=["--lang", "pirate", "--verbose", "0", "--host", "alpha"]), ui=ScriptedUI())

    assert cli.strings.default_name.startswith("AAAARG")
    assert cli.verbosity is Verbosity.ALL
    assert cli.args == {"host": "alpha"}
    assert cli.raw_args == ["--lang", "pirate", "--verbose", "0", "--host", "alpha"]


def test_prompt_prints_banner_once_then_runs():
    ui = ScriptedUI(lines=["bob"])
    cli = Cli(CliConfig(display_name="MSC", banner="My simple cli"), ui=ui)

    results = cli.prompt(
        [
            TextInput(name="user", message="Who?"),
            TextPrompt(PromptKind.SUCCESS, lambda results: f"Hi {results['user']}"),
        ]
    )

    assert results == {"user": "bob"}
    assert ui.output == ["My simple cli", "[MSC] Hi bob"]


def test_prompt_async_inside_running_loop():
    ui = ScriptedUI(lines=["x"])
    cli = Cli(ui=ui)

    async def main():
        return await cli.prompt_async([TextInput(name="a", message="A?")])

    assert asyncio.run(main()) == {"a": "x"}


def test_threaded_input_keeps_the_event_loop_running():
    answered = threading.Event()

    class WaitingUI(ScriptedUI):
        def read_line(self, text, default=""):
            # Only a task on the event loop can release this read.
            assert answered.wait(timeout=5)
            return super().read_line(text, default)

    ui = WaitingUI(lines=["x"])
    cli = Cli(CliConfig(threaded_input=True), ui=ui)

    async def release():
        await asyncio.sleep(0)
        answered.set()

    async def main():
        results, _ = await asyncio.gather(cli.prompt_async([TextInput(name="a", message="A?")]), release())
        return results

    assert asyncio.run(main()) == {"a": "x"}
    assert ui.prompts == ["[CLI] A? :"]


def test_request_reports_options_without_banner():
    ui = ScriptedUI(lines=["", "3"])
    cli = Cli(CliConfig(args=["--host", "alpha", "--verbose", "debug"]), ui=ui)

    run = cli.request(
        [
            {"type": "text", "name": "host", "message": "Host?"},
            {"type": "numeric", "name": "count", "message": "Count?", "integer": True},
        ]
    )

    assert run.data == {"host": "alpha", "count": 3}
    assert run.verbosity is Verbosity.DEBUG
    assert run.lang == "en"
    assert ui.output == []


def test_single_prompt_helpers():
    ui = ScriptedUI(lines=["typed", "4", "y"], confirms=[True])
    cli = Cli(ui=ui)

    assert cli.prompt_text("Say something", required=True) == "typed"
    assert cli.prompt_number("Pick", integer=True, min=1, max=5) == 4
    assert cli.prompt_yes_no("Sure?") is True
    assert cli.confirm("Really?") is True


def test_logging_helpers_respect_verbosity():
    ui = ScriptedUI()
    cli = Cli(CliConfig(args=["--verbose", "warning"], display_name="X"), ui=ui)

    cli.debug("hidden debug")
    cli.info("hidden info")
    cli.warn("visible warning")
    cli.error("visible error")
    cli.write("plain")
    cli.complete("done")

    assert ui.output == ["[X] visible warning", "[X] visible error", "[X] plain", "[X] done"]


def test_max_attempts_from_config():
    cli = Cli(CliConfig(max_attempts=1), ui=ScriptedUI(lines=[""]))

    with pytest.raises(RetryLimitExceeded):
        cli.prompt_text("Needed", required=True)


def test_demo_prompts_acknowledged_path():
    ui = ScriptedUI(lines=["y", "host01", ""], confirms=[True])

    results = app.main(CliConfig(display_name="DEMO"), ui=ui)

    assert results == {"okay": True, "host": "HOST01", "port": 8080, "ack_warning": True}
    assert "Warning was acknowledged" in ui.text
    assert "Warning was NOT acknowledged" not in ui.text
    assert "Which port should HOST01 listen on?" in ui.prompts[2]


def test_demo_prompts_not_acknowledged_path():
    ui = ScriptedUI(lines=["n", "h", "80"], confirms=[False])

    results = app.main(ui=ui, prompts=DEMO_PROMPTS)

    assert results["ack_warning"] is False
    assert "Warning was NOT acknowledged" in ui.text


def test_configure_logging_creates_directory(tmp_path, monkeypatch):
    captured = {}
    monkeypatch.setattr(app.logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    path = app.configure_logging(str(tmp_path / "logs"))

    assert (tmp_path / "logs").is_dir()
    assert captured["filename"] == path
    assert path.endswith("promptline.log")


def test_click_entry_point_forwards_options(monkeypatch, tmp_path):
    captured = {}
    monkeypatch.setattr(cli_module, "_app_main", lambda config: captured.update(config=config))

    result = CliRunner().invoke(
        cli_module.main,
        ["--log-dir", str(tmp_path), "--verbose", "debug", "--lang", "pirate", "--no-figlet", "--host", "alpha"],
    )

    assert result.exit_code == 0, result.output
    config = captured["config"]
    assert config.banner_font is None
    assert config.args == ["--host", "alpha"]
    assert config.verbosity == "debug"
    assert config.lang == "pirate"


def test_configured_verbosity_and_language_override_raw_args():
    config = CliConfig(args=["--verbose", "trace", "--lang", "en", "--host", "alpha"], verbosity="warning", lang="pirate")

    cli = Cli(config, ui=ScriptedUI())

    assert cli.verbosity is Verbosity.WARNING
    assert cli.lang == "pirate"
    assert cli.strings.no_help.startswith("AAAARG!!!")
    assert cli.args == {"host": "alpha"}


def test_click_entry_point_reports_engine_errors(monkeypatch, tmp_path):
    def failing(config):
        raise RetryLimitExceeded("host", 3)

    monkeypatch.setattr(cli_module, "_app_main", failing)

    result = CliRunner().invoke(cli_module.main, ["--log-dir", str(tmp_path)])

    assert result.exit_code == 1
    assert "rejected 3 responses" in result.output
