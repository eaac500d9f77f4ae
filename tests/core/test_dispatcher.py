import asyncio

import pytest

from conftest import AsyncScriptedUI, ScriptedUI, make_console
from promptline.core.arguments import parse_arguments
from promptline.core.descriptors import Divergence, PromptKind, TextInput, TextPrompt, YesNoInput
from promptline.core.dispatcher import Dispatcher
from promptline.core.errors import PromptConfigurationError
from promptline.core.results import ResultAccumulator
from promptline.core.validation import InputPipeline
from promptline.core.verbosity import Verbosity


def run(ui, prompts, *, verbosity=Verbosity.INFO, argv=None, results=None):
    console = make_console(ui, verbosity=verbosity)
    dispatcher = Dispatcher(console, InputPipeline(console), arguments=parse_arguments(argv))
    accumulator = results or ResultAccumulator()
    asyncio.run(dispatcher.run(prompts, accumulator))
    return accumulator.to_dict()


def branching_prompts():
    return [
        YesNoInput(name="ack", message="Acknowledged?"),
        Divergence(
            select=lambda results: "acknowledged" if results["ack"] else "notAcknowledged",
            branches={
                "acknowledged": [TextPrompt(PromptKind.INFO, "Warning was acknowledged", required=True)],
                "notAcknowledged": [TextPrompt(PromptKind.WARNING, "Warning was NOT acknowledged", required=True)],
            },
        ),
    ]


def test_divergence_runs_only_the_selected_branch():
    ui = ScriptedUI(lines=["y"])

    results = run(ui, branching_prompts())

    assert results == {"ack": True}
    assert "Warning was acknowledged" in ui.text
    assert "NOT acknowledged" not in ui.text


def test_divergence_other_branch():
    ui = ScriptedUI(lines=["n"])

    run(ui, branching_prompts())

    assert "Warning was NOT acknowledged" in ui.text
    assert "Warning was acknowledged" not in ui.text


def test_unknown_branch_key_is_a_no_op():
    ui = ScriptedUI(lines=["after"])
    prompts = [
        Divergence(select=lambda results: "missing", branches={"present": [TextInput(name="never", message="?")]}),
        TextInput(name="next", message="Next?"),
    ]

    assert run(ui, prompts) == {"next": "after"}


def test_branches_share_the_parent_results():
    ui = ScriptedUI(lines=["inner", "outer"])

    async def select(results):
        return "go"

    prompts = [
        Divergence(select=select, branches={"go": [TextInput(name="inner", message="Inner?")]}),
        TextInput(name="outer", message=lambda results: f"After {results['inner']}?"),
    ]

    assert run(ui, prompts) == {"inner": "inner", "outer": "outer"}
    assert ui.prompts[1] == "[TST] After inner? :"


def test_nested_divergences():
    ui = ScriptedUI(lines=["deep"])
    inner = Divergence(select=lambda results: "b", branches={"b": [TextInput(name="leaf", message="Leaf?")]})
    outer = Divergence(select=lambda results: "a", branches={"a": [inner]})

    assert run(ui, [outer]) == {"leaf": "deep"}


def test_same_name_overwrites_in_traversal_order():
    ui = ScriptedUI(lines=["first", "second"])
    prompts = [
        TextInput(name="value", message="One?"),
        Divergence(select=lambda results: "x", branches={"x": [TextInput(name="value", message="Two?")]}),
    ]

    assert run(ui, prompts) == {"value": "second"}


def test_callbacks_cannot_mutate_results():
    ui = ScriptedUI(lines=["a"])

    def select(results):
        results["sneaky"] = True
        return "x"

    prompts = [TextInput(name="a", message="A?"), Divergence(select=select, branches={})]

    with pytest.raises(TypeError):
        run(ui, prompts)


def test_text_is_filtered_by_verbosity():
    ui = ScriptedUI()
    prompts = [
        TextPrompt(PromptKind.DEBUG, "debug detail"),
        TextPrompt(PromptKind.INFO, "info detail"),
        TextPrompt(PromptKind.ERROR, "error detail"),
    ]

    run(ui, prompts, verbosity=Verbosity.WARNING)

    assert ui.output == ["[TST] error detail"]


def test_required_text_ignores_verbosity_and_when():
    ui = ScriptedUI()
    calls = []

    def when(results):
        calls.append(results)
        return False

    run(ui, [TextPrompt(PromptKind.TRACE, "always", required=True, when=when)], verbosity=Verbosity.NONE)

    assert ui.output == ["[TST] always"]
    assert calls == []


def test_when_predicate_overrides_verbosity():
    ui = ScriptedUI(lines=["y"])

    async def only_if_ok(results):
        return results["ok"]

    prompts = [
        YesNoInput(name="ok", message="OK?"),
        TextPrompt(PromptKind.DEBUG, "shown by predicate", when=only_if_ok),
        TextPrompt(PromptKind.ERROR, "hidden by predicate", when=lambda results: False),
    ]

    run(ui, prompts, verbosity=Verbosity.NONE)

    assert "shown by predicate" in ui.text
    assert "hidden by predicate" not in ui.text


def test_acknowledgement_takes_precedence_and_reports_outcome():
    ui = ScriptedUI(confirms=[True])
    seen = []

    def on_ack(results, acknowledged):
        seen.append((dict(results), acknowledged))
        return {"ack_warning": acknowledged}

    prompt = TextPrompt(
        PromptKind.WARNING,
        lambda results: "This is a warning",
        required=False,
        acknowledge=True,
        on_acknowledgement=on_ack,
    )

    results = run(ui, [prompt], verbosity=Verbosity.NONE)

    assert ui.confirm_prompts == ["[TST] This is a warning Acknowledge message?"]
    assert seen == [({}, True)]
    assert results == {"ack_warning": True}


def test_acknowledgement_without_callback_leaves_results_alone():
    ui = AsyncScriptedUI(confirms=[False])

    results = run(ui, [TextPrompt(PromptKind.INFO, "Read me", acknowledge=True)])

    assert results == {}
    assert ui.confirm_prompts == ["[TST] Read me Acknowledge message?"]


def test_async_acknowledgement_callback_is_awaited():
    ui = ScriptedUI(confirms=[False])

    async def on_ack(results, acknowledged):
        await asyncio.sleep(0)
        return {"acknowledged": acknowledged}

    results = run(ui, [TextPrompt(PromptKind.INFO, "Read me", acknowledge=True, on_acknowledgement=on_ack)])

    assert results == {"acknowledged": False}


def test_plain_mapping_descriptors():
    ui = ScriptedUI(lines=["alpha", "7"], confirms=[True])
    prompts = [
        {"type": "text", "name": "host", "message": "Host?", "transformFn": str.upper},
        {"type": "numeric", "name": "count", "message": "Count?", "integer": True, "min": 1, "max": 10},
        {"type": "confirm", "name": "go", "message": "Go?"},
        {"type": "info", "message": lambda results: f"Host is {results['host']}", "required": True},
    ]

    assert run(ui, prompts) == {"host": "ALPHA", "count": 7, "go": True}
    assert "Host is ALPHA" in ui.text


def test_arguments_supply_defaults():
    ui = ScriptedUI(lines=[""])

    results = run(ui, [TextInput(name="host", message="Host?", default_value="ignored")], argv=["--host", "from-args"])

    assert results == {"host": "from-args"}
    assert ui.defaults == ["from-args"]


def test_configuration_errors_surface_when_reached():
    ui = ScriptedUI(lines=["first"])
    prompts = [
        TextInput(name="first", message="First?"),
        {"type": "sparkle", "message": "?"},
    ]

    with pytest.raises(PromptConfigurationError):
        run(ui, prompts)
    assert ui.prompts == ["[TST] First? :"]


def test_callback_errors_propagate():
    ui = ScriptedUI()

    def select(_results):
        raise LookupError("selector failed")

    with pytest.raises(LookupError, match="selector failed"):
        run(ui, [Divergence(select=select, branches={})])
