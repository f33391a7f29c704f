import logging
from io import StringIO

import pytest
from rich.console import Console

from fli import App, CallbackContext
from fli.exceptions import MissingValueError, UnknownCommandError
from fli.parser.value import Str
from fli.parser.value_types import Flag, RequiredMultiple, RequiredSingle
from fli.signals import PreservedOptionSignal
from fli.themes import get_one_theme


@pytest.fixture
def output():
    return StringIO()


@pytest.fixture
def app(output):
    console = Console(file=output, width=120, color_system=None, theme=get_one_theme())
    app = App("fm", "1.2.3", "File manager", console=console)
    app.add_version_option()
    app.add_debug_option()
    app.add_option("name", "Name", "-n", "--name", RequiredSingle(Str()))
    return app


@pytest.fixture(autouse=True)
def reset_logger_level():
    logger = logging.getLogger("fli")
    level = logger.level
    yield
    logger.setLevel(level)


def test_move_end_to_end(app):
    seen = {}

    def move(context: CallbackContext) -> None:
        seen["paths"] = context.get_option_value("-p").as_strs()
        seen["arguments"] = context.get_arguments()
        seen["app"] = context.app

    command = app.command("move", "Move files")
    command.add_option("path", "Paths", "-p", "--path", RequiredMultiple())
    command.set_expected_positional_args(0)
    command.set_callback(move)

    assert app.run(["move", "-p", "a.txt", "b.txt"]) == 0
    assert seen == {"paths": ["a.txt", "b.txt"], "arguments": [], "app": app}
    assert app.options.get("path") == ["a.txt", "b.txt"]


def test_resolve_raises_missing_value(app):
    with pytest.raises(MissingValueError) as excinfo:
        app.resolve(["-n"])
    assert excinfo.value.option == "name"


def test_run_reports_errors(app, output):
    assert app.run(["-n"]) == 1
    assert "Missing required value for option 'name'" in output.getvalue()


def test_run_renders_suggestions(app, output):
    for name in ("status", "commit", "checkout"):
        app.command(name)
    with pytest.raises(UnknownCommandError):
        app.resolve(["statu"])
    assert app.run(["statu"]) == 1
    text = output.getvalue()
    assert "Unknown command: 'statu'" in text
    assert "Did you mean:" in text
    assert "status" in text


def test_version_option(app, output):
    called = []
    app.set_callback(called.append)
    with pytest.raises(PreservedOptionSignal):
        app.resolve(["--version"])
    assert app.run(["-V"]) == 0
    assert output.getvalue().strip() == "fm v1.2.3"
    assert called == []


def test_help_option(app, output):
    sub = app.command("sync", "Synchronise folders")
    sub.add_option("target", "Target folder", "-t", "--target", RequiredSingle())
    sub.set_expected_positional_args(2)
    assert app.run(["sync", "--help"]) == 0
    text = output.getvalue()
    assert "Command: sync" in text
    assert "fm sync [ARGUMENT] [ARGUMENT] [OPTIONS]" in text
    assert "fm sync [OPTIONS] -- [ARGUMENT] [ARGUMENT]" in text
    assert "--target" in text
    assert "Target folder" in text


def test_callback_return_code(app):
    app.command("fail").set_callback(lambda context: 3)
    app.command("ok").set_callback(lambda context: True)
    assert app.run(["fail"]) == 3
    assert app.run(["ok"]) == 0


def test_command_without_callback_renders_help(app, output):
    app.command("remote", "Manage remotes").subcommand("add")
    assert app.run(["remote"]) == 0
    assert "Command: remote" in output.getvalue()


def test_callback_exceptions_propagate(app):
    def boom(context):
        raise RuntimeError("boom")

    app.command("boom").set_callback(boom)
    with pytest.raises(RuntimeError):
        app.run(["boom"])


def test_debug_option_is_inherited_and_enables_debug(app):
    app.command("status").set_callback(lambda context: None)
    assert app.run(["status", "-D"]) == 0
    assert app.options.get("debug") is True
    assert logging.getLogger("fli").level == logging.DEBUG


def test_root_positional_args(app):
    received = []
    app.set_expected_positional_args(1)
    app.set_callback(lambda context: received.append(context.get_argument_at(0)))
    assert app.run(["file.txt"]) == 0
    assert received == ["file.txt"]
    assert app.run([]) == 1


def test_mark_inheritable(app):
    app.add_option("color", "Color", "", "--color", Flag())
    app.mark_inheritable_many(["--color", "-n"])
    child = app.command("paint")
    assert "--color" in child.options
    assert "-n" in child.options


def test_run_defaults_to_sys_argv(app, monkeypatch):
    called = []
    app.set_callback(called.append)
    monkeypatch.setattr("sys.argv", ["fm", "-n", "box"])
    assert app.run() == 0
    assert called[0].get_option_value("name").as_str() == "box"


def test_app_builder_chains(app):
    assert app.add_option("quiet", "Quiet", "-q", "--quiet", Flag()) is app
    assert app.root.name == "fm"
    assert app.root.description == "File manager"
    assert str(app).startswith("App(name='fm', version='1.2.3'")


def test_app_name_with_spaces(output):
    console = Console(file=output, width=120, color_system=None, theme=get_one_theme())
    app = App("my tool", "1.0", console=console)
    app.add_version_option()
    assert app.root.name == "my tool"
    assert app.run(["--version"]) == 0
    assert "my tool v1.0" in output.getvalue()
