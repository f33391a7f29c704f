import pytest
from pydantic import ValidationError

from fli.command import Command
from fli.exceptions import (
    CommandAlreadyExistsError,
    OptionAlreadyExistsError,
    OptionNotFoundError,
    PositionalArgCountError,
)
from fli.help import help_callback
from fli.parser.value import Int
from fli.parser.value_types import Flag, RequiredSingle


def test_command_has_help_option():
    command = Command(name="tool")
    entry = command.get_preserved_option("--help")
    assert entry is not None
    assert entry.flags == ("-h", "--help")
    assert entry.callback is help_callback
    assert command.get_preserved_option("-h") is entry


def test_command_without_help():
    command = Command(name="tool", add_help=False)
    assert command.get_preserved_option("help") is None
    assert len(command.options) == 0


@pytest.mark.parametrize("name", ["", "  ", "-x"])
def test_invalid_command_names(name):
    with pytest.raises(ValidationError):
        Command(name=name)


def test_root_name_may_contain_spaces():
    root = Command(name="my tool")
    assert root.name == "my tool"


def test_subcommand_name_must_not_contain_spaces():
    root = Command(name="my tool")
    with pytest.raises(ValueError):
        root.subcommand("two words")
    with pytest.raises(ValueError):
        root.add_subcommand(Command(name="two words"))
    assert not root.has_subcommands()


def test_negative_positional_count_rejected():
    with pytest.raises(ValidationError):
        Command(name="tool", expected_positional_args=-1)
    with pytest.raises(ValueError):
        Command(name="tool").set_expected_positional_args(-2)


def test_builder_methods_chain():
    command = (
        Command(name="serve")
        .add_option("port", "Port", "-p", "--port", RequiredSingle(Int(0)))
        .add_option("reload", "Reload", "-r", "--reload", Flag())
        .set_expected_positional_args(1)
        .set_callback(lambda context: None)
    )
    assert "--port" in command.options
    assert command.expected_positional_args == 1
    assert command.strict_positional
    assert command.callback is not None


def test_duplicate_option_rejected():
    command = Command(name="tool")
    with pytest.raises(OptionAlreadyExistsError):
        command.add_option("usage", "Clashes with help", "-h", "--usage", Flag())


def test_subcommand_registration_order_and_lookup():
    root = Command(name="git")
    status = root.subcommand("status", "Show status")
    root.subcommand("commit")
    root.subcommand("checkout")
    assert root.subcommand_names() == ["status", "commit", "checkout"]
    assert root.get_subcommand("status") is status
    assert root.get_subcommand("stat") is None
    assert root.has_subcommand("commit")
    assert root.has_subcommands()
    assert not status.has_subcommands()
    assert status.description == "Show status"


def test_duplicate_subcommand_rejected():
    root = Command(name="git")
    root.subcommand("status")
    with pytest.raises(CommandAlreadyExistsError):
        root.subcommand("status")
    with pytest.raises(CommandAlreadyExistsError):
        root.add_subcommand(Command(name="status"))


def test_add_subcommand_requires_command():
    with pytest.raises(TypeError):
        Command(name="git").add_subcommand("status")


def test_nested_subcommands():
    root = Command(name="git")
    remote = root.subcommand("remote")
    add = remote.subcommand("add")
    assert root.get_subcommand("remote").get_subcommand("add") is add


def test_inheritable_options_copied_to_new_subcommands():
    root = Command(name="app")
    root.add_option("verbose", "Verbose", "-v", "--verbose", Flag(), inheritable=True)
    root.add_option("quiet", "Quiet", "-q", "--quiet", Flag())
    early = root.subcommand("early")
    root.mark_inheritable("-q")
    late = root.subcommand("late")
    assert "verbose" in early.options
    assert "quiet" not in early.options
    assert "verbose" in late.options
    assert "quiet" in late.options
    assert late.options.get("help").callback is help_callback


def test_mark_inheritable_unknown_flag():
    with pytest.raises(OptionNotFoundError):
        Command(name="app").mark_inheritable_many(["--nope"])


def test_add_preserved_option():
    calls = []
    command = Command(name="app").add_preserved_option(
        "license", "Show license", "-L", "--license", calls.append
    )
    entry = command.get_preserved_option("-L")
    assert entry.preserved
    assert not entry.value_type.expects_value()
    with pytest.raises(TypeError):
        command.add_preserved_option("x", "X", "-x", "--xx", "not callable")


def test_set_callback_requires_callable():
    with pytest.raises(TypeError):
        Command(name="app").set_callback(42)


def test_positional_validation_strict():
    command = Command(name="cp").set_expected_positional_args(2)
    command.validate_positional_args(2)
    with pytest.raises(PositionalArgCountError) as excinfo:
        command.validate_positional_args(3)
    assert (excinfo.value.command, excinfo.value.expected, excinfo.value.actual) == (
        "cp",
        2,
        3,
    )
    assert "exactly 2" in str(excinfo.value)


def test_positional_validation_at_least():
    command = Command(name="cat").set_expected_positional_args(1, strict=False)
    command.validate_positional_args(1)
    command.validate_positional_args(5)
    with pytest.raises(PositionalArgCountError) as excinfo:
        command.validate_positional_args(0)
    assert not excinfo.value.strict
    assert "at least 1" in str(excinfo.value)


def test_unconstrained_positional_args():
    command = Command(name="echo")
    command.validate_positional_args(0)
    command.validate_positional_args(99)
    assert not command.accepts_positional_args()
    assert command.set_expected_positional_args(1).accepts_positional_args()


def test_str():
    command = Command(name="git", description="VCS")
    command.subcommand("status")
    assert str(command) == (
        "Command(name='git', description='VCS', options=1, subcommands=['status'])"
    )
