from argparse import Namespace

import pytest

from fli.command import Command
from fli.options_manager import OptionsManager
from fli.parser.value_types import Flag
from fli.resolver import Resolver


def test_from_resolution():
    root = Command(name="app")
    root.add_option("dry-run", "Dry run", "-n", "--dry-run", Flag())
    options = OptionsManager()
    options.from_resolution(Resolver(root).resolve(["-n"]))
    assert options.get("dry_run") is True
    assert options.get("help") is None
    assert options.get_namespace_dict("cli_args") == {"dry_run": True}


def test_from_resolution_replaces_previous_invocation():
    root = Command(name="app")
    root.add_option("dry-run", "Dry run", "-n", "--dry-run", Flag())
    options = OptionsManager()
    options.from_resolution(Resolver(root).resolve(["-n"]))
    options.from_resolution(Resolver(root).resolve([]))
    assert options.get("dry_run") is False


def test_named_namespaces_and_defaults():
    options = OptionsManager([("user_config", Namespace(theme="dark"))])
    assert options.get("theme", namespace_name="user_config") == "dark"
    assert options.get("theme") is None
    assert options.get("missing", default=3) == 3


def test_unknown_namespace():
    with pytest.raises(ValueError):
        OptionsManager().get_namespace_dict("nope")
