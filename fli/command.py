# Fli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""command.py

Defines the Command class for Fli.

Commands are the nodes of the command tree. The root command is the
application itself; every other command is a named subcommand of its parent.
Each command owns:

- Its own `OptionRegistry`, including an automatic preserved `-h/--help` flag
- Ordered child subcommands
- An optional callback receiving a `CallbackContext`
- An expected positional-argument count, exact or minimum

Commands are built once during registration (each builder call returns the
command so calls can be chained) and are read-only while an invocation is
resolved.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fli.exceptions import CommandAlreadyExistsError, PositionalArgCountError
from fli.help import help_callback
from fli.logger import logger
from fli.parser.option import OptionEntry
from fli.parser.option_registry import OptionRegistry
from fli.parser.value_types import Flag, ValueType


class Command(BaseModel):
    """
    Represents a command or subcommand in a Fli application.

    Attributes:
        name (str): Name used to invoke the command.
        description (str): Short description for help output.
        help_epilog (str): Extra text printed at the end of the help screen.
        callback (Callable | None): Handler run with a `CallbackContext` when the
            command is dispatched.
        expected_positional_args (int | None): Declared positional argument
            count, or None for unconstrained.
        strict_positional (bool): True to require exactly
            `expected_positional_args`, False to require at least that many.
        add_help (bool): Register the preserved `-h/--help` flag.
        options (OptionRegistry): Options accepted at this level.
        subcommands (dict[str, Command]): Children in registration order.
    """

    name: str
    description: str = ""
    help_epilog: str = ""
    callback: Callable[..., Any] | None = None
    expected_positional_args: int | None = None
    strict_positional: bool = True
    add_help: bool = True
    options: OptionRegistry = Field(default_factory=OptionRegistry)
    subcommands: dict[str, Command] = Field(default_factory=dict)

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @field_validator("name")
    @classmethod
    def validate_name(cls, name: str) -> str:
        if not name or not name.strip():
            raise ValueError("Command name must be a non-empty string")
        if name.startswith("-"):
            raise ValueError(f"Command name '{name}' must not start with '-'")
        return name

    @field_validator("expected_positional_args")
    @classmethod
    def validate_expected_positional_args(cls, count: int | None) -> int | None:
        if count is not None and count < 0:
            raise ValueError("expected_positional_args must not be negative")
        return count

    def model_post_init(self, _: Any) -> None:
        """Register the help flag."""
        if self.add_help and not self.options.has_option("help"):
            self._add_help()

    def _add_help(self) -> None:
        """Add the preserved help option to the command."""
        self.options.add_option(
            "help",
            "Display help information",
            "-h",
            "--help",
            Flag(),
            preserved=True,
            callback=help_callback,
        )

    def add_option(
        self,
        name: str,
        description: str,
        short_flag: str,
        long_flag: str,
        value_type: ValueType,
        inheritable: bool = False,
    ) -> Command:
        """
        Add an option to this command.

        Args:
            name (str): Canonical name of the option.
            description (str): Help text.
            short_flag (str): Short form such as "-p", or "" for none.
            long_flag (str): Long form such as "--port", or "" for none.
            value_type (ValueType): Declared shape and template values.
            inheritable (bool): Copy the option into subcommands created later.

        Returns:
            Command: This command, for chaining.
        """
        self.options.add_option(
            name,
            description,
            short_flag,
            long_flag,
            value_type,
            inheritable=inheritable,
        )
        return self

    def add_preserved_option(
        self,
        name: str,
        description: str,
        short_flag: str,
        long_flag: str,
        callback: Callable[..., Any],
        inheritable: bool = False,
    ) -> Command:
        """
        Add an option that short-circuits dispatch, like `--help` or `--version`.

        The option takes no values. When it appears, resolution stops and
        `App.run()` invokes `callback` instead of the command's own callback.
        """
        if not callable(callback):
            raise TypeError("Preserved option callback must be callable")
        self.options.add_option(
            name,
            description,
            short_flag,
            long_flag,
            Flag(),
            preserved=True,
            inheritable=inheritable,
            callback=callback,
        )
        return self

    def get_preserved_option(self, key: str) -> OptionEntry | None:
        entry = self.options.get(key)
        if entry is not None and entry.preserved:
            return entry
        return None

    def mark_inheritable(self, flag: str) -> Command:
        self.options.mark_inheritable(flag)
        return self

    def mark_inheritable_many(self, flags: Iterable[str]) -> Command:
        self.options.mark_inheritable_many(flags)
        return self

    def set_callback(self, callback: Callable[..., Any]) -> Command:
        if not callable(callback):
            raise TypeError("Command callback must be callable")
        self.callback = callback
        return self

    def set_expected_positional_args(self, count: int, strict: bool = True) -> Command:
        """Declare how many positional arguments the command takes.

        With `strict` the count must match exactly, otherwise it is a minimum.
        """
        if count < 0:
            raise ValueError("expected_positional_args must not be negative")
        self.expected_positional_args = count
        self.strict_positional = strict
        return self

    def accepts_positional_args(self) -> bool:
        return bool(self.expected_positional_args)

    def validate_positional_args(self, count: int) -> None:
        """Raise `PositionalArgCountError` if `count` violates the declaration."""
        expected = self.expected_positional_args
        if expected is None:
            return
        if self.strict_positional and count != expected:
            raise PositionalArgCountError(self.name, expected, count, strict=True)
        if not self.strict_positional and count < expected:
            raise PositionalArgCountError(self.name, expected, count, strict=False)

    def subcommand(self, name: str, description: str = "") -> Command:
        """
        Create, register and return a new subcommand.

        Options marked inheritable on this command are copied into the new
        subcommand.

        Raises:
            CommandAlreadyExistsError: If a sibling with `name` already exists.
        """
        if name in self.subcommands:
            raise CommandAlreadyExistsError(
                f"Command '{name}' already exists under '{self.name}'"
            )
        child = Command(name=name, description=description)
        for entry in self.options.inheritable_entries():
            if child.options.has_option(entry.name) or any(
                child.options.has_option(flag) for flag in entry.flags
            ):
                logger.debug(
                    "[Command:%s] Skipping inherited option '%s'", name, entry.name
                )
                continue
            child.options.add_entry(entry)
        return self.add_subcommand(child)

    def add_subcommand(self, command: Command) -> Command:
        """Register a pre-built command as a child and return it."""
        if not isinstance(command, Command):
            raise TypeError("Subcommand must be an instance of Command")
        if any(char.isspace() for char in command.name):
            raise ValueError(
                f"Subcommand name '{command.name}' must not contain whitespace"
            )
        if command.name in self.subcommands:
            raise CommandAlreadyExistsError(
                f"Command '{command.name}' already exists under '{self.name}'"
            )
        self.subcommands[command.name] = command
        logger.debug("[Command:%s] Registered subcommand '%s'", self.name, command.name)
        return command

    def get_subcommand(self, name: str) -> Command | None:
        return self.subcommands.get(name)

    def has_subcommand(self, name: str) -> bool:
        return name in self.subcommands

    def has_subcommands(self) -> bool:
        return bool(self.subcommands)

    def subcommand_names(self) -> list[str]:
        return list(self.subcommands)

    def __str__(self) -> str:
        return (
            f"Command(name='{self.name}', description='{self.description}', "
            f"options={len(self.options)}, subcommands={self.subcommand_names()})"
        )
