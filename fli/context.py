# Fli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Callback context handed to command and preserved-option callbacks.

`CallbackContext` wraps a `Resolution` and exposes the resolved command, its
positional arguments and the typed option values, looked up by canonical name
or by either flag.

    def move(context: CallbackContext) -> None:
        paths = context.get_option_value("-p").as_strs()
        force = context.is_passed("--force")
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from rich.console import Console

from fli.command import Command
from fli.console import console
from fli.parser.command_chain import CommandChain
from fli.parser.value_types import ValueType
from fli.resolver import Resolution


class CallbackContext(BaseModel):
    """
    Runtime view of one resolved invocation.

    Attributes:
        resolution (Resolution): The resolved command, chain and per-level values.
        app (Any): The `App` that dispatched the callback, if any.
        console (Console): Rich console for callback output.

    Properties:
        command (Command): The resolved command.
        command_path (list[str]): Command names from the root to `command`.
        chain (CommandChain): Every chain element of the invocation.
    """

    resolution: Resolution
    app: Any = None
    console: Console = console

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @property
    def command(self) -> Command:
        return self.resolution.command

    @property
    def command_path(self) -> list[str]:
        return list(self.resolution.path)

    @property
    def chain(self) -> CommandChain:
        return self.resolution.chain

    def get_option_value(self, name_or_flag: str) -> ValueType | None:
        """
        Return the resolved descriptor for an option.

        Accepts "-v", "--verbose", "verbose" or "v". Values passed at a deeper
        command level win over the parent's; options never passed report their
        registered descriptor. Returns None for unknown options.
        """
        return self.resolution.get_option(name_or_flag)

    def is_passed(self, name_or_flag: str) -> bool:
        return self.resolution.is_passed(name_or_flag)

    def get_arguments(self) -> list[str]:
        return self.resolution.arguments

    def get_argument_at(self, index: int) -> str | None:
        arguments = self.resolution.arguments
        if 0 <= index < len(arguments):
            return arguments[index]
        return None

    def __str__(self) -> str:
        return (
            f"<CallbackContext '{' '.join(self.command_path)}' | "
            f"Args: {self.get_arguments()}>"
        )
