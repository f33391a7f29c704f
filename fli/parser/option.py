# Fli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `OptionEntry` dataclass used by `OptionRegistry` to represent one
registered command-line option in a structured, introspectable format.

Key Attributes:
- `name`: Canonical name, unique within its registry
- `short_flag` / `long_flag`: Aliases such as `-v` and `--verbose`
- `value_type`: The `ValueType` descriptor declaring what the option accepts
- `preserved`: Whether the option short-circuits dispatch (e.g. `--help`)
- `inheritable`: Whether subcommands created later receive a copy
- `callback`: Handler invoked by `App.run()` for preserved options

Used By:
- `OptionRegistry`
- `InputParser` for token lookup and value collection
- Help rendering
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable

from fli.parser.value_types import ValueType


@dataclass(frozen=True)
class OptionEntry:
    """
    Represents a command-line option.

    Attributes:
        name (str): Canonical name of the option.
        short_flag (str): Short form, e.g. "-v". Empty when not defined.
        long_flag (str): Long form, e.g. "--verbose". Empty when not defined.
        description (str): Help text for the option.
        value_type (ValueType): Declared shape and template values.
        preserved (bool): True if the option short-circuits normal dispatch.
        inheritable (bool): True if subcommands inherit this option.
        callback (Callable | None): Handler run when a preserved option is hit.
    """

    name: str
    short_flag: str
    long_flag: str
    description: str
    value_type: ValueType
    preserved: bool = False
    inheritable: bool = False
    callback: Callable[[Any], Any] | None = None

    @property
    def flags(self) -> tuple[str, ...]:
        """Return the defined flags, short form first."""
        return tuple(flag for flag in (self.short_flag, self.long_flag) if flag)

    @property
    def display_flag(self) -> str:
        """Return the flag used to refer to this option in messages."""
        return self.long_flag or self.short_flag

    def with_value_type(self, value_type: ValueType) -> OptionEntry:
        return replace(self, value_type=value_type)

    def get_choice_text(self) -> str:
        """Return the metavar-style text shown next to the flags in help."""
        if not self.value_type.expects_value():
            return ""
        metavar = self.name.upper().replace("-", "_")
        max_count = self.value_type.max_count
        if max_count == 1:
            text = metavar
        elif max_count is not None and self.value_type.min_count == max_count:
            text = " ".join([metavar] * max_count)
        else:
            text = f"{metavar} [{metavar} ...]"
        if self.value_type.min_count == 0:
            text = f"[{text}]"
        return text
