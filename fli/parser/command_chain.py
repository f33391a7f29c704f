# Fli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the elements of a parsed command chain.

A chain is the ordered record of what one invocation contained:

- `ChainSubCommand`: a subcommand name that was descended into
- `ChainOption`: an option with its resolved value type descriptor
- `ChainArgument`: a positional argument
- `ChainPreservedOption`: a preserved option (e.g. help) that stopped resolution

`CommandChain` keeps the encounter order for diagnostics while offering lookups
by name for callers.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from fli.parser.value_types import ValueType


@dataclass(frozen=True)
class ChainSubCommand:
    name: str


@dataclass(frozen=True)
class ChainOption:
    name: str
    value_type: ValueType


@dataclass(frozen=True)
class ChainArgument:
    value: str


@dataclass(frozen=True)
class ChainPreservedOption:
    name: str


ChainElement = Union[ChainSubCommand, ChainOption, ChainArgument, ChainPreservedOption]


class CommandChain:
    """Ordered sequence of chain elements produced by one invocation."""

    def __init__(self, elements: Iterable[ChainElement] | None = None) -> None:
        self._elements: list[ChainElement] = list(elements or [])

    def append(self, element: ChainElement) -> None:
        self._elements.append(element)

    def extend(self, elements: Iterable[ChainElement]) -> None:
        self._elements.extend(elements)

    @property
    def elements(self) -> list[ChainElement]:
        return list(self._elements)

    def subcommands(self) -> list[str]:
        return [e.name for e in self._elements if isinstance(e, ChainSubCommand)]

    def arguments(self) -> list[str]:
        return [e.value for e in self._elements if isinstance(e, ChainArgument)]

    def argument_at(self, index: int) -> str | None:
        arguments = self.arguments()
        if 0 <= index < len(arguments):
            return arguments[index]
        return None

    def options(self) -> list[ChainOption]:
        return [e for e in self._elements if isinstance(e, ChainOption)]

    def option(self, name: str) -> ChainOption | None:
        """Return the last occurrence of the option with canonical `name`."""
        for element in reversed(self._elements):
            if isinstance(element, ChainOption) and element.name == name:
                return element
        return None

    def preserved_option(self) -> str | None:
        for element in self._elements:
            if isinstance(element, ChainPreservedOption):
                return element.name
        return None

    def __iter__(self) -> Iterator[ChainElement]:
        return iter(self._elements)

    def __len__(self) -> int:
        return len(self._elements)

    def __getitem__(self, index: int) -> ChainElement:
        return self._elements[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, CommandChain):
            return self._elements == other._elements
        if isinstance(other, list):
            return self._elements == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"CommandChain({self._elements!r})"
