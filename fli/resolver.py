# Fli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Resolver`, which walks the raw argument vector down the
command tree.

Resolution is a strict left-to-right single pass driven by `ResolverState`:

    AT_ROOT -> PARSING_OPTIONS_AND_ARGS -> (DESCENDING_COMMANDS ->
    PARSING_OPTIONS_AND_ARGS)* -> RESOLVED | FAILED

Each command level is tokenized by `InputParser` against that level's own
registry. A subcommand token commits the walk to the child; there is no
backtracking. The first error ends the walk and is raised unchanged. A
preserved option (such as `--help`) raises `PreservedOptionSignal` as soon as it
is seen, carrying everything resolved so far.

Example Usage:
    resolution = Resolver(root).resolve(["move", "-p", "a.txt", "b.txt"])
    resolution.command.name          # "move"
    resolution.get_option("path")    # RequiredMultiple([...])
"""
from __future__ import annotations

from argparse import Namespace
from typing import TYPE_CHECKING, Sequence

from fli.exceptions import FliError
from fli.logger import logger
from fli.parser.command_chain import ChainOption, CommandChain
from fli.parser.input_parser import InputParser, LevelParse
from fli.parser.option_registry import OptionRegistry
from fli.parser.parse_state import ResolverState, StateTracker
from fli.parser.value_types import ValueType
from fli.signals import PreservedOptionSignal

if TYPE_CHECKING:
    from fli.command import Command


class Resolution:
    """
    Outcome of resolving one invocation.

    Attributes:
        command (Command): The deepest command matched.
        path (list[str]): Command names from the root to `command`.
        chain (CommandChain): Every chain element of the invocation, in order.
        levels (list[LevelParse]): Per-level parse results, root first.
    """

    def __init__(
        self,
        command: Command,
        path: list[str],
        chain: CommandChain | None = None,
        levels: list[LevelParse] | None = None,
    ) -> None:
        self.command = command
        self.path = list(path)
        self.chain = chain if chain is not None else CommandChain()
        self.levels: list[LevelParse] = list(levels or [])

    @property
    def options(self) -> OptionRegistry:
        """Registry of the resolved command, holding the values it received."""
        return self.levels[-1].options

    @property
    def arguments(self) -> list[str]:
        """Positional arguments collected at the resolved command's level."""
        if not self.levels:
            return []
        return list(self.levels[-1].arguments)

    def is_passed(self, key: str) -> bool:
        """Return True if the option named by `key` appeared in the invocation."""
        return self._passed_level(key) is not None

    def get_option(self, key: str) -> ValueType | None:
        """
        Return the resolved descriptor for an option.

        The deepest level where the option was passed wins. Otherwise the
        registered descriptor of the deepest level that defines it is returned.
        """
        level = self._passed_level(key)
        if level is None:
            level = next(
                (
                    candidate
                    for candidate in reversed(self.levels)
                    if candidate.options.has_option(key)
                ),
                None,
            )
        if level is None:
            return None
        entry = level.options.get(key)
        return entry.value_type if entry else None

    def _passed_level(self, key: str) -> LevelParse | None:
        for level in reversed(self.levels):
            entry = level.options.get(key)
            if entry is None:
                continue
            if any(
                isinstance(element, ChainOption) and element.name == entry.name
                for element in level.elements
            ):
                return level
        return None

    def to_namespace(self) -> Namespace:
        """Flatten option values into a `Namespace`, resolved as in `get_option`."""
        names: dict[str, None] = {}
        for level in self.levels:
            for entry in level.options:
                if not entry.preserved:
                    names[entry.name] = None
        namespace = Namespace()
        for name in names:
            value_type = self.get_option(name)
            if value_type is not None:
                setattr(namespace, name.replace("-", "_"), value_type.to_python())
        return namespace

    def __repr__(self) -> str:
        return f"Resolution(path={self.path!r}, chain={self.chain!r})"


class Resolver:
    """Resolves argument vectors against a command tree rooted at `root`."""

    def __init__(self, root: Command) -> None:
        self.root = root

    def resolve(self, argv: Sequence[str]) -> Resolution:
        """
        Resolve `argv` (without the program name) to a command and its values.

        Returns:
            Resolution: The matched command, chain and per-level values.

        Raises:
            FliError: The first resolution error encountered.
            PreservedOptionSignal: When a preserved option is encountered.
        """
        state = StateTracker(ResolverState.AT_ROOT)
        command = self.root
        resolution = Resolution(command=command, path=[command.name])
        args = list(argv)
        offset = 0
        try:
            while True:
                state.go_to(ResolverState.PARSING_OPTIONS_AND_ARGS)
                level = InputParser(command.name, args, offset).parse(command)
                resolution.levels.append(level)
                resolution.chain.extend(level.elements)

                if level.preserved is not None:
                    state.go_to(ResolverState.RESOLVED)
                    logger.debug(
                        "Preserved option '%s' at '%s'",
                        level.preserved.name,
                        command.name,
                    )
                    raise PreservedOptionSignal(level.preserved.name, command, resolution)

                if level.next_command is None:
                    break

                state.go_to(ResolverState.DESCENDING_COMMANDS)
                command = level.next_command
                resolution.command = command
                resolution.path.append(command.name)
                args = level.remaining
                offset = level.remaining_offset

            command.validate_positional_args(len(level.arguments))
            state.go_to(ResolverState.RESOLVED)
        except FliError as error:
            if state.state.can_go_to(ResolverState.FAILED):
                state.go_to(ResolverState.FAILED)
            logger.debug("Resolution failed at '%s': %s", command.name, error)
            raise

        logger.debug("Resolved %s with chain %s", " ".join(resolution.path), resolution.chain)
        return resolution
