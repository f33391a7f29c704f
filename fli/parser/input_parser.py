# Fli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `InputParser`, the tokenizer that walks the raw
argument tokens of one command level into chain elements.

The parser is driven by `ParseState`:

- `EXPECTING_TOKEN`: start state and the state after an option's values.
- `RESOLVING_OPTION`: a dash token is looked up by its registered short or long
  flag. Unknown flags are errors, never positional arguments.
- `COLLECTING_VALUES`: following tokens are consumed while they are not flags
  and not `--`, up to the descriptor's maximum, then coerced against the
  descriptor's template values.
- `BREAKING`: after a literal `--`, every remaining token is a positional
  argument, including dash tokens and subcommand names.
- `END`: the level is complete.

A bare token naming a subcommand ends the level; the resolver continues with
that subcommand's own registry. A preserved option also ends the level so the
resolver can report it immediately.

Values are recorded in a copy of the command's registry, so the command tree
itself is never modified by parsing.

Example Usage:
    parser = InputParser(command.name, ["-p", "a.txt", "b.txt"])
    level = parser.parse(command)
    level.options.get("path").value_type.as_strs()  # ["a.txt", "b.txt"]
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from fli.exceptions import (
    CommandMismatchError,
    MissingValueError,
    OptionNotFoundError,
    UnexpectedTokenError,
    UnknownCommandError,
    ValueParseError,
)
from fli.logger import logger
from fli.parser.command_chain import (
    ChainArgument,
    ChainElement,
    ChainOption,
    ChainPreservedOption,
    ChainSubCommand,
)
from fli.parser.option import OptionEntry
from fli.parser.option_registry import OptionRegistry
from fli.parser.parse_state import ParseState, StateTracker
from fli.parser.value import Value
from fli.suggest import suggest_similar

if TYPE_CHECKING:
    from fli.command import Command

SEPARATOR = "--"


@dataclass
class LevelParse:
    """
    Result of parsing the tokens of one command level.

    Attributes:
        command (Command): The command whose registry was used.
        options (OptionRegistry): Copy of the registry holding resolved values.
        elements (list[ChainElement]): Chain elements in encounter order.
        arguments (list[str]): Positional arguments collected at this level.
        next_command (Command | None): Subcommand to descend into, if any.
        remaining (list[str]): Tokens following the subcommand name.
        remaining_offset (int): Position of `remaining[0]` in the full argv.
        preserved (OptionEntry | None): Preserved option that stopped the level.
    """

    command: Command
    options: OptionRegistry
    elements: list[ChainElement] = field(default_factory=list)
    arguments: list[str] = field(default_factory=list)
    next_command: Command | None = None
    remaining: list[str] = field(default_factory=list)
    remaining_offset: int = 0
    preserved: OptionEntry | None = None


class InputParser:
    """
    Tokenizer for the arguments of a single command level.

    Args:
        command_name (str): Name of the command the tokens belong to.
        args (list[str]): Raw tokens, without the program or command name.
        offset (int): Position of `args[0]` in the full argument vector, used
            for error positions.
    """

    def __init__(self, command_name: str, args: list[str], offset: int = 0) -> None:
        self.command_name = command_name
        self.args = list(args)
        self.offset = offset

    def parse(self, command: Command) -> LevelParse:
        """
        Parse the tokens against `command`.

        Returns:
            LevelParse: The chain elements and resolved values of this level.

        Raises:
            CommandMismatchError: If `command` is not the command this parser was
                created for.
            UnexpectedTokenError: For malformed flag syntax such as `---x`.
            OptionNotFoundError: For unregistered flags.
            MissingValueError: When an option receives fewer values than required.
            ValueParseError: When a value does not match the option's template type.
            UnknownCommandError: For an unmatched bare token where a subcommand
                is expected.
        """
        if self.command_name != command.name:
            raise CommandMismatchError(command.name, self.command_name)

        state = StateTracker(ParseState.EXPECTING_TOKEN)
        level = LevelParse(command=command, options=command.options.copy())
        args = self.args

        i = 0
        while i < len(args):
            token = args[i]

            if state.state is ParseState.BREAKING:
                self._add_argument(level, token)
                i += 1
                continue

            if token == SEPARATOR:
                state.go_to(ParseState.BREAKING)
                i += 1
                continue

            if token.startswith("-") and token != "-":
                i = self._handle_option(level, state, i)
                if level.preserved is not None:
                    break
                continue

            child = command.get_subcommand(token)
            if child is not None:
                level.elements.append(ChainSubCommand(token))
                level.next_command = child
                level.remaining = args[i + 1 :]
                level.remaining_offset = self.offset + i + 1
                break

            if (
                not level.arguments
                and command.has_subcommands()
                and not command.accepts_positional_args()
            ):
                raise UnknownCommandError(
                    token, suggest_similar(token, command.subcommand_names())
                )

            self._add_argument(level, token)
            state.go_to(ParseState.EXPECTING_TOKEN)
            i += 1

        state.go_to(ParseState.END)
        logger.debug(
            "Parsed level '%s': %s", command.name or "<root>", level.elements
        )
        return level

    def _add_argument(self, level: LevelParse, token: str) -> None:
        level.elements.append(ChainArgument(token))
        level.arguments.append(token)

    def _handle_option(
        self, level: LevelParse, state: StateTracker[ParseState], i: int
    ) -> int:
        token = self.args[i]
        if token.startswith("---"):
            raise UnexpectedTokenError(token, self.offset + i)

        state.go_to(ParseState.RESOLVING_OPTION)
        registry = level.options
        entry = registry.lookup_flag(token)
        if entry is None:
            raise OptionNotFoundError(token)

        if entry.preserved:
            level.elements.append(ChainPreservedOption(entry.name))
            level.preserved = entry
            state.go_to(ParseState.EXPECTING_TOKEN)
            return i + 1

        value_type = entry.value_type
        if not value_type.expects_value():
            resolved = value_type.with_values([])
            registry.update_value(entry.name, resolved)
            level.elements.append(ChainOption(entry.name, resolved))
            state.go_to(ParseState.EXPECTING_TOKEN)
            return i + 1

        state.go_to(ParseState.COLLECTING_VALUES)
        values, next_index = self._collect_values(entry, registry, i + 1)
        if len(values) < value_type.min_count:
            raise MissingValueError(entry.name)

        resolved = value_type.with_values(values)
        registry.update_value(entry.name, resolved)
        level.elements.append(ChainOption(entry.name, resolved))
        state.go_to(ParseState.EXPECTING_TOKEN)
        return next_index

    def _collect_values(
        self, entry: OptionEntry, registry: OptionRegistry, start: int
    ) -> tuple[list[Value], int]:
        value_type = entry.value_type
        max_count = value_type.max_count
        values: list[Value] = []
        i = start
        while i < len(self.args) and (max_count is None or len(values) < max_count):
            candidate = self.args[i]
            if candidate == SEPARATOR or registry.is_flag(candidate):
                break
            try:
                values.append(value_type.template_at(len(values)).parse(candidate))
            except ValueParseError as error:
                raise error.for_option(entry.name) from error
            i += 1
        return values, i
