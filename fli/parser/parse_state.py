# Fli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
State models for the Fli tokenizer and resolver.

`ParseState` enumerates the states `InputParser` moves through while walking
the tokens of one command level, and `ResolverState` the states of the
command-tree walk. Each enum carries its transition table; `StateTracker`
enforces it, so an illegal transition surfaces as an `InternalError` instead of
a silently inconsistent parse.
"""
from __future__ import annotations

from enum import Enum
from typing import Generic, TypeVar

from fli.exceptions import InternalError
from fli.logger import logger


class ParseState(Enum):
    """States of the per-level tokenizer."""

    EXPECTING_TOKEN = "expecting_token"
    RESOLVING_OPTION = "resolving_option"
    COLLECTING_VALUES = "collecting_values"
    BREAKING = "breaking"
    END = "end"

    def can_go_to(self, next_state: ParseState) -> bool:
        return next_state in _PARSE_TRANSITIONS[self]

    def __str__(self) -> str:
        return self.value


_PARSE_TRANSITIONS: dict[ParseState, frozenset[ParseState]] = {
    ParseState.EXPECTING_TOKEN: frozenset(
        {
            ParseState.EXPECTING_TOKEN,
            ParseState.RESOLVING_OPTION,
            ParseState.BREAKING,
            ParseState.END,
        }
    ),
    ParseState.RESOLVING_OPTION: frozenset(
        {ParseState.EXPECTING_TOKEN, ParseState.COLLECTING_VALUES, ParseState.END}
    ),
    ParseState.COLLECTING_VALUES: frozenset({ParseState.EXPECTING_TOKEN}),
    ParseState.BREAKING: frozenset({ParseState.BREAKING, ParseState.END}),
    ParseState.END: frozenset(),
}


class ResolverState(Enum):
    """States of the command-tree walk."""

    AT_ROOT = "at_root"
    DESCENDING_COMMANDS = "descending_commands"
    PARSING_OPTIONS_AND_ARGS = "parsing_options_and_args"
    RESOLVED = "resolved"
    FAILED = "failed"

    def can_go_to(self, next_state: ResolverState) -> bool:
        return next_state in _RESOLVER_TRANSITIONS[self]

    def __str__(self) -> str:
        return self.value


_RESOLVER_TRANSITIONS: dict[ResolverState, frozenset[ResolverState]] = {
    ResolverState.AT_ROOT: frozenset(
        {
            ResolverState.DESCENDING_COMMANDS,
            ResolverState.PARSING_OPTIONS_AND_ARGS,
            ResolverState.FAILED,
        }
    ),
    ResolverState.DESCENDING_COMMANDS: frozenset(
        {
            ResolverState.DESCENDING_COMMANDS,
            ResolverState.PARSING_OPTIONS_AND_ARGS,
            ResolverState.FAILED,
        }
    ),
    ResolverState.PARSING_OPTIONS_AND_ARGS: frozenset(
        {
            ResolverState.DESCENDING_COMMANDS,
            ResolverState.RESOLVED,
            ResolverState.FAILED,
        }
    ),
    ResolverState.RESOLVED: frozenset(),
    ResolverState.FAILED: frozenset(),
}

S = TypeVar("S", ParseState, ResolverState)


class StateTracker(Generic[S]):
    """Holds the current state and rejects transitions outside the table."""

    def __init__(self, initial: S) -> None:
        self.state: S = initial

    def go_to(self, next_state: S) -> S:
        if not self.state.can_go_to(next_state):
            raise InternalError(
                f"Invalid state transition from {self.state} to {next_state}"
            )
        logger.debug("State %s -> %s", self.state, next_state)
        self.state = next_state
        return next_state

    def __repr__(self) -> str:
        return f"StateTracker(state={self.state})"
