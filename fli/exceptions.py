# Fli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used in the Fli CLI framework.

Every exception keeps the structured fields describing the failure as
attributes, so embedding applications can render or inspect them without
parsing messages.

Exception Hierarchy:
- FliError
    ├── UnknownCommandError
    ├── OptionNotFoundError
    ├── MissingValueError
    ├── ValueParseError
    ├── UnexpectedTokenError
    ├── CommandMismatchError
    ├── PositionalArgCountError
    └── InternalError
        ├── CommandAlreadyExistsError
        ├── OptionAlreadyExistsError
        └── InvalidOptionConfigError

Resolution errors are raised from `Resolver.resolve()` and `App.resolve()` for
malformed user input. `InternalError` and its subclasses signal programming
misuse, mostly at registration time.
"""
from __future__ import annotations


class FliError(Exception):
    """Base exception for the Fli framework."""


class UnknownCommandError(FliError):
    """Raised when a bare token matches no subcommand at the current level."""

    def __init__(self, token: str, suggestions: list[str] | None = None):
        self.token = token
        self.suggestions = list(suggestions or [])
        super().__init__(
            f"Unknown command: '{token}'. Run with --help to see available commands"
        )


class OptionNotFoundError(FliError):
    """Raised when a flag token is not registered for the current command."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(
            f"Unknown option: '{token}'. Run with --help to see available options"
        )


class MissingValueError(FliError):
    """Raised when an option received fewer values than it requires."""

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"Missing required value for option '{option}'")


class ValueParseError(FliError):
    """Raised when a raw string cannot be coerced to the expected value kind."""

    def __init__(
        self,
        raw: str,
        expected_kind: str,
        reason: str,
        option: str | None = None,
    ):
        self.raw = raw
        self.expected_kind = expected_kind
        self.reason = reason
        self.option = option
        target = f" for option '{option}'" if option else ""
        super().__init__(
            f"Invalid value '{raw}'{target}: expected {expected_kind}, {reason}"
        )

    def for_option(self, option: str) -> ValueParseError:
        """Return a copy of this error attributed to `option`."""
        return ValueParseError(self.raw, self.expected_kind, self.reason, option)


class UnexpectedTokenError(FliError):
    """Raised for malformed flag syntax."""

    def __init__(self, token: str, position: int):
        self.token = token
        self.position = position
        super().__init__(f"Unexpected '{token}' at position {position}")


class CommandMismatchError(FliError):
    """Raised when a parser is asked to parse input for a different command."""

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Command mismatch: expected '{expected}', got '{actual}'")


class PositionalArgCountError(FliError):
    """Raised when a command received the wrong number of positional arguments."""

    def __init__(self, command: str, expected: int, actual: int, strict: bool = True):
        self.command = command
        self.expected = expected
        self.actual = actual
        self.strict = strict
        quantifier = "exactly" if strict else "at least"
        label = f"'{command}'" if command else "root command"
        super().__init__(
            f"Command {label} expects {quantifier} {expected} positional "
            f"argument(s), got {actual}"
        )


class InternalError(FliError):
    """Raised when an invariant of the framework is violated."""


class CommandAlreadyExistsError(InternalError):
    """Raised when a subcommand with the same name is registered twice."""


class OptionAlreadyExistsError(InternalError):
    """Raised when an option name or flag collides inside one registry."""


class InvalidOptionConfigError(InternalError):
    """Raised when an option is registered with an invalid configuration."""
