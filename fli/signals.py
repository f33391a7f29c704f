# Fli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used by the Fli resolver.

Signals interrupt resolution without being treated as errors. They inherit from
`FlowSignal`, a subclass of `BaseException`, so they bypass standard
`except Exception` blocks in user callbacks and embedding code.

Signals:
- PreservedOptionSignal: A preserved option (e.g. `--help`, `--version`) was
  encountered and normal dispatch must be short-circuited.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fli.command import Command
    from fli.resolver import Resolution


class FlowSignal(BaseException):
    """Base class for all flow control signals in Fli.

    These are not errors. They are used to report control flow such as
    "print help and stop" back to the embedding application.
    """


class PreservedOptionSignal(FlowSignal):
    """Raised when a preserved option short-circuits command dispatch.

    Attributes:
        name (str): Canonical name of the preserved option.
        command (Command): The command level that owns the option.
        resolution (Resolution): Everything resolved up to and including the option.
    """

    def __init__(self, name: str, command: Command, resolution: Resolution):
        super().__init__(f"Preserved option '{name}' received.")
        self.name = name
        self.command = command
        self.resolution = resolution
