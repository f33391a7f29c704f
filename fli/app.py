# Fli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Application entry point for Fli.

`App` owns the root `Command` (named after the application) and is the
registration surface for the whole command tree:

    app = App("fm", "1.0.0", "File manager")
    app.add_debug_option()
    move = app.command("move", "Move files")
    move.add_option("path", "Files to move", "-p", "--path", RequiredMultiple())
    move.set_callback(do_move)
    raise SystemExit(app.run())

`App.resolve()` exposes the raw resolution step and raises `FliError` or
`PreservedOptionSignal`. `App.run()` adds dispatch: it runs preserved option
callbacks (help, version), renders resolution errors with suggestions and
invokes the resolved command's callback. It returns an exit code and leaves
process termination to the caller.
"""
from __future__ import annotations

import logging
import sys
from typing import Any, Callable, Iterable, Sequence

from rich.console import Console

from fli.command import Command
from fli.console import console as default_console
from fli.context import CallbackContext
from fli.exceptions import FliError
from fli.help import render_error, render_help, render_version
from fli.logger import logger
from fli.options_manager import OptionsManager
from fli.parser.value_types import Flag, ValueType
from fli.resolver import Resolution, Resolver
from fli.signals import PreservedOptionSignal
from fli.version import __version__


class App:
    """
    A command-line application built from a tree of `Command` objects.

    Args:
        name (str): Program name, also the name of the root command.
        version (str): Version shown by the `--version` option.
        description (str): Root command description shown in help.
        console (Console | None): Rich console used for help and errors.
        options (OptionsManager | None): Store for the resolved "cli_args".

    Attributes:
        root (Command): The root command.
    """

    def __init__(
        self,
        name: str,
        version: str = __version__,
        description: str = "",
        *,
        console: Console | None = None,
        options: OptionsManager | None = None,
    ) -> None:
        self.name = name
        self.version = version
        self.description = description
        self.console: Console = console or default_console
        self.options: OptionsManager = options or OptionsManager()
        self.root: Command = Command(name=name, description=description)

    def add_option(
        self,
        name: str,
        description: str,
        short_flag: str,
        long_flag: str,
        value_type: ValueType,
        inheritable: bool = False,
    ) -> App:
        self.root.add_option(
            name, description, short_flag, long_flag, value_type, inheritable
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
    ) -> App:
        self.root.add_preserved_option(
            name, description, short_flag, long_flag, callback, inheritable
        )
        return self

    def add_version_option(self, short_flag: str = "-V", long_flag: str = "--version") -> App:
        """Register a preserved option printing `"<name> v<version>"`."""
        return self.add_preserved_option(
            "version",
            "Display version information",
            short_flag,
            long_flag,
            self._version_callback,
        )

    def add_debug_option(self, short_flag: str = "-D", long_flag: str = "--debug") -> App:
        """
        Register an inheritable debug flag.

        When passed, the "fli" logger is switched to DEBUG before the command
        callback runs. Register it before creating subcommands so they inherit it.
        """
        return self.add_option(
            "debug",
            "Enable debug logging",
            short_flag,
            long_flag,
            Flag(),
            inheritable=True,
        )

    def mark_inheritable(self, flag: str) -> App:
        self.root.mark_inheritable(flag)
        return self

    def mark_inheritable_many(self, flags: Iterable[str]) -> App:
        self.root.mark_inheritable_many(flags)
        return self

    def command(self, name: str, description: str = "") -> Command:
        """Create and return a subcommand of the root command."""
        return self.root.subcommand(name, description)

    def add_command(self, command: Command) -> Command:
        return self.root.add_subcommand(command)

    def set_callback(self, callback: Callable[..., Any]) -> App:
        self.root.set_callback(callback)
        return self

    def set_expected_positional_args(self, count: int, strict: bool = True) -> App:
        self.root.set_expected_positional_args(count, strict)
        return self

    def resolve(self, argv: Sequence[str]) -> Resolution:
        """
        Resolve `argv` (without the program name) against the command tree.

        Raises:
            FliError: For malformed input.
            PreservedOptionSignal: When a preserved option is encountered.
        """
        return Resolver(self.root).resolve(argv)

    def run(self, argv: Sequence[str] | None = None) -> int:
        """
        Resolve and dispatch one invocation.

        Args:
            argv (Sequence[str] | None): Arguments without the program name.
                Defaults to `sys.argv[1:]`.

        Returns:
            int: 0 on success or after a preserved option, 1 on a resolution
            error, or the integer returned by the command callback.
        """
        if argv is None:
            argv = sys.argv[1:]
        try:
            resolution = self.resolve(argv)
        except PreservedOptionSignal as signal:
            return self._run_preserved(signal)
        except FliError as error:
            logger.debug("Resolution of %s failed: %r", list(argv), error)
            render_error(error, self.console)
            return 1

        self.options.from_resolution(resolution, "cli_args")
        if self.options.get("debug") is True:
            logging.getLogger("fli").setLevel(logging.DEBUG)
            logger.debug("Debug logging enabled by '--debug'")
        logger.debug("cli_args: %s", self.options.get_namespace_dict("cli_args"))

        return self._dispatch(resolution)

    def _dispatch(self, resolution: Resolution) -> int:
        command = resolution.command
        context = CallbackContext(resolution=resolution, app=self, console=self.console)
        if command.callback is None:
            logger.info("No callback for '%s', rendering help", command.name)
            render_help(command, resolution.path, self.console)
            return 0
        logger.info("Dispatching '%s'", " ".join(resolution.path))
        result = command.callback(context)
        if isinstance(result, int) and not isinstance(result, bool):
            return result
        return 0

    def _run_preserved(self, signal: PreservedOptionSignal) -> int:
        resolution = signal.resolution
        entry = resolution.options.get(signal.name)
        logger.info("Preserved option '%s' on '%s'", signal.name, signal.command.name)
        if entry is not None and entry.callback is not None:
            entry.callback(
                CallbackContext(resolution=resolution, app=self, console=self.console)
            )
        return 0

    def _version_callback(self, context: CallbackContext) -> None:
        render_version(self.name, self.version, context.console)

    def __str__(self) -> str:
        return f"App(name='{self.name}', version='{self.version}', root={self.root})"
