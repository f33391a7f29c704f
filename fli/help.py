# Fli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Rich rendering of help screens, version banners and resolution errors.

These functions only read the command tree; they never take part in parsing.

- `build_usage_patterns`: Usage lines for a command, including the `--` form.
- `render_help`: Usage, options table and subcommands table for a command.
- `help_callback`: Callback bound to every automatic `-h/--help` option.
- `render_version`: `"<name> v<version>"` banner.
- `render_error`: Error message with "Did you mean" suggestions.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fli.console import console as default_console
from fli.exceptions import FliError, UnknownCommandError

if TYPE_CHECKING:
    from fli.command import Command
    from fli.context import CallbackContext


def _arguments_pattern(command: Command) -> str:
    expected = command.expected_positional_args
    if not expected:
        return ""
    pattern = " ".join(["[ARGUMENT]"] * expected)
    if not command.strict_positional:
        pattern += "..."
    return pattern


def build_usage_patterns(command: Command, path: list[str] | None = None) -> list[str]:
    """
    Build the usage lines for `command`.

    Args:
        command (Command): The command to describe.
        path (list[str] | None): Invocation path from the root, defaults to the
            command name alone.

    Returns:
        list[str]: The plain pattern first, then the `--` separated form when the
        command takes positional arguments.
    """
    program = " ".join(path or [command.name])
    parts = [program]
    if command.has_subcommands():
        parts.append("[SUBCOMMANDS]")
    arguments = _arguments_pattern(command)
    if arguments:
        parts.append(arguments)
    parts.append("[OPTIONS]")
    patterns = [" ".join(parts)]
    if arguments:
        patterns.append(f"{program} [OPTIONS] -- {arguments}")
    return patterns


def build_options_table(command: Command) -> Table | None:
    if not len(command.options):
        return None
    table = Table(title="Options", box=box.SIMPLE, title_justify="left")
    table.add_column("Flag", style="fli.flag", no_wrap=True)
    table.add_column("Long Form", style="fli.flag", no_wrap=True)
    table.add_column("Value Type")
    table.add_column("Description")
    for entry in command.options:
        metavar = entry.get_choice_text()
        value_type = entry.value_type.describe()
        if metavar:
            value_type = f"{value_type} {metavar}"
        table.add_row(
            entry.short_flag or "-",
            entry.long_flag or "-",
            escape(value_type),
            escape(entry.description),
        )
    return table


def build_subcommands_table(command: Command) -> Table | None:
    if not command.has_subcommands():
        return None
    table = Table(title="Subcommands", box=box.SIMPLE, title_justify="left")
    table.add_column("Command", style="fli.command", no_wrap=True)
    table.add_column("Description")
    for name, subcommand in command.subcommands.items():
        table.add_row(escape(name), escape(subcommand.description))
    return table


def render_help(
    command: Command,
    path: list[str] | None = None,
    console: Console | None = None,
) -> None:
    """Print formatted help for `command` using Rich output."""
    console = console or default_console
    console.print(f"[fli.heading]Command: {escape(command.name)}[/]")
    if command.description:
        console.print(escape(command.description))
    console.print()
    console.print("[fli.heading]Usage:[/]")
    for pattern in build_usage_patterns(command, path):
        console.print(f"  [fli.usage]{escape(pattern)}[/]")

    for table in (build_options_table(command), build_subcommands_table(command)):
        if table is not None:
            console.print(table)

    if command.help_epilog:
        console.print("\n" + escape(command.help_epilog), style="fli.dim")


def help_callback(context: CallbackContext) -> None:
    render_help(context.command, context.command_path, context.console)


def render_version(name: str, version: str, console: Console | None = None) -> None:
    console = console or default_console
    console.print(f"[fli.command]{escape(name)}[/] v{escape(version)}")


def render_error(error: FliError, console: Console | None = None) -> None:
    """Print a resolution error, with ranked suggestions for unknown commands."""
    console = console or default_console
    console.print(f"[fli.error]error:[/] {escape(str(error))}")
    if isinstance(error, UnknownCommandError) and error.suggestions:
        console.print("[fli.hint]Did you mean:[/]")
        for suggestion in error.suggestions:
            console.print(f"  • [bold]{escape(suggestion)}[/]")
