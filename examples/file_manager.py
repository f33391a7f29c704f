"""Demo file manager: `python examples/file_manager.py move -p a.txt b.txt -d out/`."""
from fli import App, CallbackContext
from fli.parser import (
    Bool,
    Flag,
    Int,
    OptionalSingle,
    RequiredMultiple,
    RequiredSingle,
    Str,
)
from fli.utils import setup_logging

setup_logging()

app = App("fm", "1.0.0", "A tiny file manager")
app.add_version_option()
app.add_debug_option()
app.add_option("dry-run", "Print actions without running them", "-n", "--dry-run", Flag())
app.mark_inheritable("--dry-run")


def list_files(context: CallbackContext) -> None:
    depth = context.get_option_value("--depth").as_single()
    hidden = context.get_option_value("--all").as_single()
    targets = context.get_arguments() or ["."]
    for target in targets:
        context.console.print(f"ls {target} (depth={depth}, hidden={hidden})")


def move_files(context: CallbackContext) -> int:
    paths = context.get_option_value("path").as_strs()
    destination = context.get_option_value("-d").as_str()
    prefix = "[dry-run] " if context.is_passed("dry-run") else ""
    for path in paths:
        context.console.print(f"{prefix}mv {path} -> {destination}")
    return 0


ls = app.command("ls", "List directory contents")
ls.add_option("depth", "Recursion depth", "-L", "--depth", RequiredSingle(Int(1)))
ls.add_option("all", "Show hidden files", "-a", "--all", RequiredSingle(Bool(False)))
ls.set_expected_positional_args(0, strict=False)
ls.set_callback(list_files)

move = app.command("move", "Move files")
move.add_option("path", "Files to move", "-p", "--path", RequiredMultiple())
move.add_option("dest", "Destination directory", "-d", "--dest", OptionalSingle(Str(".")))
move.set_expected_positional_args(0)
move.set_callback(move_files)

if __name__ == "__main__":
    raise SystemExit(app.run())
