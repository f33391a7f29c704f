# Fli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Keeps runtime option values of a Fli application in named namespaces.

After each successful resolution, `App.run()` stores the flattened option
values of the invocation under the "cli_args" namespace
(`Resolution.to_namespace()`), so callbacks and framework hooks such as the
`--debug` switch can read them without walking the command chain.

Typical Usage:
    options = OptionsManager()
    options.from_resolution(resolution)
    if options.get("verbose"):
        ...
    options.get_namespace_dict("cli_args")  # {"verbose": True, ...}
"""
from __future__ import annotations

from argparse import Namespace
from collections import defaultdict
from typing import TYPE_CHECKING, Any

from fli.logger import logger

if TYPE_CHECKING:
    from fli.resolver import Resolution


class OptionsManager:
    """
    Manages option state across multiple argparse namespaces.

    Supports named namespaces (e.g. "cli_args") with safe getters that fall
    back to a default for options the invocation did not define.
    """

    def __init__(self, namespaces: list[tuple[str, Namespace]] | None = None) -> None:
        self.options: defaultdict = defaultdict(Namespace)
        if namespaces:
            for namespace_name, namespace in namespaces:
                self.from_namespace(namespace, namespace_name)

    def from_namespace(
        self, namespace: Namespace, namespace_name: str = "cli_args"
    ) -> None:
        self.options[namespace_name] = namespace

    def from_resolution(
        self, resolution: Resolution, namespace_name: str = "cli_args"
    ) -> None:
        """Store the flattened option values of a resolved invocation."""
        self.from_namespace(resolution.to_namespace(), namespace_name)
        logger.debug(
            "Stored options for '%s' in '%s'",
            " ".join(resolution.path),
            namespace_name,
        )

    def get(
        self, option_name: str, default: Any = None, namespace_name: str = "cli_args"
    ) -> Any:
        """Get the value of an option."""
        return getattr(self.options[namespace_name], option_name, default)

    def get_namespace_dict(self, namespace_name: str) -> dict[str, Any]:
        """Return all options in a namespace as a dictionary."""
        if namespace_name not in self.options:
            raise ValueError(f"Namespace '{namespace_name}' not found.")
        return vars(self.options[namespace_name])
