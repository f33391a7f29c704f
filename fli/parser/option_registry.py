# Fli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `OptionRegistry`, the per-command table of options.

Options are stored once, keyed by canonical name, with two alias tables
(short flag -> name, long flag -> name) consulted at lookup time. The
descriptor is never duplicated across aliases, so updating the value recorded
for an option through any alias is visible through all of them.

Public Interface:
- `add_option(...)`: Register a new option, validating flags and collisions.
- `get(key)`: Resolve a short flag, long flag or canonical name to its entry.
- `lookup_flag(token)`: Resolve a raw command-line token by its short or long flag.
- `is_flag(token)`: True if a raw command-line token names a registered flag.
- `update_value(key, value_type)`: Record the resolved descriptor for an option.
- `mark_inheritable(flag)`: Mark an option to be copied into new subcommands.
- `copy()`: Independent copy used to record values for one invocation.

Example Usage:
    registry = OptionRegistry()
    registry.add_option("verbose", "Verbose output", "-v", "--verbose", Flag())
    registry.get("-v") is registry.get("--verbose") is registry.get("verbose")
"""
from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Iterable, Iterator

from fli.exceptions import (
    InvalidOptionConfigError,
    OptionAlreadyExistsError,
    OptionNotFoundError,
)
from fli.logger import logger
from fli.parser.option import OptionEntry
from fli.parser.value_types import Flag, ValueType


class OptionRegistry:
    """
    Table of options owned by one command.

    Lookups accept any of the three keys of an entry. Names and flags must be
    unique inside the registry; collisions raise `OptionAlreadyExistsError`
    at registration time.
    """

    def __init__(self) -> None:
        self._options: dict[str, OptionEntry] = {}
        self._short_map: dict[str, str] = {}
        self._long_map: dict[str, str] = {}

    def _validate_name(self, name: str) -> None:
        if not isinstance(name, str) or not name:
            raise InvalidOptionConfigError("Option name must be a non-empty string")
        if name.startswith("-"):
            raise InvalidOptionConfigError(
                f"Option name '{name}' must not start with '-'; pass flags separately"
            )
        if not name.replace("-", "").replace("_", "").isalnum():
            raise InvalidOptionConfigError(
                f"Option name '{name}' must contain only letters, digits, '-' and '_'"
            )

    def _validate_flags(self, name: str, short_flag: str, long_flag: str) -> None:
        """Validate the flags provided for the option."""
        if not short_flag and not long_flag:
            raise InvalidOptionConfigError(
                f"Option '{name}' needs a short flag, a long flag or both"
            )
        if short_flag:
            if (
                len(short_flag) != 2
                or not short_flag.startswith("-")
                or short_flag[1] == "-"
            ):
                raise InvalidOptionConfigError(
                    f"Short flag '{short_flag}' must be a single character after '-'"
                )
        if long_flag:
            if (
                not long_flag.startswith("--")
                or len(long_flag) < 3
                or long_flag[2] == "-"
            ):
                raise InvalidOptionConfigError(
                    f"Long flag '{long_flag}' must start with '--' followed by a name"
                )
        for flag in (short_flag, long_flag):
            if flag and any(char.isspace() for char in flag):
                raise InvalidOptionConfigError(f"Flag '{flag}' must not contain spaces")

    def _check_collisions(self, entry: OptionEntry) -> None:
        if entry.name in self._options:
            raise OptionAlreadyExistsError(
                f"Option name '{entry.name}' is already registered"
            )
        for flag in entry.flags:
            existing = self._short_map.get(flag) or self._long_map.get(flag)
            if existing:
                raise OptionAlreadyExistsError(
                    f"Flag '{flag}' is already used by option '{existing}'"
                )

    def add_entry(self, entry: OptionEntry) -> OptionEntry:
        """Register a pre-built entry, validating it like `add_option`."""
        self._validate_name(entry.name)
        self._validate_flags(entry.name, entry.short_flag, entry.long_flag)
        if not isinstance(entry.value_type, ValueType):
            raise InvalidOptionConfigError(
                f"value_type for '{entry.name}' must be a ValueType, "
                f"got {type(entry.value_type).__name__}"
            )
        if entry.preserved and entry.value_type.expects_value():
            raise InvalidOptionConfigError(
                f"Preserved option '{entry.name}' cannot take values"
            )
        if isinstance(entry.value_type, Flag) and entry.value_type.present:
            raise InvalidOptionConfigError(
                f"Flag '{entry.name}' must be registered as not present"
            )
        self._check_collisions(entry)

        self._options[entry.name] = entry
        if entry.short_flag:
            self._short_map[entry.short_flag] = entry.name
        if entry.long_flag:
            self._long_map[entry.long_flag] = entry.name
        logger.debug("Registered option '%s' %s", entry.name, entry.flags)
        return entry

    def add_option(
        self,
        name: str,
        description: str,
        short_flag: str,
        long_flag: str,
        value_type: ValueType,
        preserved: bool = False,
        inheritable: bool = False,
        callback: Callable[[Any], Any] | None = None,
    ) -> OptionEntry:
        """
        Define a new option.

        Args:
            name (str): Canonical name, unique within this registry.
            description (str): Help text.
            short_flag (str): Short form such as "-v", or "" for none.
            long_flag (str): Long form such as "--verbose", or "" for none.
            value_type (ValueType): Declared shape and template values.
            preserved (bool): Short-circuit dispatch when encountered.
            inheritable (bool): Copy into subcommands created afterwards.
            callback (Callable | None): Handler for preserved options.

        Returns:
            OptionEntry: The registered entry.

        Raises:
            InvalidOptionConfigError: If the name, flags or descriptor are invalid.
            OptionAlreadyExistsError: If the name or a flag is already taken.
        """
        entry = OptionEntry(
            name=name,
            short_flag=short_flag or "",
            long_flag=long_flag or "",
            description=description,
            value_type=value_type,
            preserved=preserved,
            inheritable=inheritable,
            callback=callback,
        )
        return self.add_entry(entry)

    def _resolve_name(self, key: str) -> str | None:
        if key in self._short_map:
            return self._short_map[key]
        if key in self._long_map:
            return self._long_map[key]
        if key in self._options:
            return key
        stripped = key.lstrip("-")
        if stripped and stripped in self._options:
            return stripped
        if key and not key.startswith("-"):
            return self._short_map.get(f"-{key}") or self._long_map.get(f"--{key}")
        return None

    def get(self, key: str) -> OptionEntry | None:
        """Return the entry for a short flag, long flag or canonical name."""
        name = self._resolve_name(key)
        if name is None:
            return None
        return self._options[name]

    def has_option(self, key: str) -> bool:
        return self._resolve_name(key) is not None

    def lookup_flag(self, token: str) -> OptionEntry | None:
        """Return the entry for a raw command-line token.

        Only registered short and long flags match; canonical names and other
        dash spellings such as `-verbose` do not.
        """
        name = self._short_map.get(token) or self._long_map.get(token)
        if name is None:
            return None
        return self._options[name]

    def is_flag(self, token: str) -> bool:
        """Return True if a raw command-line token names a registered flag."""
        return self.lookup_flag(token) is not None

    def update_value(self, key: str, value_type: ValueType) -> OptionEntry:
        """Record `value_type` as the resolved descriptor for an option."""
        name = self._resolve_name(key)
        if name is None:
            raise OptionNotFoundError(key)
        entry = self._options[name].with_value_type(value_type)
        self._options[name] = entry
        return entry

    def mark_inheritable(self, flag: str) -> None:
        """Mark an option so subcommands created afterwards receive a copy."""
        name = self._resolve_name(flag)
        if name is None:
            raise OptionNotFoundError(flag)
        self._options[name] = replace(self._options[name], inheritable=True)

    def mark_inheritable_many(self, flags: Iterable[str]) -> None:
        """Mark several options as inheritable; fails before marking any if one is unknown."""
        flags = list(flags)
        for flag in flags:
            if not self.has_option(flag):
                raise OptionNotFoundError(flag)
        for flag in flags:
            self.mark_inheritable(flag)

    def inheritable_entries(self) -> list[OptionEntry]:
        return [entry for entry in self._options.values() if entry.inheritable]

    def preserved_entries(self) -> list[OptionEntry]:
        return [entry for entry in self._options.values() if entry.preserved]

    def copy(self) -> OptionRegistry:
        """Return an independent registry with the same entries."""
        clone = OptionRegistry()
        clone._options = dict(self._options)
        clone._short_map = dict(self._short_map)
        clone._long_map = dict(self._long_map)
        return clone

    def __iter__(self) -> Iterator[OptionEntry]:
        return iter(list(self._options.values()))

    def __len__(self) -> int:
        return len(self._options)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has_option(key)

    def __str__(self) -> str:
        preserved = sum(entry.preserved for entry in self._options.values())
        return (
            f"OptionRegistry(options={len(self._options)}, "
            f"short={len(self._short_map)}, long={len(self._long_map)}, "
            f"preserved={preserved})"
        )

    def __repr__(self) -> str:
        return str(self)
