# Fli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the value type descriptors that declare what an option accepts.

A descriptor separates the *shape* of an option's input (none, single,
multiple, required or optional, with an optional count bound) from its
*scalar type*, which is carried by the template `Value` instances embedded in
it. The tokenizer validates cardinality through the shape and coerces each
literal through the template in the same pass.

Descriptors:
- Flag: Takes no value. Two-state: `present` is False as registered and True
  once the flag token was seen, so "passed" differs from "exists in schema".
- RequiredSingle: Exactly one value; the template fixes the type.
- OptionalSingle: Zero or one value, with an optional default.
- RequiredMultiple: One or more values. When `max_count` is set it is the
  exact number of values the option expects.
- OptionalMultiple: Zero or more values, up to `max_count` when set.

All descriptors are immutable; `with_values()` returns the resolved copy the
tokenizer records for a parsed option.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Sequence

from fli.parser.value import Str, Value


class ValueType:
    """Base class for option value type descriptors."""

    min_count: int = 0

    @property
    def max_count(self) -> int | None:
        """Largest number of values the tokenizer collects, None if unbounded."""
        return 0

    def expects_value(self) -> bool:
        """Return False only for flags."""
        return True

    def accepts_count(self, count: int) -> bool:
        """Return True if `count` supplied values satisfy this descriptor."""
        raise NotImplementedError

    def template_at(self, index: int) -> Value:
        """Return the template value used to coerce the value at `index`."""
        return Str()

    def with_values(self, values: Sequence[Value]) -> ValueType:
        """Return a copy of this descriptor holding the collected values."""
        raise NotImplementedError

    def as_single(self) -> Value | None:
        return None

    def as_many(self) -> list[Value] | None:
        return None

    def as_str(self) -> str | None:
        """Return the single value as text when it is a `Str`."""
        value = self.as_single()
        if isinstance(value, Str):
            return value.data
        return None

    def as_strs(self) -> list[str] | None:
        """Return the `Str` members of a multiple-valued descriptor."""
        values = self.as_many()
        if values is None:
            return None
        return [value.data for value in values if isinstance(value, Str)]

    def is_present(self) -> bool:
        """Return True for a flag that was passed on the command line."""
        return False

    def to_python(self) -> Any:
        """Return the recorded value(s) as plain Python data."""
        values = self.as_many()
        if values is not None:
            return [value.data for value in values]
        value = self.as_single()
        return value.data if value is not None else None

    def describe(self) -> str:
        """Return a short label for help rendering."""
        raise NotImplementedError


@dataclass(frozen=True)
class Flag(ValueType):
    present: bool = False

    def expects_value(self) -> bool:
        return False

    def accepts_count(self, count: int) -> bool:
        return count == 0

    def with_values(self, values: Sequence[Value]) -> Flag:
        return replace(self, present=True)

    def is_present(self) -> bool:
        return self.present

    def to_python(self) -> bool:
        return self.present

    def describe(self) -> str:
        return "none"


@dataclass(frozen=True)
class RequiredSingle(ValueType):
    template: Value = field(default_factory=Str)
    min_count = 1

    @property
    def max_count(self) -> int | None:
        return 1

    def accepts_count(self, count: int) -> bool:
        return count == 1

    def template_at(self, index: int) -> Value:
        return self.template

    def with_values(self, values: Sequence[Value]) -> RequiredSingle:
        if len(values) != 1:
            raise ValueError(f"RequiredSingle holds exactly one value, got {len(values)}")
        return replace(self, template=values[0])

    def as_single(self) -> Value | None:
        return self.template

    def describe(self) -> str:
        return "single (required)"


@dataclass(frozen=True)
class OptionalSingle(ValueType):
    default: Value | None = None

    @property
    def max_count(self) -> int | None:
        return 1

    def accepts_count(self, count: int) -> bool:
        return count in (0, 1)

    def template_at(self, index: int) -> Value:
        return self.default if self.default is not None else Str()

    def with_values(self, values: Sequence[Value]) -> OptionalSingle:
        if len(values) > 1:
            raise ValueError(f"OptionalSingle holds at most one value, got {len(values)}")
        if not values:
            return self
        return replace(self, default=values[0])

    def as_single(self) -> Value | None:
        return self.default

    def describe(self) -> str:
        return "single (optional)"


def _template_from(values: Sequence[Value] | None, index: int) -> Value:
    if not values:
        return Str()
    if index < len(values):
        return values[index]
    return values[-1]


@dataclass(frozen=True)
class RequiredMultiple(ValueType):
    values: list[Value] = field(default_factory=list)
    count: int | None = None

    def __post_init__(self) -> None:
        if self.count is not None and self.count < 1:
            raise ValueError("RequiredMultiple count must be a positive integer")

    @property
    def min_count(self) -> int:  # type: ignore[override]
        return self.count if self.count is not None else 1

    @property
    def max_count(self) -> int | None:
        return self.count

    def accepts_count(self, count: int) -> bool:
        if count < 1:
            return False
        return self.count is None or count <= self.count

    def template_at(self, index: int) -> Value:
        return _template_from(self.values, index)

    def with_values(self, values: Sequence[Value]) -> RequiredMultiple:
        return replace(self, values=list(values))

    def as_many(self) -> list[Value] | None:
        return list(self.values)

    def describe(self) -> str:
        if self.count is not None:
            return f"multiple (exactly {self.count})"
        return "multiple (1+)"


@dataclass(frozen=True)
class OptionalMultiple(ValueType):
    values: list[Value] | None = None
    count: int | None = None

    def __post_init__(self) -> None:
        if self.count is not None and self.count < 0:
            raise ValueError("OptionalMultiple count must not be negative")

    @property
    def max_count(self) -> int | None:
        return self.count

    def accepts_count(self, count: int) -> bool:
        if count < 0:
            return False
        return self.count is None or count <= self.count

    def template_at(self, index: int) -> Value:
        return _template_from(self.values, index)

    def with_values(self, values: Sequence[Value]) -> OptionalMultiple:
        if not values:
            return self
        return replace(self, values=list(values))

    def as_many(self) -> list[Value] | None:
        if self.values is None:
            return None
        return list(self.values)

    def describe(self) -> str:
        if self.count is not None:
            return f"multiple (max {self.count})"
        return "multiple (0+)"
