# Fli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Typed scalar values for Fli option parsing.

A `Value` is a tagged union of four immutable variants:

- `Str`: arbitrary text
- `Int`: 64-bit signed integer
- `Float`: 64-bit float, compared with an epsilon tolerance
- `Bool`: boolean, coerced from a fixed case-insensitive vocabulary

Values double as *templates*: an instance embedded in a value type descriptor
pins the kind every command-line literal for that option is coerced to.
`template.parse(raw)` never mutates the template; it returns a new value of the
same variant or raises `ValueParseError`.

Example:
    >>> Int(0).parse("42")
    Int(data=42)
    >>> Bool(False).parse("YES")
    Bool(data=True)
"""
from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from fli.exceptions import ValueParseError
from fli.parser.utils import coerce_bool, coerce_float, coerce_int

FLOAT_EPSILON: float = sys.float_info.epsilon


class ValueKind(Enum):
    """The scalar kind carried by a `Value`."""

    STR = "str"
    INT = "int"
    FLOAT = "float"
    BOOL = "bool"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, eq=False)
class Value:
    """Base class for the typed value variants."""

    data: Any
    kind: ClassVar[ValueKind]

    def parse(self, raw: str) -> Value:
        """Parse `raw` into a new value of this value's variant."""
        return parse_value(raw, self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Value):
            return NotImplemented
        return values_equal(self, other)

    def __hash__(self) -> int:
        return hash((self.kind, self.data))

    def __str__(self) -> str:
        return str(self.data)


@dataclass(frozen=True, eq=False)
class Str(Value):
    data: str = ""
    kind: ClassVar[ValueKind] = ValueKind.STR


@dataclass(frozen=True, eq=False)
class Int(Value):
    data: int = 0
    kind: ClassVar[ValueKind] = ValueKind.INT


@dataclass(frozen=True, eq=False)
class Float(Value):
    data: float = 0.0
    kind: ClassVar[ValueKind] = ValueKind.FLOAT

    # Epsilon equality cannot agree with any hash.
    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True, eq=False)
class Bool(Value):
    data: bool = False
    kind: ClassVar[ValueKind] = ValueKind.BOOL

    def __str__(self) -> str:
        return "true" if self.data else "false"


def parse_value(raw: str, template: Value) -> Value:
    """
    Coerce `raw` into the variant of `template`.

    Args:
        raw (str): The literal taken from the command line.
        template (Value): Any value of the target variant; its data is ignored.

    Returns:
        Value: A new value of the same variant as `template`.

    Raises:
        ValueParseError: If `raw` is not a valid literal for the variant.
    """
    try:
        if isinstance(template, Str):
            return Str(raw)
        if isinstance(template, Int):
            return Int(coerce_int(raw))
        if isinstance(template, Float):
            return Float(coerce_float(raw))
        if isinstance(template, Bool):
            return Bool(coerce_bool(raw))
    except ValueError as error:
        raise ValueParseError(raw, str(template.kind), str(error)) from error
    raise ValueParseError(
        raw, type(template).__name__, "unsupported template value type"
    )


def values_equal(a: Value, b: Value) -> bool:
    """Variant-aware equality; floats compare within `FLOAT_EPSILON`."""
    if type(a) is not type(b):
        return False
    if isinstance(a, Float):
        return a.data == b.data or abs(a.data - b.data) < FLOAT_EPSILON
    return a.data == b.data
