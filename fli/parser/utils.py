# Fli CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Contains scalar coercion utilities for Fli argument parsing.

These helpers convert raw command-line strings into Python scalars using
locale-independent rules. They raise plain `ValueError` with a short reason;
`fli.parser.value` wraps that into a structured `ValueParseError`.

Functions:
- coerce_bool: Convert a string to a boolean from a fixed vocabulary.
- coerce_int: Convert a string to a 64-bit signed integer.
- coerce_float: Convert a string to a 64-bit float.
"""
import re

TRUE_LITERALS = frozenset({"true", "t", "1", "yes", "y"})
FALSE_LITERALS = frozenset({"false", "f", "0", "no", "n"})

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"|[+-]?(?:inf|infinity|nan)",
    re.IGNORECASE,
)


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts true/false, t/f, 1/0, yes/no and y/n in any letter case.

    Args:
        value (str): The input string.

    Returns:
        bool: Parsed boolean result.

    Raises:
        ValueError: If the literal is outside the accepted vocabulary.
    """
    normalized = value.lower()
    if normalized in TRUE_LITERALS:
        return True
    if normalized in FALSE_LITERALS:
        return False
    raise ValueError("not a recognized boolean literal")


def coerce_int(value: str) -> int:
    """Convert an ASCII decimal literal to an integer within the 64-bit range."""
    if not _INT_PATTERN.fullmatch(value):
        raise ValueError("not a valid integer literal")
    number = int(value)
    if not INT64_MIN <= number <= INT64_MAX:
        raise ValueError("integer out of 64-bit range")
    return number


def coerce_float(value: str) -> float:
    """Convert an ASCII decimal or scientific literal to a float."""
    if not _FLOAT_PATTERN.fullmatch(value):
        raise ValueError("not a valid float literal")
    return float(value)
