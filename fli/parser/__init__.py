"""
Fli CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .command_chain import (
    ChainArgument,
    ChainElement,
    ChainOption,
    ChainPreservedOption,
    ChainSubCommand,
    CommandChain,
)
from .input_parser import InputParser, LevelParse
from .option import OptionEntry
from .option_registry import OptionRegistry
from .parse_state import ParseState, ResolverState, StateTracker
from .value import Bool, Float, Int, Str, Value, ValueKind, parse_value, values_equal
from .value_types import (
    Flag,
    OptionalMultiple,
    OptionalSingle,
    RequiredMultiple,
    RequiredSingle,
    ValueType,
)

__all__ = [
    "Bool",
    "ChainArgument",
    "ChainElement",
    "ChainOption",
    "ChainPreservedOption",
    "ChainSubCommand",
    "CommandChain",
    "Flag",
    "Float",
    "InputParser",
    "Int",
    "LevelParse",
    "OptionEntry",
    "OptionRegistry",
    "OptionalMultiple",
    "OptionalSingle",
    "ParseState",
    "RequiredMultiple",
    "RequiredSingle",
    "ResolverState",
    "StateTracker",
    "Str",
    "Value",
    "ValueKind",
    "ValueType",
    "parse_value",
    "values_equal",
]
