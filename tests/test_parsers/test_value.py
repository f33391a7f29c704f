import math
import sys

import pytest

from fli.exceptions import ValueParseError
from fli.parser.value import (
    FLOAT_EPSILON,
    Bool,
    Float,
    Int,
    Str,
    ValueKind,
    parse_value,
    values_equal,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("true", True),
        ("TRUE", True),
        ("t", True),
        ("T", True),
        ("1", True),
        ("yes", True),
        ("Yes", True),
        ("y", True),
        ("false", False),
        ("False", False),
        ("f", False),
        ("0", False),
        ("no", False),
        ("NO", False),
        ("n", False),
    ],
)
def test_bool_vocabulary(raw, expected):
    value = Bool().parse(raw)
    assert isinstance(value, Bool)
    assert value.data is expected


@pytest.mark.parametrize("raw", ["", "on", "off", "2", "truthy", "nope", " yes"])
def test_bool_rejects_unknown_literals(raw):
    with pytest.raises(ValueParseError) as excinfo:
        Bool().parse(raw)
    assert excinfo.value.raw == raw
    assert excinfo.value.expected_kind == "bool"


@pytest.mark.parametrize(
    "raw, expected",
    [("42", 42), ("-7", -7), ("+3", 3), ("0", 0), (str(2**63 - 1), 2**63 - 1)],
)
def test_int_parse(raw, expected):
    assert Int().parse(raw) == Int(expected)


@pytest.mark.parametrize("raw", ["", "1.5", "1_000", "١٢", " 4", "0x10", str(2**63)])
def test_int_rejects_invalid_literals(raw):
    with pytest.raises(ValueParseError) as excinfo:
        Int().parse(raw)
    assert excinfo.value.expected_kind == "int"


@pytest.mark.parametrize(
    "raw, expected",
    [("3.14", 3.14), ("-2", -2.0), ("1e3", 1000.0), (".5", 0.5), ("5.", 5.0)],
)
def test_float_parse(raw, expected):
    assert Float().parse(raw) == Float(expected)


def test_float_parse_special_values():
    assert math.isinf(Float().parse("inf").data)
    assert math.isnan(Float().parse("NaN").data)


@pytest.mark.parametrize("raw", ["", "abc", "1,5", "1.2.3"])
def test_float_rejects_invalid_literals(raw):
    with pytest.raises(ValueParseError):
        Float().parse(raw)


def test_str_parse_keeps_raw_text():
    assert Str("ignored").parse("-5") == Str("-5")


def test_template_is_not_mutated():
    template = Int(10)
    parsed = template.parse("20")
    assert template.data == 10
    assert parsed.data == 20


def test_parse_value_function_matches_method():
    assert parse_value("12", Int()) == Int().parse("12")


def test_float_epsilon_equality():
    a = 1.0
    assert values_equal(Float(a), Float(a + FLOAT_EPSILON / 2))
    assert not values_equal(Float(a), Float(a + FLOAT_EPSILON * 4))
    assert Float(0.0) == Float(sys.float_info.epsilon / 2)
    assert Float(0.0) != Float(sys.float_info.epsilon)


def test_float_infinities_are_equal():
    assert Float(math.inf) == Float(math.inf)
    assert Float(math.inf) != Float(-math.inf)


def test_mismatched_variants_are_never_equal():
    assert not values_equal(Int(1), Float(1.0))
    assert not values_equal(Int(1), Bool(True))
    assert Str("1") != Int(1)


def test_value_kinds():
    assert Str().kind is ValueKind.STR
    assert Int().kind is ValueKind.INT
    assert Float().kind is ValueKind.FLOAT
    assert Bool().kind is ValueKind.BOOL


def test_value_str():
    assert str(Bool(True)) == "true"
    assert str(Int(3)) == "3"
    assert str(Str("abc")) == "abc"


def test_hashable_values():
    assert len({Int(1), Int(1), Str("1")}) == 2
    with pytest.raises(TypeError):
        hash(Float(1.0))
