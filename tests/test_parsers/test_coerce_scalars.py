import pytest

from fli.parser.utils import coerce_bool, coerce_float, coerce_int


@pytest.mark.parametrize(
    "value, expected",
    [("Y", True), ("n", False), ("TrUe", True), ("F", False), ("1", True), ("0", False)],
)
def test_coerce_bool(value, expected):
    assert coerce_bool(value) is expected


def test_coerce_bool_invalid():
    with pytest.raises(ValueError) as excinfo:
        coerce_bool("maybe")
    assert "boolean" in str(excinfo.value)


@pytest.mark.parametrize(
    "value, expected",
    [("0", 0), ("-9223372036854775808", -(2**63)), ("+12", 12), ("007", 7)],
)
def test_coerce_int(value, expected):
    assert coerce_int(value) == expected


@pytest.mark.parametrize("value", ["9223372036854775808", "1e3", "", "--1", "1 "])
def test_coerce_int_invalid(value):
    with pytest.raises(ValueError):
        coerce_int(value)


@pytest.mark.parametrize(
    "value, expected",
    [("1.5", 1.5), ("-0.25", -0.25), ("2E-2", 0.02), ("10", 10.0)],
)
def test_coerce_float(value, expected):
    assert coerce_float(value) == pytest.approx(expected)


@pytest.mark.parametrize("value", ["1_000.0", "e5", "1.0f", "0x1p3", "−1"])
def test_coerce_float_invalid(value):
    with pytest.raises(ValueError):
        coerce_float(value)
