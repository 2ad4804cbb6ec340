import sys

import pytest

from fractview.floatparse import parse_double
from fractview.numparse import ParseError, ParseErrorKind


@pytest.mark.parametrize("n", [0, 1, 7, 42, 800, 123456, 2**40])
def test_integers_round_trip(n):
    assert parse_double(str(n)) == float(n)
    assert parse_double(f"-{n}") == -float(n)


@pytest.mark.parametrize("text", ["1.5", "-0.75", "0.3", "12.125", "-3.1415"])
def test_decimals_match_builtin(text):
    assert parse_double(text) == pytest.approx(float(text), rel=1e-12)


def test_whitespace_and_plus_sign_accepted():
    assert parse_double("  \t+2.5 \n") == pytest.approx(2.5)


def test_missing_integer_or_fraction_parts():
    assert parse_double(".5") == pytest.approx(0.5)
    assert parse_double("5.") == 5.0
    assert parse_double(".") == 0.0


@pytest.mark.parametrize("text", ["", None])
def test_empty(text):
    with pytest.raises(ParseError) as info:
        parse_double(text)
    assert info.value.kind is ParseErrorKind.EMPTY_STRING


@pytest.mark.parametrize("text", ["abc", "+", "-", "   ", "--1"])
def test_no_digits(text):
    with pytest.raises(ParseError) as info:
        parse_double(text)
    assert info.value.kind is ParseErrorKind.NO_DIGITS


@pytest.mark.parametrize("text", ["1e5", "1.2.3", "0x10", "3 4", "2.5f"])
def test_invalid_trailing(text):
    with pytest.raises(ParseError) as info:
        parse_double(text)
    assert info.value.kind is ParseErrorKind.INVALID_CHAR


@pytest.mark.parametrize("sign, expected", [("", 1), ("-", -1)])
def test_overflow_saturates(sign, expected):
    with pytest.raises(ParseError) as info:
        parse_double(sign + "9" * 400)
    assert info.value.kind is ParseErrorKind.OVERFLOW
    assert info.value.value == expected * sys.float_info.max


def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        parse_double("nope")