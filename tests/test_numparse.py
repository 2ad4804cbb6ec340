import pytest

from fractview.numparse import (
    INT_MAX,
    INT_MIN,
    LONG_MAX,
    LONG_MIN,
    ParseError,
    ParseErrorKind,
    parse_int,
    parse_long,
)


def test_plain_number():
    assert parse_int("42") == 42
    assert parse_long("42") == 42


def test_leading_whitespace_and_sign():
    assert parse_int(" \t\n\v\f\r-17") == -17
    assert parse_int("+5") == 5
    assert parse_int("-0") == 0
    assert parse_long(" \t\n\v\f\r-17") == -17
    assert parse_long("+5") == 5
    assert parse_long("-0") == 0


@pytest.mark.parametrize("n", [0, 1, -1, 7, -123456, 2147483647, -2147483648])
def test_round_trip(n):
    assert parse_int(str(n)) == n
    assert parse_long(str(n)) == n


def test_int_limits():
    assert parse_int(str(INT_MAX)) == INT_MAX
    assert parse_int("-2147483648") == INT_MIN


def test_long_limits():
    assert parse_long(str(LONG_MAX)) == LONG_MAX
    assert parse_long(str(LONG_MIN)) == LONG_MIN


def test_int_overflow_positive_saturates():
    with pytest.raises(ParseError) as info:
        parse_int(str(INT_MAX + 1))
    assert info.value.kind is ParseErrorKind.OVERFLOW
    assert info.value.value == INT_MAX


def test_int_overflow_negative_saturates():
    with pytest.raises(ParseError) as info:
        parse_int(str(INT_MIN - 1))
    assert info.value.kind is ParseErrorKind.OVERFLOW
    assert info.value.value == INT_MIN


def test_long_accepts_values_beyond_int():
    assert parse_long(str(INT_MAX + 1)) == INT_MAX + 1
    assert parse_long(str(INT_MIN - 1)) == INT_MIN - 1


def test_long_overflow_saturates():
    with pytest.raises(ParseError) as info:
        parse_long(str(LONG_MAX + 1))
    assert info.value.kind is ParseErrorKind.OVERFLOW
    assert info.value.value == LONG_MAX
    with pytest.raises(ParseError) as info:
        parse_long(str(LONG_MIN - 1))
    assert info.value.value == LONG_MIN


def test_overflow_wins_over_trailing_garbage():
    text = "9" * 30 + "abc"
    with pytest.raises(ParseError) as info:
        parse_int(text)
    assert info.value.kind is ParseErrorKind.OVERFLOW
    with pytest.raises(ParseError) as info:
        parse_long(text)
    assert info.value.kind is ParseErrorKind.OVERFLOW


@pytest.mark.parametrize("text", ["", None])
def test_empty(text):
    with pytest.raises(ParseError) as info:
        parse_int(text)
    assert info.value.kind is ParseErrorKind.EMPTY_STRING
    assert info.value.value == 0
    with pytest.raises(ParseError) as info:
        parse_long(text)
    assert info.value.kind is ParseErrorKind.EMPTY_STRING
    assert info.value.value == 0


@pytest.mark.parametrize("text", ["   ", "-", "+", "abc", "+-1", "--1", "\u0661\u0662"])
def test_no_digits(text):
    with pytest.raises(ParseError) as info:
        parse_int(text)
    assert info.value.kind is ParseErrorKind.NO_DIGITS
    with pytest.raises(ParseError) as info:
        parse_long(text)
    assert info.value.kind is ParseErrorKind.NO_DIGITS


@pytest.mark.parametrize("text", ["12a", "12 ", "1.5", "3-"])
def test_invalid_trailing_chars(text):
    with pytest.raises(ParseError) as info:
        parse_int(text)
    assert info.value.kind is ParseErrorKind.INVALID_CHAR
    assert info.value.value == 0
    with pytest.raises(ParseError) as info:
        parse_long(text)
    assert info.value.kind is ParseErrorKind.INVALID_CHAR
    assert info.value.value == 0


def test_parse_error_is_value_error():
    with pytest.raises(ValueError) as info:
        parse_int("x")
    assert info.value.text == "x"