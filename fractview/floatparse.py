"""Strict parsing of decimal floating-point numbers."""

from __future__ import annotations

import sys

from fractview.numparse import ParseError, ParseErrorKind

_SPACES = frozenset(" \t\n\v\f\r")
_MAX_FINITE = sys.float_info.max


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _skip_spaces(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _SPACES:
        pos += 1
    return pos


def _will_overflow(current: float, digit: int) -> bool:
    return current > (_MAX_FINITE - digit) / 10.0


def parse_double(text: str | None) -> float:
    """Parse ``text`` as a plain decimal number such as ``-1.25``.

    Leading and trailing whitespace and a single sign are accepted.
    Exponents, hex forms and other trailing characters are rejected with
    :class:`ParseError`.  An integer part too large for a finite float
    raises with ``kind`` OVERFLOW and ``value`` set to the signed largest
    finite float.
    """
    if not text:
        raise ParseError(ParseErrorKind.EMPTY_STRING, text)

    pos = _skip_spaces(text, 0)
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        sign = -1 if text[pos] == "-" else 1
        pos += 1

    start = pos
    value = 0.0
    while pos < len(text) and _is_digit(text[pos]):
        digit = ord(text[pos]) - ord("0")
        if _will_overflow(value, digit):
            raise ParseError(ParseErrorKind.OVERFLOW, text, sign * _MAX_FINITE)
        value = value * 10.0 + digit
        pos += 1

    fraction_digits = False
    if pos < len(text) and text[pos] == ".":
        pos += 1
        power = 1.0
        while pos < len(text) and _is_digit(text[pos]):
            fraction_digits = True
            power *= 0.1
            value += (ord(text[pos]) - ord("0")) * power
            pos += 1

    if pos == start and not fraction_digits:
        raise ParseError(ParseErrorKind.NO_DIGITS, text)
    value *= sign

    pos = _skip_spaces(text, pos)
    if pos != len(text):
        raise ParseError(ParseErrorKind.INVALID_CHAR, text)
    return value