"""Strict parsing of decimal integers with fixed-width range checks."""

from __future__ import annotations

from enum import Enum

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
LONG_MIN = -(2**63)
LONG_MAX = 2**63 - 1

_SPACES = frozenset(" \t\n\v\f\r")


class ParseErrorKind(Enum):
    """Why a numeric string was rejected."""

    OVERFLOW = 1
    INVALID_CHAR = 2
    NO_DIGITS = 3
    EMPTY_STRING = 4


class ParseError(ValueError):
    """Raised when a string is not a valid number.

    ``value`` holds the saturated limit when the number overflowed and 0
    otherwise.
    """

    def __init__(self, kind: ParseErrorKind, text: str | None, value: int | float = 0):
        self.kind = kind
        self.text = text
        self.value = value
        super().__init__(f"{kind.name.lower().replace('_', ' ')}: {text!r}")


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _skip_spaces(text: str, pos: int = 0) -> int:
    while pos < len(text) and text[pos] in _SPACES:
        pos += 1
    return pos


def _read_sign(text: str, pos: int) -> tuple[int, int]:
    if pos < len(text) and text[pos] in "+-":
        return (-1 if text[pos] == "-" else 1), pos + 1
    return 1, pos


def _parse_bounded(text: str | None, low: int, high: int) -> int:
    if not text:
        raise ParseError(ParseErrorKind.EMPTY_STRING, text)
    pos = _skip_spaces(text)
    sign, pos = _read_sign(text, pos)
    if pos >= len(text) or not _is_digit(text[pos]):
        raise ParseError(ParseErrorKind.NO_DIGITS, text)

    limit = high if sign > 0 else -low
    magnitude = 0
    while pos < len(text) and _is_digit(text[pos]):
        magnitude = magnitude * 10 + (ord(text[pos]) - ord("0"))
        if magnitude > limit:
            raise ParseError(
                ParseErrorKind.OVERFLOW, text, high if sign > 0 else low
            )
        pos += 1

    if pos != len(text):
        raise ParseError(ParseErrorKind.INVALID_CHAR, text)
    return sign * magnitude


def parse_int(text: str | None) -> int:
    """Parse ``text`` as a signed 32-bit decimal integer.

    Leading whitespace and a single sign are accepted; anything after the
    digits, whitespace included, is rejected.
    """
    return _parse_bounded(text, INT_MIN, INT_MAX)


def parse_long(text: str | None) -> int:
    """Parse ``text`` as a signed 64-bit decimal integer, like ``parse_int``."""
    return _parse_bounded(text, LONG_MIN, LONG_MAX)