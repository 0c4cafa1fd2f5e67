"""Turning command-line text into the list of integers to sort."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import pairwise

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"
_ALNUM = _DIGITS + "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ALLOWED = frozenset(_WHITESPACE + _DIGITS + "-")


class InvalidInput(ValueError):
    """The arguments do not describe a list of distinct integers.

    ``silent`` is set when the input is rejected without an error message,
    as happens when there are fewer than two values.
    """

    def __init__(self, message: str, *, silent: bool = False) -> None:
        super().__init__(message)
        self.silent = silent


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    half = 1 << (bits - 1)
    return (value + half) % (1 << bits) - half


def _scan(text: str) -> tuple[bool, str]:
    """Skip leading whitespace and one sign; return (negative, leading digits)."""
    rest = text.lstrip(_WHITESPACE)
    negative = rest.startswith("-")
    if rest[:1] in ("+", "-"):
        rest = rest[1:]
    end = 0
    while end < len(rest) and rest[end] in _DIGITS:
        end += 1
    return negative, rest[:end]


def parse_int(text: str) -> int:
    """Read a leading integer the way the value reader does, with 32-bit wrapping.

    Whitespace and one sign may come first; reading stops at the first
    non-digit. A magnitude reaching 2**63, or more than 25 digits, gives -1
    for a positive number and 0 for a negative one.
    """
    negative, digits = _scan(text)
    result = 0
    for counter, char in enumerate(digits):
        result = (result * 10 + int(char)) % (1 << 64)
        if result >= 1 << 63 or counter >= 25:
            return 0 if negative else -1
    value = _wrap(result, 32)
    return _wrap(-value if negative else value, 32)


def parse_long(text: str) -> int:
    """Read a leading integer as a 64-bit signed value, used for range checks."""
    negative, digits = _scan(text)
    result = 0
    for char in digits:
        result = _wrap(result * 10 + int(char), 64)
    return _wrap(-result if negative else result, 64)


def is_number(text: str) -> bool:
    """True when the text is an optional sign followed only by digits."""
    body = text[1:] if text[:1] in ("+", "-") else text
    return all(char in _DIGITS for char in body)


def has_only_allowed_chars(text: str) -> bool:
    """True when every character is whitespace, a digit or a minus sign."""
    return all(char in _ALLOWED for char in text)


def split_words(text: str) -> list[str]:
    """Split a single argument on spaces.

    The last word is dropped when the text neither ends in a space nor in a
    letter or digit.
    """
    words = [word for word in text.split(" ") if word]
    if not words:
        return []
    if text.endswith(" ") or text[-1] in _ALNUM:
        return words
    return words[:-1]


def separate_arguments(args: Sequence[str]) -> list[str]:
    """Turn the program arguments into words.

    A single argument is split on spaces; several arguments are taken as they are.
    """
    if len(args) == 1:
        return split_words(args[0])
    return list(args)


def validate(words: Iterable[str]) -> list[int]:
    """Check the words and return their integer values.

    Raises InvalidInput when there are fewer than two words (silently), when a
    word is not a number, when two words have the same value, or when a value
    lies outside the 32-bit signed range.
    """
    words = list(words)
    if len(words) < 2:
        raise InvalidInput("fewer than two values", silent=True)
    for word in words:
        if word and not (is_number(word) and has_only_allowed_chars(word)):
            raise InvalidInput(f"not a number: {word!r}")
    values = [parse_int(word) for word in words]
    if len(set(values)) != len(values):
        raise InvalidInput("duplicate values")
    for word in words:
        if not INT_MIN <= parse_long(word) <= INT_MAX:
            raise InvalidInput(f"out of range: {word!r}")
    return values


def is_sorted(values: Iterable[int]) -> bool:
    """True when the values never decrease."""
    return all(x <= y for x, y in pairwise(values))