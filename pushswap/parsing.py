"""Turning command-line arguments into a list of distinct integers."""

from __future__ import annotations

from collections.abc import Iterable

INT_MIN = -2147483648
INT_MAX = 2147483647

_DIGITS = frozenset("0123456789")
_SIGNS = frozenset("+-")
_ALLOWED = _DIGITS | _SIGNS | {" "}


class InputError(ValueError):
    """Raised when the numbers to sort are malformed, out of range or repeated."""


def join_arguments(args: Iterable[str]) -> str:
    """Join arguments into one space-separated line.

    A separating space is added only when the line so far is not empty and
    the next argument does not already start with a space. A single trailing
    space on each argument is dropped.
    """
    line = ""
    for arg in args:
        if line and not arg.startswith(" "):
            line += " "
        line += arg[:-1] if arg.endswith(" ") else arg
    return line


def is_valid_input(line: str) -> bool:
    """Tell whether a line holds only signed numbers separated by spaces.

    A sign must be followed directly by a digit; any other character than
    digits, spaces, ``+`` and ``-`` makes the line invalid.
    """
    i = 0
    length = len(line)
    while i < length:
        char = line[i]
        if char not in _ALLOWED:
            return False
        if char in _SIGNS and (i + 1 >= length or line[i + 1] not in _DIGITS):
            return False
        if char in _SIGNS:
            i += 1
        while i < length and line[i] in _DIGITS:
            i += 1
        if i < length and line[i] == " ":
            i += 1
    return True


def parse_numbers(line: str) -> list[int]:
    """Read the integers of a line in order.

    Raises InputError when a value leaves the 32-bit signed range, when a
    value appears twice, or when the line holds a character that cannot
    belong to a number. A run of spaces at the very end reads as a zero,
    as does a lone sign.
    """
    numbers: list[int] = []
    i = 0
    length = len(line)
    while i < length:
        start = i
        sign = 1
        while i < length and line[i] == " ":
            i += 1
        if i < length and line[i] == "-":
            sign = -1
            i += 1
        elif i < length and line[i] == "+":
            i += 1
        value = 0
        while i < length and line[i] in _DIGITS:
            value = value * 10 + int(line[i])
            i += 1
            if not INT_MIN <= value * sign <= INT_MAX:
                raise InputError(f"value out of range in {line!r}")
        if i == start:
            raise InputError(f"unexpected character {line[i]!r}")
        numbers.append(value * sign)
    if len(set(numbers)) != len(numbers):
        raise InputError("duplicate value")
    return numbers