"""Reading the numbers and moves handed to the checker command."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.parsing import INT_MAX, INT_MIN, InputError, join_arguments
from pushswap.stacks import Operation, Stacks

_DIGITS = frozenset("0123456789")
_ALLOWED = _DIGITS | {" ", "-"}

# Names in the order they are tried against each incoming line.
_MOVE_ORDER = (
    Operation.SA,
    Operation.SB,
    Operation.SS,
    Operation.RA,
    Operation.RB,
    Operation.RR,
    Operation.RRA,
    Operation.RRB,
    Operation.RRR,
    Operation.PB,
    Operation.PA,
)

FINAL_MESSAGE = "Acertou miseravi\n"
EXIT_STATUS = len(FINAL_MESSAGE)


def _looks_numeric(line: str) -> bool:
    """Accept only digits, spaces and minus signs, with at least one separator or a leading digit."""
    if any(char not in _ALLOWED for char in line):
        return False
    leading_digit = 1 if line[:1] in _DIGITS and line else 0
    return leading_digit + line.count(" ") > 0


def parse_checker_input(line: str) -> list[int]:
    """Read the integers the checker starts from.

    Each value may be preceded by a single space and a minus sign. Reading
    stops quietly at the first value outside the 32-bit signed range, in
    which case repeated values are not looked for. Raises InputError when
    the line is malformed, holds a repeated value, or yields no value.
    """
    if not _looks_numeric(line):
        raise InputError(f"malformed input {line!r}")
    numbers: list[int] = []
    truncated = False
    i = 0
    length = len(line)
    while i < length:
        sign = 1
        value = 0
        if line[i] == " ":
            i += 1
        if i < length and line[i] == "-":
            sign = -1
            i += 1
        while i < length and line[i] in _DIGITS:
            value = value * 10 + int(line[i])
            i += 1
        signed = value * sign
        if not INT_MIN <= signed <= INT_MAX:
            truncated = True
            break
        numbers.append(signed)
    if not truncated and len(set(numbers)) != len(numbers):
        raise InputError("duplicate value")
    if not numbers:
        raise InputError("nothing to check")
    return numbers


def _match_move(line: str) -> Operation | None:
    if not line:
        return None
    for op in _MOVE_ORDER:
        if f"{op.value}\n".startswith(line):
            return op
    return None


def apply_moves(stacks: Stacks, lines: Iterable[str]) -> list[Operation]:
    """Apply moves read line by line, stopping at the first line not recognised.

    A line is taken as a move when it is a non-empty beginning of the move's
    name followed by a newline; names are tried in a fixed order. Returns
    the operations applied.
    """
    applied: list[Operation] = []
    for line in lines:
        op = _match_move(line)
        if op is None:
            break
        stacks.apply(op)
        applied.append(op)
    return applied


def main(argv: Sequence[str] | None = None) -> int:
    """Validate the numbers given as arguments and print the closing message.

    Malformed input prints ``Error`` on standard error first.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        line = join_arguments(args)
        try:
            parse_checker_input(line)
        except InputError:
            sys.stderr.write("Error\n")
    sys.stdout.write(FINAL_MESSAGE)
    return EXIT_STATUS


if __name__ == "__main__":
    sys.exit(main())