"""Producing a sequence of stack operations that sorts a list of integers."""

from __future__ import annotations

import sys
from bisect import bisect_right
from collections.abc import Iterable, Sequence

from pushswap.parsing import InputError, is_valid_input, join_arguments, parse_numbers
from pushswap.stacks import Operation, Stacks


class _Recorder:
    """Applies operations to a pair of stacks and remembers them in order."""

    def __init__(self, stacks: Stacks) -> None:
        self.stacks = stacks
        self.ops: list[Operation] = []

    def do(self, op: Operation, times: int = 1) -> None:
        for _ in range(times):
            self.stacks.apply(op)
            self.ops.append(op)


def rotation_cost(index: int, size: int) -> int:
    """Signed number of rotations that bring position ``index`` to the top.

    Positive values count forward rotations, negative values reverse ones.
    Positions up to and including the middle rotate forward.
    """
    if index <= size // 2:
        return index
    return index - size


def combined_cost(a_cost: int, b_cost: int) -> int:
    """Number of operations needed to perform both rotations.

    Rotations in the same direction share their common part.
    """
    if a_cost > 0 and b_cost > 0:
        return max(a_cost, b_cost)
    if a_cost < 0 and b_cost < 0:
        return -min(a_cost, b_cost)
    return abs(a_cost) + abs(b_cost)


def _sort_three(rec: _Recorder) -> None:
    a = rec.stacks.a
    if len(a) < 3:
        raise ValueError("stack a holds fewer than three values")
    first, second, third = a[0], a[1], a[2]
    if first > second:
        if second < third:
            rec.do(Operation.SA if first < third else Operation.RA)
        else:
            rec.do(Operation.SA)
            rec.do(Operation.RRA)
    elif second > third:
        if first < third:
            rec.do(Operation.SA)
            rec.do(Operation.RA)
        else:
            rec.do(Operation.RRA)


def sort_three(stacks: Stacks) -> list[Operation]:
    """Order the top three values of stack ``a`` and return the operations used."""
    rec = _Recorder(stacks)
    _sort_three(rec)
    return rec.ops


def _best_move(a: Sequence[int], b: Sequence[int]) -> tuple[int, int]:
    """Rotation costs on ``a`` and ``b`` of the cheapest value to bring back."""
    sorted_a = sorted(a)
    position = {value: i for i, value in enumerate(a)}
    best: tuple[int, int] | None = None
    best_cost = 0
    for j, value in enumerate(b):
        k = bisect_right(sorted_a, value)
        target = sorted_a[k] if k < len(sorted_a) else sorted_a[0]
        a_cost = rotation_cost(position[target], len(a))
        b_cost = rotation_cost(j, len(b))
        cost = combined_cost(a_cost, b_cost)
        if best is None or cost < best_cost:
            best = (a_cost, b_cost)
            best_cost = cost
    if best is None:
        raise ValueError("stack b is empty")
    return best


def _push_top(rec: _Recorder, a_cost: int, b_cost: int) -> None:
    if a_cost > 0 and b_cost > 0:
        common = min(a_cost, b_cost)
        rec.do(Operation.RR, common)
        rec.do(Operation.RA, a_cost - common)
        rec.do(Operation.RB, b_cost - common)
    elif a_cost < 0 and b_cost < 0:
        common = min(-a_cost, -b_cost)
        rec.do(Operation.RRR, common)
        rec.do(Operation.RRA, -a_cost - common)
        rec.do(Operation.RRB, -b_cost - common)
    else:
        rec.do(Operation.RA, max(a_cost, 0))
        rec.do(Operation.RB, max(b_cost, 0))
        rec.do(Operation.RRA, max(-a_cost, 0))
        rec.do(Operation.RRB, max(-b_cost, 0))
    rec.do(Operation.PA)


def _return_to_a(rec: _Recorder) -> None:
    stacks = rec.stacks
    while stacks.b:
        a_cost, b_cost = _best_move(stacks.a, stacks.b)
        _push_top(rec, a_cost, b_cost)


def _bring_smallest_up(rec: _Recorder) -> None:
    a = rec.stacks.a
    if rec.stacks.is_sorted():
        return
    index = list(a).index(min(a))
    cost = rotation_cost(index, len(a))
    if cost > 0:
        rec.do(Operation.RA, cost)
    else:
        rec.do(Operation.RRA, -cost)


def _push_to_b(rec: _Recorder) -> None:
    stacks = rec.stacks
    for _ in range(len(stacks.a) - 3):
        if stacks.is_sorted():
            break
        rec.do(Operation.PB)
    _sort_three(rec)
    _return_to_a(rec)
    _bring_smallest_up(rec)


def solve(numbers: Iterable[int]) -> list[Operation]:
    """Return the operations that sort ``numbers`` in ascending order on stack ``a``.

    Raises InputError when there is nothing to sort or a value repeats.
    """
    values = list(numbers)
    if not values:
        raise InputError("nothing to sort")
    if len(set(values)) != len(values):
        raise InputError("duplicate value")
    rec = _Recorder(Stacks(values))
    if len(values) == 2:
        if not rec.stacks.is_sorted():
            rec.do(Operation.RA)
    elif len(values) == 3:
        _sort_three(rec)
    elif len(values) > 3:
        _push_to_b(rec)
    return rec.ops


def main(argv: Sequence[str] | None = None) -> int:
    """Print the operations sorting the numbers given as arguments.

    Malformed input prints ``Error`` on standard error. The exit status is
    zero in every case.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    line = join_arguments(args)
    try:
        if not is_valid_input(line):
            raise InputError(f"malformed input {line!r}")
        ops = solve(parse_numbers(line))
    except InputError:
        sys.stderr.write("Error\n")
        return 0
    sys.stdout.write("".join(f"{op}\n" for op in ops))
    return 0


if __name__ == "__main__":
    sys.exit(main())