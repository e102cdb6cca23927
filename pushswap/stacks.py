"""The two stacks and the operations allowed on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum


class Operation(str, Enum):
    """An instruction that rearranges the stacks."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


def _push(src: deque[int], dest: deque[int]) -> None:
    if src:
        dest.appendleft(src.popleft())


class Stacks:
    """Stack ``a`` holding the numbers to sort and an initially empty stack ``b``.

    The top of each stack is its first element. Operations that need more
    elements than a stack holds leave it unchanged.
    """

    def __init__(self, numbers: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(numbers)
        self.b: deque[int] = deque()

    def apply(self, op: Operation | str) -> None:
        """Carry out one operation, given as an Operation or its name."""
        op = Operation(op)
        a, b = self.a, self.b
        if op is Operation.SA:
            _swap(a)
        elif op is Operation.SB:
            _swap(b)
        elif op is Operation.SS:
            _swap(a)
            _swap(b)
        elif op is Operation.PA:
            _push(b, a)
        elif op is Operation.PB:
            _push(a, b)
        elif op is Operation.RA:
            _rotate(a)
        elif op is Operation.RB:
            _rotate(b)
        elif op is Operation.RR:
            _rotate(a)
            _rotate(b)
        elif op is Operation.RRA:
            _reverse_rotate(a)
        elif op is Operation.RRB:
            _reverse_rotate(b)
        else:
            _reverse_rotate(a)
            _reverse_rotate(b)

    def is_sorted(self) -> bool:
        """Tell whether stack ``a`` is in ascending order from the top."""
        return all(x <= y for x, y in zip(self.a, list(self.a)[1:]))

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)}, b={list(self.b)})"