# pushswap

Sort a list of distinct integers using two stacks, `a` and `b`, and a small
fixed set of operations. The package computes a short sequence of operations
that leaves stack `a` in ascending order from the top.

## Operations

| Operation | Effect |
|-----------|--------|
| `sa`, `sb`, `ss` | swap the top two elements of `a`, `b`, or both |
| `pa`, `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra`, `rb`, `rr` | rotate `a`, `b`, or both up. The top element goes to the bottom |
| `rra`, `rrb`, `rrr` | rotate `a`, `b`, or both down. The bottom element goes to the top |

An operation that needs more elements than a stack holds leaves that stack
unchanged.

## Installation

```
pip install .
```

## Commands

### push_swap

```
push_swap 3 2 1
```

This prints the operations that sort the numbers, one per line. You can pass
the numbers as separate arguments or in one quoted argument, for example
`push_swap "4 -1 +7 0"`. Each number may carry a `+` or `-` sign. If the input
holds anything other than such numbers separated by spaces, a number outside
the 32-bit signed range, or a repeated number, the command prints `Error` on
standard error and nothing else. The exit status is always zero. A single
number, or numbers already in order, produce no output.

### checker

```
checker 3 2 1
```

`checker` reads the numbers from its arguments and checks them. It accepts
digits, spaces and `-` only (no `+`). If the input is malformed, holds a
repeated number, or yields no number, it prints `Error` on standard error.
It then always prints a fixed closing line on standard output and exits
with a non-zero status (the length of that line).

## Library use

```python
from pushswap.solver import solve
from pushswap.stacks import Stacks, Operation

moves = solve([3, 2, 1])
stacks = Stacks([3, 2, 1])
for op in moves:
    stacks.apply(op)
assert stacks.is_sorted()
```

- `pushswap.stacks`: `Operation` (an enum whose values are the operation
  names) and `Stacks`, holding deques `a` and `b`, with `apply(op)` accepting
  an `Operation` or its name, and `is_sorted()`.
- `pushswap.solver`: `solve(numbers)` returns the list of operations;
  `sort_three(stacks)` orders the top three values of `a`;
  `rotation_cost(index, size)` and `combined_cost(a_cost, b_cost)` are the
  cost helpers the solver uses. `solve` raises `InputError` for an empty or
  repeating input.
- `pushswap.parsing`: `join_arguments(args)` joins arguments into one line,
  `is_valid_input(line)` checks it, and `parse_numbers(line)` turns it into
  integers, raising `InputError` for out-of-range or repeated values.
- `pushswap.checker`: `parse_checker_input(line)` reads the checker's numbers,
  and `apply_moves(stacks, lines)` applies newline-terminated move lines to a
  `Stacks`, stopping at the first unrecognised line, and returns the
  operations applied.

## What it does not do

The `checker` command does not read moves from standard input and does not
report whether a sequence of moves sorts the numbers. To verify a sequence,
use `apply_moves` and `Stacks.is_sorted()` from Python.

## Tests

```
pip install .[test]
pytest
```