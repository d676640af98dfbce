# pushswap

Sorts a list of distinct integers using two stacks, `a` and `b`, and a small
instruction set. It prints the instructions that sort stack `a` in ascending
order, with the smallest number on top.

Two or three numbers are sorted directly: a single `sa` for two, and at most
two operations for three. Longer lists use a cheapest-move strategy. All but
three numbers are pushed to `b`, the three left on `a` are sorted, and the
numbers are then brought back one at a time. Each turn, the number in `b` that
needs the fewest rotations to place goes back next. It is placed above the
closest larger number in `a`, or above the smallest number in `a` if no larger
one exists. At the end `a` is rotated until its smallest number is on top.

## Instructions

| Name  | Effect                                        |
|-------|-----------------------------------------------|
| `sa`  | swap the two top elements of `a`              |
| `sb`  | swap the two top elements of `b`              |
| `ss`  | `sa` and `sb` together                        |
| `pa`  | move the top of `b` onto `a`                  |
| `pb`  | move the top of `a` onto `b`                  |
| `ra`  | rotate `a` up (top goes to the bottom)        |
| `rb`  | rotate `b` up                                 |
| `rr`  | `ra` and `rb` together                        |
| `rra` | rotate `a` down (bottom comes to the top)     |
| `rrb` | rotate `b` down                               |
| `rrr` | `rra` and `rrb` together                      |

An instruction does nothing to a stack that is too short for it. For example,
a swap on a stack with fewer than two elements leaves that stack unchanged.

## Command line

Install the package, then give the numbers either as separate arguments or as
one argument separated by spaces:

```
push-swap 3 2 5 1 4
push-swap "3 2 5 1 4"
```

`python -m pushswap.cli` works the same way.

Each instruction is written to standard output on its own line. A list that is
already sorted produces no output.

The command writes `Error` to standard error and exits with status 1 if the
input has any of these problems:

- an argument is not an optionally signed run of decimal digits (`+5`, `-12`
  and `007` are accepted; `1.5`, `--3` and `12a` are not)
- a number is outside the 32-bit signed range
- a number appears more than once

Some inputs behave differently:

- With no arguments, or with a single argument that contains only spaces, the
  command exits with status 1 and writes nothing.
- With a single empty argument, it writes `Error` to standard error and exits
  with status 0.

## Library

```python
from pushswap.sorting import solve
from pushswap.stacks import Stacks

ops = solve([3, 2, 5, 1, 4])          # list of Operation members

stacks = Stacks([3, 2, 5, 1, 4])
for op in ops:
    stacks.apply(op)
assert stacks.values_a() == [1, 2, 3, 4, 5]
assert stacks.values_b() == []
```

- `pushswap.stacks`
  - `Stacks` holds stacks `a` and `b`, each a `deque` of `Node`, top first.
  - `Stacks.apply` takes an `Operation` or its name (such as `"rra"`) and
    records it in `Stacks.operations`. `str(op)` gives the instruction name.
  - `is_sorted`, `find_biggest` and `find_smallest` are helper functions.
- `pushswap.parsing`
  - `parse_numbers` turns string arguments into integers and raises
    `InputError` (a `ValueError`) on bad syntax, out-of-range values or
    duplicates.
  - `is_valid_number` checks the syntax of one argument.
  - `split_words` splits a string on a separator and drops empty pieces.
- `pushswap.sorting`
  - `solve` returns the operations for a list of values.
  - `sort_three`, `sort_stack` and `bring_to_top` act on a `Stacks`.
  - `index_stack`, `set_targets`, `update_costs` and `mark_cheapest` compute
    the per-node bookkeeping that `sort_stack` uses to pick each move.

## What it does not do

There is no command that reads a list of instructions and checks whether they
sort a given input. To verify a sequence of instructions, apply them with
`Stacks.apply` in code.

## Running the tests

```
pip install -e ".[test]"
pytest
```