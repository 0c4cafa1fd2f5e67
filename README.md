# pushswap

Sort a list of integers using two stacks, `a` and `b`, and a small set of
operations. Also check whether a sequence of those operations sorts a list.

## Operations

| Name  | Effect                                      |
|-------|---------------------------------------------|
| `sa`  | swap the top two elements of `a`            |
| `sb`  | swap the top two elements of `b`            |
| `ss`  | `sa` and `sb` together                      |
| `pa`  | move the top of `b` onto `a`                |
| `pb`  | move the top of `a` onto `b`                |
| `ra`  | rotate `a` up: the top becomes the bottom   |
| `rb`  | rotate `b` up                               |
| `rr`  | `ra` and `rb` together                      |
| `rra` | rotate `a` down: the bottom becomes the top |
| `rrb` | rotate `b` down                             |
| `rrr` | `rra` and `rrb` together                    |

An operation that cannot act leaves the stacks as they are: swaps and
rotations need at least two elements, reverse rotations at least three, and
`rrr` acts only when both stacks hold something.

## Installation

```
pip install .
```

## Commands

`push_swap` takes integers as separate arguments or as one quoted,
space-separated string. It prints the operations that sort them, one per
line, and exits with status 0. It prints nothing when the input is already
sorted. It prints `Error` and exits with status 1 when a value is not an
integer, lies outside the 32-bit signed range, or appears twice. With no
arguments, or fewer than two values, it prints nothing and exits with
status 1.

```
push_swap 3 2 1
push_swap "5 1 4 2 3"
```

Up to five values are sorted with short fixed sequences; more values are
moved to `b` and inserted back into `a` one at a time, each time choosing
the element that needs the fewest rotations.

`checker` takes the same arguments, reads operations from standard input
one per line, and prints `OK` if they leave `a` sorted and `b` empty, and
`KO` otherwise. It prints `Error` for an unknown operation, for invalid
values, and for fewer than two values.

```
push_swap 4 67 3 87 23 | checker 4 67 3 87 23
```

## Library use

```python
from pushswap.stacks import Stacks, Operation
from pushswap.sorting import sort_stacks
from pushswap.cli import run_checker

stacks = Stacks([3, 2, 1])
stacks.apply(Operation.SA)          # returns True when the operation is reported
print(stacks.a, stacks.top_a(), stacks.is_sorted())   # (2, 3, 1) 2 False

operations = sort_stacks(Stacks([5, 1, 4, 2, 3]))
print(run_checker(Stacks([5, 1, 4, 2, 3]), (str(op) for op in operations)))  # True
```

- `pushswap.stacks`: `Stacks` (with `a`, `b`, `size`, `size_a`, `size_b`,
  `apply`, `top_a`, `top_b`, `is_sorted`) and the `Operation` enum.
  `apply` also accepts an operation's name and raises `ValueError` for an
  unknown one.
- `pushswap.sorting`: `sort_stacks`, `sort_small`, `insertion_sort`, each
  returning the list of operations it used, plus the helpers `median`,
  `rotation_scores` and `count_to_min`.
- `pushswap.parsing`: `separate_arguments`, `split_words`, `validate`,
  `parse_int` (32-bit wrapping), `parse_long`, `is_number`,
  `has_only_allowed_chars` and `is_sorted`. Bad input raises `InvalidInput`,
  whose `silent` attribute is set when there are fewer than two values.
- `pushswap.cli`: `run_checker`, `push_swap_main` and `checker_main`.

## Tests

```
pip install .[test]
pytest
```