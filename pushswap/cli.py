"""Command-line entry points: the sorter and the checker."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.parsing import InvalidInput, is_sorted, separate_arguments, validate
from pushswap.sorting import sort_stacks
from pushswap.stacks import Operation, Stacks

_EXIT_FAILURE = 1


def _report_error() -> int:
    sys.stdout.write("Error\n")
    return _EXIT_FAILURE


def run_checker(stacks: Stacks, lines: Iterable[str]) -> bool:
    """Apply one operation per line to the stacks and tell whether they end sorted.

    Newlines around each line are ignored. Raises InvalidInput at the first
    line that names no operation.
    """
    for line in lines:
        command = line.strip("\n")
        try:
            operation = Operation(command)
        except ValueError:
            raise InvalidInput(f"unknown operation: {command!r}") from None
        stacks.apply(operation)
    return stacks.is_sorted()


def push_swap_main(argv: Sequence[str] | None = None) -> int:
    """Print the operations that sort the given integers; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return _EXIT_FAILURE
    words = separate_arguments(args)
    try:
        values = validate(words)
    except InvalidInput as exc:
        if exc.silent:
            return _EXIT_FAILURE
        return _report_error()
    if is_sorted(values):
        return 0
    stacks = Stacks(values)
    for operation in sort_stacks(stacks):
        sys.stdout.write(f"{operation}\n")
    return 0


def checker_main(argv: Sequence[str] | None = None) -> int:
    """Read operations from standard input and print OK or KO; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return _EXIT_FAILURE
    words = separate_arguments(args)
    if len(words) < 2:
        return _report_error()
    try:
        values = validate(words)
    except InvalidInput:
        return _report_error()
    stacks = Stacks(values)
    try:
        sorted_ok = run_checker(stacks, sys.stdin)
    except InvalidInput:
        return _report_error()
    sys.stdout.write("OK\n" if sorted_ok else "KO\n")
    return 0