"""The two stacks and the eleven operations that rearrange them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from enum import Enum
from itertools import pairwise


class Operation(str, Enum):
    """An operation on the stacks, named by its command text."""

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


def _swap(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack[0], stack[1] = stack[1], stack[0]
    return True


def _push(source: deque[int], target: deque[int]) -> bool:
    if not source:
        return False
    target.appendleft(source.popleft())
    return True


def _rotate(stack: deque[int]) -> bool:
    if len(stack) < 2:
        return False
    stack.rotate(-1)
    return True


def _reverse_rotate(stack: deque[int]) -> bool:
    # A reverse rotation only takes effect on three or more elements.
    if len(stack) < 3:
        return False
    stack.rotate(1)
    return True


class Stacks:
    """Stack a, holding the values with the first one on top, and an empty stack b."""

    def __init__(self, values: Iterable[int]) -> None:
        self._a: deque[int] = deque(values)
        self._b: deque[int] = deque()
        self.size = len(self._a)

    @property
    def a(self) -> tuple[int, ...]:
        """Contents of stack a, top first."""
        return tuple(self._a)

    @property
    def b(self) -> tuple[int, ...]:
        """Contents of stack b, top first."""
        return tuple(self._b)

    @property
    def size_a(self) -> int:
        return len(self._a)

    @property
    def size_b(self) -> int:
        return len(self._b)

    def apply(self, operation: Operation | str) -> bool:
        """Carry out an operation.

        Returns True when the operation is one that gets reported, which is
        whenever it took effect, and always for ``ss`` and ``rr``.
        Raises ValueError for text that names no operation.
        """
        op = Operation(operation)
        a, b = self._a, self._b
        if op is Operation.SA:
            return _swap(a)
        if op is Operation.SB:
            return _swap(b)
        if op is Operation.SS:
            _swap(a)
            _swap(b)
            return True
        if op is Operation.PA:
            return _push(b, a)
        if op is Operation.PB:
            return _push(a, b)
        if op is Operation.RA:
            return _rotate(a)
        if op is Operation.RB:
            return _rotate(b)
        if op is Operation.RR:
            _rotate(a)
            _rotate(b)
            return True
        if op is Operation.RRA:
            return _reverse_rotate(a)
        if op is Operation.RRB:
            return _reverse_rotate(b)
        if a and b:
            _reverse_rotate(a)
            _reverse_rotate(b)
            return True
        return False

    def top_a(self) -> int:
        """The value on top of stack a."""
        if not self._a:
            raise IndexError("stack a is empty")
        return self._a[0]

    def top_b(self) -> int:
        """The value on top of stack b."""
        if not self._b:
            raise IndexError("stack b is empty")
        return self._b[0]

    def is_sorted(self) -> bool:
        """True when b is empty and a ascends from top to bottom."""
        return not self._b and all(x <= y for x, y in pairwise(self._a))

    def __repr__(self) -> str:
        return f"Stacks(a={list(self._a)}, b={list(self._b)})"