"""Strategies that sort stack a, producing the list of operations used."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from pushswap.stacks import Operation, Stacks


class _Session:
    """Applies operations to stacks and keeps those that get reported."""

    def __init__(self, stacks: Stacks) -> None:
        self.stacks = stacks
        self.log: list[Operation] = []

    def __call__(self, operation: Operation) -> None:
        if self.stacks.apply(operation):
            self.log.append(operation)


@dataclass
class _Move:
    """The cheapest way found to bring one element of b into place in a."""

    count_a: int
    dest_a: int
    count_b: int
    dest_b: int

    @property
    def cost(self) -> int:
        return self.count_a + self.count_b


def median(values: Iterable[int]) -> int:
    """The middle value of the sorted values; the upper one for an even count."""
    ordered = sorted(values)
    if not ordered:
        raise ValueError("median of no values")
    return ordered[len(ordered) // 2]


def rotation_scores(size: int) -> list[tuple[int, int]]:
    """For each position from the top, the rotations needed to reach the top.

    Each entry is ``(count, direction)``: direction 1 means rotate, -1 means
    reverse rotate. Positions up to ``size // 2`` rotate forwards.
    """
    if size <= 0:
        return []
    half = size // 2
    last_back = half if size % 2 else half - 1
    forward = [(index, 1) for index in range(half + 1)]
    backward = [(index, -1) for index in range(last_back, 0, -1)]
    return forward + backward


def count_to_min(values: Sequence[int], minimum: int) -> int:
    """Position of ``minimum`` counted from the top, or the length if absent."""
    return next(
        (index for index, value in enumerate(values) if value == minimum),
        len(values),
    )


def _sort_two(run: _Session) -> None:
    a = run.stacks.a
    if a[0] > a[1]:
        run(Operation.SA)


def _sort_three(run: _Session) -> None:
    largest = max(run.stacks.a)
    if run.stacks.top_a() == largest:
        run(Operation.RA)
    if run.stacks.a[1] == largest:
        run(Operation.RRA)
    a = run.stacks.a
    if a[0] > a[1]:
        run(Operation.SA)


def _sort_four_or_five(run: _Session) -> None:
    stacks = run.stacks
    smallest, largest = min(stacks.a), max(stacks.a)
    while stacks.size_b < 2:
        if stacks.top_a() in (smallest, largest):
            run(Operation.PB)
        else:
            run(Operation.RA)
    _sort_three(run)
    run(Operation.PA)
    run(Operation.PA)
    if stacks.top_a() != largest:
        run(Operation.SA)
    run(Operation.RA)


def sort_small(stacks: Stacks) -> list[Operation]:
    """Sort stacks of two to five values; other sizes are left alone."""
    run = _Session(stacks)
    if stacks.size == 2:
        _sort_two(run)
    elif stacks.size == 3:
        _sort_three(run)
    elif stacks.size in (4, 5):
        _sort_four_or_five(run)
    return run.log


def _push_all_to_b(run: _Session, smallest: int, largest: int, middle: int) -> None:
    stacks = run.stacks
    while stacks.size_a > 2:
        if stacks.top_a() not in (smallest, largest):
            run(Operation.PB)
            if stacks.top_b() > middle:
                run(Operation.RB)
        else:
            run(Operation.RA)
    a = stacks.a
    if a[0] < a[1]:
        run(Operation.SA)
    run(Operation.PA)


def _place_in_a(a: Sequence[int], value: int) -> tuple[int, int]:
    """Find where ``value`` goes in a: (position whose direction counts, rotations)."""
    run_length = 0
    while run_length < len(a) and a[run_length] < value:
        run_length += 1
    if run_length == 0:
        position, action = 0, 0
    else:
        position, action = run_length - 1, run_length
    bound = a[position]
    target = next(
        (index for index in range(position, len(a)) if value < a[index] < bound),
        None,
    )
    if target is not None:
        action += target - position
        position = target
    return position, action


def _cheapest_move(stacks: Stacks) -> _Move:
    a, b = stacks.a, stacks.b
    scores_a = rotation_scores(len(a))
    scores_b = rotation_scores(len(b))
    best: _Move | None = None
    for value, (score_b, direction_b) in zip(b, scores_b):
        position, action = _place_in_a(a, value)
        direction_a = scores_a[position][1]
        if direction_a == -1:
            action = len(a) - action
        if best is None or action + score_b < best.cost:
            best = _Move(action, direction_a, score_b, direction_b)
    assert best is not None
    return best


def _push_all_to_a(run: _Session, smallest: int) -> None:
    stacks = run.stacks
    while stacks.size_b:
        move = _cheapest_move(stacks)
        step_a = Operation.RA if move.dest_a == 1 else Operation.RRA
        for _ in range(move.count_a):
            run(step_a)
        step_b = Operation.RB if move.dest_b == 1 else Operation.RRB
        for _ in range(move.count_b):
            run(step_b)
        run(Operation.PA)
    if count_to_min(stacks.a, smallest) > stacks.size_a // 2:
        step = Operation.RRA
    else:
        step = Operation.RA
    while stacks.top_a() != smallest:
        run(step)


def insertion_sort(stacks: Stacks) -> list[Operation]:
    """Sort larger stacks by moving values to b and inserting them back cheaply."""
    run = _Session(stacks)
    values = stacks.a
    smallest, largest, middle = min(values), max(values), median(values)
    _push_all_to_b(run, smallest, largest, middle)
    _push_all_to_a(run, smallest)
    return run.log


def sort_stacks(stacks: Stacks) -> list[Operation]:
    """Sort with the strategy that suits the number of values."""
    if stacks.size <= 5:
        return sort_small(stacks)
    return insertion_sort(stacks)