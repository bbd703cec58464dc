"""Sorting larger stacks: keep a longest increasing run in ``a``, push the rest
to ``b``, then bring every value back with the cheapest insertion each time."""

from __future__ import annotations

import math
from bisect import bisect_left
from collections.abc import Collection, Sequence
from dataclasses import dataclass

from pushswap.lis import mark_lis
from pushswap.sort_three import sort_three
from pushswap.stacks import Stacks


@dataclass
class Move:
    """One way to bring the value at ``pos`` in ``b`` onto ``a``.

    Positive rotations count ``ra``/``rb`` steps, negative ones ``rra``/``rrb``
    steps; ``cost`` includes the final ``pa``.
    """

    rot_a: int = 0
    rot_b: int = 0
    cost: float = math.inf
    pos: int = 0
    value: int = 0


def compress(values: Sequence[int]) -> list[int]:
    """Replace each value with its rank among all the values."""
    ordered = sorted(values)
    return [bisect_left(ordered, v) for v in values]


def find_insert_index(a: Sequence[int], value: int) -> int:
    """Index in ``a`` that must be on top before pushing ``value`` onto it.

    ``a`` is taken as a rotated ascending run; a value outside its range goes
    above the minimum.
    """
    if not a:
        return 0
    smallest = min(a)
    pos_min = a.index(smallest)
    if value < smallest or value > max(a):
        return pos_min
    if len(a) <= 1:
        return 0
    prev = a[-1]
    for i, cur in enumerate(a):
        if prev < value < cur:
            return i
        prev = cur
    return pos_min


def move_cost(rot_a: int, rot_b: int) -> int:
    """Operations needed for both rotations, sharing ``rr``/``rrr``, plus ``pa``."""
    ca, cb = abs(rot_a), abs(rot_b)
    if (rot_a >= 0) == (rot_b >= 0):
        return max(ca, cb) + 1
    return ca + cb + 1


def _offer(best: Move, rot_a: int, rot_b: int, pos: int, value: int) -> None:
    cost = move_cost(rot_a, rot_b)
    if cost > best.cost:
        return
    if cost == best.cost:
        diff = max(abs(rot_a), abs(rot_b)) - max(abs(best.rot_a), abs(best.rot_b))
        if diff > 0:
            return
        if diff == 0:
            sumd = (abs(rot_a) + abs(rot_b)) - (abs(best.rot_a) + abs(best.rot_b))
            if not (sumd < 0 or (sumd == 0 and pos < best.pos)):
                return
    best.rot_a = rot_a
    best.rot_b = rot_b
    best.cost = cost
    best.pos = pos
    best.value = value


def best_move(a: Sequence[int], b: Sequence[int]) -> Move | None:
    """The cheapest move of any value of ``b`` into its place in ``a``.

    Returns ``None`` when ``b`` is empty.
    """
    if not b:
        return None
    size_a, size_b = len(a), len(b)
    best = Move()
    for idx_b, value in enumerate(b):
        idx_a = find_insert_index(a, value)
        _offer(best, idx_a, idx_b, idx_b, value)
        _offer(best, idx_a - size_a, idx_b - size_b, idx_b, value)
        _offer(best, idx_a, idx_b - size_b, idx_b, value)
        _offer(best, idx_a - size_a, idx_b, idx_b, value)
    return best


def _bring_non_lis_to_top(stacks: Stacks, keep: Collection[int]) -> None:
    a = stacks.a
    if not a or a[0] not in keep:
        return
    forward = 0
    for value in a:
        if value not in keep:
            break
        forward += 1
    last = max((i for i, v in enumerate(a) if v not in keep), default=-1)
    if last < 0:
        return
    backward = len(a) - last
    if forward <= backward:
        for _ in range(forward):
            stacks.ra()
    else:
        for _ in range(backward):
            stacks.rra()


def push_non_lis(stacks: Stacks, keep: Collection[int]) -> None:
    """Push every value of ``a`` not in ``keep`` to ``b``.

    Values at or below the middle rank are rotated to the bottom of ``b``.
    """
    while any(v not in keep for v in stacks.a):
        if stacks.a[0] in keep:
            _bring_non_lis_to_top(stacks, keep)
            continue
        pivot = (len(stacks.a) + len(stacks.b)) // 2
        stacks.pb()
        if len(stacks.b) >= 2 and stacks.b[0] <= pivot:
            stacks.rb()


def rotate_min_to_top(stacks: Stacks) -> None:
    """Rotate ``a`` the shorter way until its smallest value is on top."""
    a = stacks.a
    if len(a) < 2:
        return
    n = len(a)
    idx = list(a).index(min(a))
    if idx <= n // 2:
        for _ in range(idx):
            stacks.ra()
    else:
        for _ in range(n - idx):
            stacks.rra()


def _rotate_both(stacks: Stacks, rot_a: int, rot_b: int) -> tuple[int, int]:
    while rot_a > 0 and rot_b > 0:
        stacks.rr()
        rot_a -= 1
        rot_b -= 1
    while rot_a < 0 and rot_b < 0:
        stacks.rrr()
        rot_a += 1
        rot_b += 1
    return rot_a, rot_b


def _rotate(stacks: Stacks, rot: int, forward, backward) -> None:
    for _ in range(abs(rot)):
        (forward if rot > 0 else backward)()


def sort_large(stacks: Stacks) -> None:
    """Sort ``a`` of any size, recording the operations in ``stacks.ops``.

    The values of ``a`` are replaced by their ranks before sorting.
    """
    n = len(stacks.a)
    if n <= 1:
        return
    ranks = compress(list(stacks.a))
    stacks.a.clear()
    stacks.a.extend(ranks)
    mask = mark_lis(ranks)
    keep = {value for value, kept in zip(ranks, mask) if kept}
    push_non_lis(stacks, keep)
    if len(stacks.a) <= 3:
        sort_three(stacks)
    while stacks.b:
        move = best_move(stacks.a, stacks.b)
        rot_a, rot_b = _rotate_both(stacks, move.rot_a, move.rot_b)
        _rotate(stacks, rot_a, stacks.ra, stacks.rra)
        _rotate(stacks, rot_b, stacks.rb, stacks.rrb)
        stacks.pa()
    rotate_min_to_top(stacks)