"""Optimal short sequences for small stacks, found by iterative deepening A*."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

from pushswap.stacks import Stacks

MAX_DEPTH = 12

_FOUND = object()


class SmallOp(IntEnum):
    """The operations the small-stack search may use, in the order it tries them."""

    SA = 0
    RA = 1
    RRA = 2
    PB = 3
    PA = 4


@dataclass
class State:
    """A snapshot of both stacks, top at index 0."""

    a: list[int]
    b: list[int] = field(default_factory=list)

    def apply(self, op: SmallOp) -> None:
        """Perform ``op`` on this state in place."""
        if op is SmallOp.SA:
            if len(self.a) >= 2:
                self.a[0], self.a[1] = self.a[1], self.a[0]
        elif op is SmallOp.RA:
            if self.a:
                self.a.append(self.a.pop(0))
        elif op is SmallOp.RRA:
            if self.a:
                self.a.insert(0, self.a.pop())
        elif op is SmallOp.PB:
            self.b.insert(0, self.a.pop(0))
        else:
            self.a.insert(0, self.b.pop(0))

    def is_goal(self) -> bool:
        """True when ``b`` is empty and ``a`` is in ascending order."""
        if self.b:
            return False
        return all(x <= y for x, y in zip(self.a, self.a[1:]))


def _clone(state: State) -> State:
    return State(list(state.a), list(state.b))


def inv_heuristic(state: State) -> int:
    """Half the number of inversions in ``a``, rounded down."""
    a = state.a
    inversions = sum(
        1 for i, x in enumerate(a) for y in a[i + 1 :] if x > y
    )
    return inversions // 2


def inverse_op(op: SmallOp) -> SmallOp:
    """The operation that undoes ``op``; ``SA`` is its own inverse."""
    return {
        SmallOp.RA: SmallOp.RRA,
        SmallOp.RRA: SmallOp.RA,
        SmallOp.PB: SmallOp.PA,
        SmallOp.PA: SmallOp.PB,
    }.get(op, SmallOp.SA)


def _dfs(state: State, bound: int, path: list[SmallOp]):
    f = len(path) + inv_heuristic(state)
    if f > bound:
        return f
    if state.is_goal():
        return _FOUND
    minimum = math.inf
    for op in SmallOp:
        if path and inverse_op(op) == path[-1]:
            continue
        if (op is SmallOp.PA and not state.b) or (op is SmallOp.PB and not state.a):
            continue
        nxt = _clone(state)
        nxt.apply(op)
        path.append(op)
        result = _dfs(nxt, bound, path)
        if result is _FOUND:
            return _FOUND
        path.pop()
        minimum = min(minimum, result)
    return minimum


def ida_star(start: State) -> list[SmallOp] | None:
    """Find a shortest operation sequence sorting ``start``.

    Returns ``None`` when no sequence of at most ``MAX_DEPTH`` operations exists.
    """
    root = _clone(start)
    bound = inv_heuristic(root)
    while bound <= MAX_DEPTH:
        path: list[SmallOp] = []
        result = _dfs(root, bound, path)
        if result is _FOUND:
            return path
        bound = result
    return None


def sort_five(stacks: Stacks) -> None:
    """Sort ``a`` (up to a handful of values) with the search's sequence."""
    path = ida_star(State(list(stacks.a)))
    for op in path or ():
        stacks.apply(op.name.lower())