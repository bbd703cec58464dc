"""The two stacks and the eleven operations that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

OPERATIONS = ("sa", "sb", "ss", "pa", "pb", "ra", "rb", "rr", "rra", "rrb", "rrr")


class PushSwapError(Exception):
    """Raised for invalid input or an impossible request; reported as ``Error``."""


def _swap(stack: deque[int]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(dest: deque[int], src: deque[int]) -> None:
    if src:
        dest.appendleft(src.popleft())


def _rotate(stack: deque[int]) -> None:
    stack.rotate(-1)


def _reverse_rotate(stack: deque[int]) -> None:
    stack.rotate(1)


class Stacks:
    """Stacks ``a`` and ``b`` (top at index 0) with a log of issued operations.

    Every operation is recorded in ``ops`` even when it has nothing to move,
    just as every operation is written out by the command.
    """

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.ops: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def sa(self) -> None:
        """Swap the first two elements of ``a``."""
        _swap(self.a)
        self.ops.append("sa")

    def sb(self) -> None:
        """Swap the first two elements of ``b``."""
        _swap(self.b)
        self.ops.append("sb")

    def ss(self) -> None:
        """``sa`` and ``sb`` at once."""
        _swap(self.a)
        _swap(self.b)
        self.ops.append("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        _push(self.a, self.b)
        self.ops.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        _push(self.b, self.a)
        self.ops.append("pb")

    def ra(self) -> None:
        """Rotate ``a`` up: the first element becomes the last."""
        _rotate(self.a)
        self.ops.append("ra")

    def rb(self) -> None:
        """Rotate ``b`` up: the first element becomes the last."""
        _rotate(self.b)
        self.ops.append("rb")

    def rr(self) -> None:
        """``ra`` and ``rb`` at once."""
        _rotate(self.a)
        _rotate(self.b)
        self.ops.append("rr")

    def rra(self) -> None:
        """Rotate ``a`` down: the last element becomes the first."""
        _reverse_rotate(self.a)
        self.ops.append("rra")

    def rrb(self) -> None:
        """Rotate ``b`` down: the last element becomes the first."""
        _reverse_rotate(self.b)
        self.ops.append("rrb")

    def rrr(self) -> None:
        """``rra`` and ``rrb`` at once."""
        _reverse_rotate(self.a)
        _reverse_rotate(self.b)
        self.ops.append("rrr")

    def apply(self, op: str) -> None:
        """Perform the operation named ``op``."""
        if op not in OPERATIONS:
            raise PushSwapError(f"unknown operation: {op!r}")
        getattr(self, op)()