"""Sorting stack ``a`` when it holds three values."""

from __future__ import annotations

from pushswap.stacks import Stacks


def sort_three(stacks: Stacks) -> None:
    """Order the top three values of ``a`` with at most two operations.

    Nothing is done when ``a`` holds fewer than three values.
    """
    if len(stacks.a) < 3:
        return
    x, y, z = stacks.a[0], stacks.a[1], stacks.a[2]
    if x > y and y < z and x < z:
        stacks.sa()
    elif x > y and y > z:
        stacks.sa()
        stacks.rra()
    elif x > y and y < z and x > z:
        stacks.ra()
    elif x < y and y > z and x < z:
        stacks.sa()
        stacks.ra()
    elif x < y and y > z and x > z:
        stacks.rra()