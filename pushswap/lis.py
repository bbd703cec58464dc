"""Longest strictly increasing subsequence marking."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Sequence


def mark_lis(values: Sequence[int]) -> list[bool]:
    """Return a mask that is true at the positions of one longest increasing run.

    The number of true entries is the length of that subsequence.
    """
    n = len(values)
    keep = [False] * n
    if n == 0:
        return keep
    tails: list[int] = []
    tail_index: list[int] = []
    prev = [-1] * n
    for i, value in enumerate(values):
        pos = bisect_left(tails, value)
        if pos == len(tails):
            tails.append(value)
            tail_index.append(i)
        else:
            tails[pos] = value
            tail_index[pos] = i
        prev[i] = tail_index[pos - 1] if pos > 0 else -1
    k = tail_index[-1]
    while k != -1:
        keep[k] = True
        k = prev[k]
    return keep