"""Command entry point: read integers, print the operations that sort them."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.parse import parse_arguments
from pushswap.sort_five import sort_five
from pushswap.sort_large import sort_large
from pushswap.sort_three import sort_three
from pushswap.stacks import PushSwapError, Stacks


def is_sorted(values: Iterable[int]) -> bool:
    """True when ``values`` never decreases from one element to the next."""
    items = list(values)
    return all(x <= y for x, y in zip(items, items[1:]))


def sort_stacks(stacks: Stacks) -> None:
    """Sort ``stacks.a`` with the strategy that suits its size."""
    if is_sorted(stacks.a):
        return
    size = len(stacks.a)
    if size <= 3:
        sort_three(stacks)
    elif size <= 6:
        sort_five(stacks)
    else:
        sort_large(stacks)


def solve(values: Sequence[int]) -> list[str]:
    """Return the operations that sort ``values`` in ascending order."""
    stacks = Stacks(values)
    sort_stacks(stacks)
    return stacks.ops


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        values = parse_arguments(args)
    except PushSwapError:
        sys.stderr.write("Error\n")
        return 1
    ops = solve(values)
    if ops:
        sys.stdout.write("\n".join(ops) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())