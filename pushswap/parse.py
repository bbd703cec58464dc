"""Turning command-line arguments into the integers of stack ``a``."""

from __future__ import annotations

import re
from collections.abc import Iterable

from pushswap.stacks import PushSwapError

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_FIELD_PATTERN = re.compile(r"[^ \t\n\v\f\r]+")
_NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")


def split_whitespace(text: str) -> list[str]:
    """Split ``text`` on spaces and the control characters tab to carriage return."""
    return _FIELD_PATTERN.findall(text)


def parse_number(token: str) -> int:
    """Read one signed decimal that must fit a 32-bit int."""
    if not _NUMBER_PATTERN.fullmatch(token):
        raise PushSwapError(f"not a number: {token!r}")
    value = int(token)
    if not INT_MIN <= value <= INT_MAX:
        raise PushSwapError(f"out of range: {token!r}")
    return value


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Parse every argument, each holding one or more numbers, with no repeats."""
    values: list[int] = []
    for arg in args:
        fields = split_whitespace(arg)
        if not fields:
            raise PushSwapError("empty argument")
        values.extend(parse_number(field) for field in fields)
    if len(set(values)) != len(values):
        raise PushSwapError("duplicate values")
    return values