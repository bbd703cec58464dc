import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from pushswap.cli import is_sorted, main, solve, sort_stacks
from pushswap.stacks import Stacks


def _replay(values, ops):
    stacks = Stacks(values)
    for op in ops:
        stacks.apply(op)
    return stacks


@pytest.mark.parametrize(
    "values, expected",
    [
        ([], True),
        ([7], True),
        ([1, 2, 3], True),
        ([1, 3, 2], False),
        ([3, 2, 1], False),
        ([-5, 0, 5, 10], True),
    ],
)
def test_is_sorted(values, expected):
    assert is_sorted(values) is expected


def test_solve_sorted_input_needs_no_operations():
    assert solve([1, 2, 3, 4, 5, 6, 7, 8]) == []


def test_solve_three_swap_case():
    assert solve([2, 1, 3]) == ["sa"]


def test_sort_stacks_sorts_in_place():
    stacks = Stacks([3, 1, 2])
    sort_stacks(stacks)
    assert list(stacks.a) == [1, 2, 3]
    assert not stacks.b


@settings(max_examples=20, deadline=None)
@given(
    st.lists(
        st.integers(-(2**31), 2**31 - 1), min_size=7, max_size=40, unique=True
    )
)
def test_solve_large_sorts(values):
    stacks = _replay(values, solve(values))
    assert list(stacks.a) == sorted(values)
    assert not stacks.b


def test_main_without_arguments(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_main_prints_operations(capsys):
    assert main(["3 2 1"]) == 0
    ops = capsys.readouterr().out.split()
    stacks = _replay([3, 2, 1], ops)
    assert list(stacks.a) == [1, 2, 3]


def test_main_sorted_input_prints_nothing(capsys):
    assert main(["1", "2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_main_large_input(capsys):
    values = [9, -4, 12, 0, 7, 3, -10, 25, 1, 8]
    assert main([str(v) for v in values]) == 0
    ops = capsys.readouterr().out.split()
    stacks = _replay(values, ops)
    assert list(stacks.a) == sorted(values)


@pytest.mark.parametrize(
    "args",
    [
        ["1", "a"],
        ["1", "1"],
        [""],
        ["   "],
        ["2147483648"],
        ["-2147483649"],
        ["+"],
        ["1 2", "2"],
    ],
)
def test_main_reports_errors(args, capsys):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""