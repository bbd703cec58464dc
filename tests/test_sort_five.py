from itertools import permutations

import pytest

from pushswap.sort_five import (
    MAX_DEPTH,
    SmallOp,
    State,
    ida_star,
    inv_heuristic,
    inverse_op,
    sort_five,
)
from pushswap.stacks import Stacks


@pytest.mark.parametrize(
    ("op", "inverse"),
    [
        (SmallOp.RA, SmallOp.RRA),
        (SmallOp.RRA, SmallOp.RA),
        (SmallOp.PB, SmallOp.PA),
        (SmallOp.PA, SmallOp.PB),
        (SmallOp.SA, SmallOp.SA),
    ],
)
def test_inverse_op(op, inverse):
    assert inverse_op(op) == inverse


@pytest.mark.parametrize("op", [SmallOp.SA, SmallOp.RA, SmallOp.RRA])
def test_inverse_undoes_rotations_and_swap(op):
    state = State([4, 1, 3, 2])
    state.apply(op)
    state.apply(inverse_op(op))
    assert state == State([4, 1, 3, 2])


def test_push_then_pull_restores():
    state = State([4, 1, 3], [9])
    state.apply(SmallOp.PB)
    assert state == State([1, 3], [4, 9])
    state.apply(SmallOp.PA)
    assert state == State([4, 1, 3], [9])


def test_rotations_move_ends():
    state = State([1, 2, 3])
    state.apply(SmallOp.RA)
    assert state.a == [2, 3, 1]
    state.apply(SmallOp.RRA)
    state.apply(SmallOp.RRA)
    assert state.a == [3, 1, 2]


def test_heuristic_is_zero_when_sorted():
    assert inv_heuristic(State([1, 2, 3, 4, 5])) == 0


def test_heuristic_halves_inversions():
    assert inv_heuristic(State([3, 2, 1])) == 1
    assert inv_heuristic(State([5, 4, 3, 2, 1])) == 5


def test_is_goal():
    assert State([1, 2, 3]).is_goal()
    assert not State([2, 1, 3]).is_goal()
    assert not State([1, 2], [3]).is_goal()


def test_ida_star_on_sorted_input_is_empty():
    assert ida_star(State([1, 2, 3, 4])) == []


def test_ida_star_single_swap():
    assert ida_star(State([2, 1, 3, 4])) == [SmallOp.SA]


def test_ida_star_leaves_start_untouched():
    start = State([3, 1, 4, 2])
    ida_star(start)
    assert start == State([3, 1, 4, 2])


def _replay(values, path):
    state = State(list(values))
    for op in path:
        state.apply(op)
    return state


@pytest.mark.parametrize("values", list(permutations([1, 2, 3, 4])))
def test_ida_star_solves_every_four(values):
    path = ida_star(State(list(values)))
    assert path is not None
    assert len(path) <= MAX_DEPTH
    assert _replay(values, path).is_goal()
    assert all(inverse_op(op) != prev for prev, op in zip(path, path[1:]))


@pytest.mark.parametrize(
    "values", [[5, 4, 3, 2, 1], [2, 5, 1, 4, 3], [1, 5, 2, 4, 3]]
)
def test_sort_five_on_five_values(values):
    stacks = Stacks(values)
    sort_five(stacks)
    assert list(stacks.a) == sorted(values)
    assert not stacks.b
    replay = Stacks(values)
    for op in stacks.ops:
        replay.apply(op)
    assert list(replay.a) == sorted(values)


def test_sort_five_uses_only_search_operations():
    stacks = Stacks([3, -7, 42, 0])
    sort_five(stacks)
    assert list(stacks.a) == [-7, 0, 3, 42]
    assert set(stacks.ops) <= {"sa", "ra", "rra", "pb", "pa"}


def test_sort_five_on_sorted_issues_nothing():
    stacks = Stacks([1, 2, 3, 4, 5])
    sort_five(stacks)
    assert stacks.ops == []
    assert list(stacks.a) == [1, 2, 3, 4, 5]