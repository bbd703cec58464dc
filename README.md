# pushswap

`pushswap` sorts a list of distinct integers using two stacks, `a` and `b`,
and a fixed set of operations. It prints the operations it uses, one per line.

| Operation | Effect |
|-----------|--------|
| `sa` / `sb` / `ss` | swap the top two elements of `a`, of `b`, or of both |
| `pa` / `pb` | move the top of `b` onto `a`, or the top of `a` onto `b` |
| `ra` / `rb` / `rr` | rotate `a`, `b`, or both upwards (top goes to bottom) |
| `rra` / `rrb` / `rrr` | rotate `a`, `b`, or both downwards (bottom goes to top) |

It chooses one of three strategies by the number of elements:

* up to 3 elements: a fixed case table (`pushswap.sort_three.sort_three`);
* 4 to 6 elements: an IDA* search for a shortest sequence of at most 12
  operations using `sa`, `ra`, `rra`, `pb` and `pa`
  (`pushswap.sort_five.sort_five`);
* more than 6: the values are replaced by their ranks, the values on one
  longest increasing subsequence stay on `a`, the rest go to `b`, and then
  they come back one at a time by the cheapest insertion
  (`pushswap.sort_large.sort_large`).

## Installation

```
pip install .
```

## Command line

```
push-swap 3 2 1
```

prints

```
sa
rra
```

A single argument can hold several numbers separated by whitespace:

```
push-swap "4 67 3" 87 23
```

The same command can be started with `python -m pushswap.cli`.

With no arguments, nothing is printed and the exit status is 0. If an argument
is not a valid integer (an optional `+` or `-` followed by digits), falls
outside the 32-bit signed range, holds no number at all, or a value appears
twice, `Error` is written to standard error and the exit status is 1. A list
that is already sorted prints nothing.

## Library use

```python
from pushswap.cli import solve
from pushswap.parse import parse_arguments
from pushswap.stacks import PushSwapError, Stacks

ops = solve([5, 1, 4, 2, 3])        # list of operation names
print(ops)

values = parse_arguments(["3 1", "2"])   # [3, 1, 2]

stacks = Stacks([2, 1, 3])
stacks.sa()
print(list(stacks.a))                # [1, 2, 3]
print(stacks.ops)                    # ['sa']
stacks.apply("pb")                   # perform an operation by name
```

`Stacks.a` and `Stacks.b` are deques with the top at index 0; `Stacks.ops`
records every operation performed, including ones that had nothing to move.
`Stacks.apply` raises `PushSwapError` for an unknown operation name, and
`parse_arguments` raises it for bad input.

Other helpers:

* `pushswap.parse.split_whitespace` and `pushswap.parse.parse_number`
* `pushswap.lis.mark_lis`: a mask marking one longest strictly increasing
  subsequence
* `pushswap.sort_five`: `State`, `SmallOp`, `ida_star`, `inv_heuristic`,
  `inverse_op`
* `pushswap.sort_large`: `compress`, `find_insert_index`, `move_cost`,
  `best_move`, `push_non_lis`, `rotate_min_to_top`
* `pushswap.cli`: `is_sorted`, `sort_stacks`, `solve`, `main`

## Limitations

* A list of exactly two values in descending order is left as it is: the
  three-element table does nothing for fewer than three values, so no
  operations are printed.
* There is no checker: the package produces operation lists but has no
  command that reads operations and verifies that they sort a list.

## Tests

```
pip install ".[test]"
pytest
```