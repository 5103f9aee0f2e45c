# cpsolvers

A library of solutions to well-known competitive-programming problems.
Each problem is a plain function, or in one case a small class, that
takes Python values and returns Python values.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `cpsolvers.cses_math`: `dice_combinations`, `bit_strings`,
  `coin_piles`, `digit_query`, `missing_number`, `number_spiral`,
  `two_knights`, `trailing_zeros`, `increasing_array_moves` and
  `longest_repetition`.
- `cpsolvers.cses_search`: `apple_division`, `count_queen_placements`,
  `creating_strings`, `gray_code` and `knight_distances`.
- `cpsolvers.cses_grids`: `recolor_grid`, `mex_grid` and
  `palindrome_reorder`.
- `cpsolvers.cses_sequences`: `beautiful_permutation`, `raab_game`,
  `tower_of_hanoi` and `two_sets`.
- `cpsolvers.atcoder`: `triangular_number`, `count_indivisible_ranges`,
  the `ReachabilityTracker` class (with `mark` and `is_good`),
  `pad_with_o` and `siamese_magic_square`.
- `cpsolvers.atcoder_grids`: `count_block_placements` and
  `teleport_maze`.
- `cpsolvers.codechef_st209`: `bitcoin_market`, `divisible_duel`,
  `high_score`, `small_gcd_sort` and `tactical_conversion`.
- `cpsolvers.codechef_st215`: `differing_values`, `gem_bundles` and
  `special_missions`.
- `cpsolvers.codechef_st216`: `best_seats`, `entertainment_cost`,
  `lis_lds_min` and `scoring`.
- `cpsolvers.codeforces`: `fairy_painting`, `needle_in_haystack`,
  `count_inversion_operations`, `optimal_shift` and `odd_process`.

Each function's docstring states what it computes.

## Example

```python
from cpsolvers.cses_math import dice_combinations, trailing_zeros
from cpsolvers.cses_search import gray_code
from cpsolvers.atcoder import ReachabilityTracker

dice_combinations(3)        # 4
trailing_zeros(20)          # 4
gray_code(2)                # ['00', '10', '11', '01']

tracker = ReachabilityTracker(3, [(1, 2), (2, 3)])
tracker.mark(3)
tracker.is_good(1)          # True
```

## When there is no answer

Yes/no questions such as `coin_piles` or `tactical_conversion` return a
`bool`. Where a problem has no solution for the given input, or the input
is out of range, the function raises `ValueError`; for example
`beautiful_permutation(3)`, `two_sets(1)`, `palindrome_reorder("abc")` and
`needle_in_haystack("zz", "z")` all raise. A few functions report
"unreachable" through their return value instead: `teleport_maze` returns
`None` when the target cannot be reached, `knight_distances` puts `None`
in squares the knight never reaches, and `odd_process` gives `0` for each
count it cannot serve.

## What it does not do

The package is a library only. It installs no command, and nothing in it
reads problem input from standard input or a file or prints answers in a
judge's output format; parsing input and formatting output is left to the
caller.