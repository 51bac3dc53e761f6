# cpsolve

Short, tested solutions to a set of classic introductory
competitive-programming problems. Call them from Python, or run three
of them from the `cpsolve` command.

## Installation

```
pip install .
```

The only runtime dependency is `sortedcontainers`. To run the test
suite as well:

```
pip install ".[test]"
pytest
```

## What is included

The package is split by the kind of problem:

- `cpsolve.numbers`: arithmetic and counting problems:
  `bit_strings`, `coin_piles`, `count_divisors`, `power_mod`,
  `digit_at`, `spiral_value`, `collatz`, `two_sets`,
  `beautiful_permutation`, `missing_number`, `josephus_order`.
- `cpsolve.text`: string problems:
  `string_permutations`, `palindrome_reorder`, `longest_repetition`.
- `cpsolve.sequences`: problems over lists of numbers:
  `collecting_rounds`, `distinct_count`, `increasing_array_moves`,
  `longest_unique_playlist`, `tower_count`, `stick_cost`,
  `count_subarrays_with_sum`, `two_sum_positions`,
  `smallest_missing_sum`, `gondola_count`.
- `cpsolve.queries`: many queries over one data set:
  the `PrefixSum` and `PrefixXor` classes, plus `concert_tickets`,
  `traffic_lights` and `max_customers`.
- `cpsolve.grids`: grid searches: `count_rooms` and `find_path`.
- `cpsolve.cli`: the `cpsolve` command.

Results taken modulo a prime (`bit_strings`, `power_mod`) use
10^9 + 7 (`cpsolve.numbers.MOD`).

Where a problem has no answer, the function returns `None`
(`two_sets`, `beautiful_permutation`, `palindrome_reorder`,
`two_sum_positions`, `find_path`, and the entries of
`concert_tickets` for customers who get no ticket). Input that the
problem does not allow, such as a non-positive `n` for `collatz` or
`count_divisors`, raises `ValueError`; a query range outside the data
raises `IndexError`. Positions in `PrefixSum.query`,
`PrefixXor.query` and `two_sum_positions` are 1-based.

## Library examples

```python
from cpsolve.numbers import bit_strings, power_mod, spiral_value
from cpsolve.queries import PrefixSum, traffic_lights

bit_strings(3)          # 8
power_mod(3, 4)         # 81
spiral_value(2, 3)      # 8

sums = PrefixSum([3, 2, 4, 5, 1, 1, 5, 3])
sums.query(2, 4)        # 11, the sum of the 2nd through 4th values

traffic_lights(8, [3, 6, 2])   # [5, 3, 3]
```

Grid functions take the map as rows of text of equal width, with `#`
for walls and `.` for floor. `find_path` also expects an `A` (start)
and looks for a `B` (goal); it returns the shortest sequence of moves
`U`, `D`, `L`, `R`:

```python
from cpsolve.grids import count_rooms, find_path

grid = [
    "########",
    "#.A#...#",
    "#.##.#B#",
    "#......#",
    "########",
]
count_rooms(grid)       # 1
find_path(grid)         # "LDDRRRRRU"
```

## Command line

The `cpsolve` command reads a problem's input, in the usual contest
format, from standard input and prints the answer. It has three
sub-commands:

- `cpsolve weird`: reads `n` and prints the 3n+1 sequence from `n`
  down to 1 on one line.
- `cpsolve labyrinth`: reads the height and width of a grid, then its
  rows, and prints `NO`, or `YES`, the path length and the path.
- `cpsolve traffic`: reads the street length and the number of
  lights, then the light positions, and prints the longest unlit
  stretch after each light is added.

```
$ echo 3 | cpsolve weird
3 10 5 16 8 4 2 1
$ printf '8 3\n3 6 2\n' | cpsolve traffic
5 3 3
```

Malformed input is reported on standard error and the command exits
with status 1. `cpsolve --help` lists the sub-commands.

## What it does not do

Only the three problems above can be run from the command line; the
rest are available from Python alone.