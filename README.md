# contestkit

A collection of small solvers for short competitive-programming problems:
array puzzles, divisibility questions, string games and grid scoring.
Each problem is a plain Python function that takes the problem's data and
returns its answer. A command-line tool runs any solver on input in the
usual contest format.

## Installation

```
pip install .
```

## Using the functions

The solvers are grouped into four modules:

- `contestkit.div800_arrays`: `halloumi_boxes`, `ambitious_kid`,
  `array_coloring`, `blank_space`, `desorting`, `doremy_paint`,
  `goals_of_victory`, `daytona_cost`, `jagged_swaps`, `line_trip`,
  `make_beautiful`, `one_and_two`, `sequence_game`, `serval_and_mocha`,
  `twin_permutation`, `unit_array` and `we_need_the_zero`.
- `contestkit.div800_misc`: `raspberries`, `buttons`, `coins`,
  `cover_in_water`, `dont_try_to_count`, `extremely_round`,
  `forbidden_integer`, `game_with_integers`, `grasshopper`,
  `prepend_and_append` and `target_practice`.
- `contestkit.div900_arrays`: `array_cloning`, `balanced_round`,
  `jellyfish_and_undertale`, `luntik_subsequences`, `mainak_and_array`,
  `make_it_increasing`, `make_it_zero`, `nit_destroys_the_universe`,
  `permutation_swap`, `strange_partition`, `sum_of_medians` and
  `three_indices`.
- `contestkit.div900_misc`: `bad_boy`, `comparison_string`,
  `deletive_editing`, `exciting_bets`, `forked`, `game01`,
  `longest_divisors_interval`, `make_ap`, `divisible_by_25`,
  `has_odd_divisor`, `vasilije_in_cacak` and
  `multiply_by_two_divide_by_six`.

Yes/no problems return `True` or `False`. Problems that build an answer
return a list or tuple. Where no answer exists, they return `None`, or `-1`
if that is the answer the problem asks for. Input that a solver cannot work
with, such as an empty array where values are needed, raises `ValueError`.

```python
from contestkit.div800_misc import extremely_round, game_with_integers
from contestkit.div900_misc import has_odd_divisor

extremely_round(100)      # 19
game_with_integers(3)     # 'Second'
has_odd_divisor(6)        # True
```

## Using the command line

The `contestkit` command takes the name of a solver and an optional input
file. It reads standard input if the file is omitted or given as `-`. The
input is in the form a judge would supply:

- the number of test cases,
- followed by the cases.

`ambitious_kid` is the one exception: it reads a single case with no count.
The command prints one answer per case, with yes/no answers written as
`YES` or `NO`:

```
contestkit extremely_round < input.txt
contestkit target_practice input.txt
```

An unknown solver name is rejected with a usage message. An unreadable
file, or input that ends early or holds a non-integer where a number is
expected, is reported on standard error and the command exits with status 1.

The same runner is available from Python through
`contestkit.cli.solve(name, text)`. It returns the output as a string.

## Running the tests

```
pip install .[test]
pytest
```