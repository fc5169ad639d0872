# aocsolve

Solvers for daily programming puzzles from the 2020, 2021 and 2024 seasons.
Each day reads a plain-text puzzle input and works out the answers to its
parts.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Available days

| Season | Modules |
| ------ | ------- |
| 2020 | `year2020_day01` to `year2020_day06`, `year2020_day08` to `year2020_day11` |
| 2021 | `year2021_day01` to `year2021_day09`, `year2021_day11` to `year2021_day15` |
| 2024 | `year2024_day01` to `year2024_day07` |

## Library use

Every day lives in its own module, `aocsolve.year<YYYY>_day<DD>`. It exposes
the functions that solve the puzzle, together with a `run(path)` that reads an
input file, prints the answers and returns them (a tuple of both parts; for
2021 day 13, the single dot count). For example:

```python
from aocsolve.year2020_day01 import find_matching_pair, find_matching_triplet

numbers = [1721, 979, 366, 299, 675, 1456]
find_matching_pair(numbers, 2020)     # 514579
find_matching_triplet(numbers, 2020)  # 241861950
```

```python
from aocsolve.inputs import read_lines
from aocsolve.year2021_day14 import grow_polymer

lines = read_lines("14.txt")
grow_polymer(lines, 40)
```

```python
from aocsolve.year2024_day07 import PART2_OPERATIONS, parse_equations, total_calibration

equations = parse_equations("190: 10 19\n156: 15 6\n")
total_calibration(equations, PART2_OPERATIONS)  # 346
```

Solvers that find no answer, or are given malformed input, raise
`ValueError`.

Input helpers shared by the solvers are in `aocsolve.inputs`:
`read_lines`, `read_ints`, `read_csv_numbers`, `parse_csv_numbers` and
`read_digit_grid`, plus `log_result`, which prints an answer as
`Day <d> | Part <p> | <message>: <answer>`. `read_lines` expects the file to
end with a newline and drops anything after the last one.

## What it does not do

- There is no command-line program. Days are solved from Python by importing
  their module and calling its functions or `run(path)`.
- There is no solver for 2020 day 7 or for 2021 day 10.