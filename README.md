# advent2024

Solutions to the 2024 Advent of Code puzzles, packaged as a small Python
library and command with no third-party dependencies.

Each day lives in its own module, `advent2024.day01` through
`advent2024.day25`, with one exception: the second part of day 24 (finding
miswired gates in the adder circuit) is in `advent2024.wiring`. Day 25 has
only a first part. Every module exposes `part_one` and, where the day has one,
`part_two`. Both take the puzzle input as a string, exactly as read from the
input file, and return the answer. Malformed input raises `ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from pathlib import Path

from advent2024 import day01, day11

text = Path("day1.txt").read_text()
print(day01.part_one(text))
print(day01.part_two(text))

print(day11.part_two(Path("day11.txt").read_text()))
```

Most answers are integers. A few are not:

- `day17.part_one` returns the program output as comma-separated digits.
- `day18.part_one` returns `None` when the exit cannot be reached;
  `day18.part_two` returns the `(x, y)` coordinates of the first blocking byte.
- `day14.part_two` returns the picture of the floor as a string, or `None`
  when no row holds at least thirteen robots.
- `day23.part_two` and `wiring.part_two` return comma-joined names.

Some days take extra parameters for values the puzzle fixes, so that the
smaller examples from the puzzle statements can be solved too:

- `day14.part_one(text, width=101, height=103, seconds=100)` and
  `day14.part_two(text, iteration=7568, width=101, height=103)`; the picture
  is drawn after `iteration + 1` seconds.
- `day18.part_one(text, size=71, count=1024)` and `day18.part_two(text, size=71)`.
- `day17.part_one(text, a=None)`; `a` overrides register A from the input.
- `day20.part_one(text, threshold=100)` and
  `day20.part_two(text, threshold=100, radius=20)`.
- `day21.part_two(text, robots=25)` sets the number of directional-keypad robots.

Helpers used by the solutions are public too: `day02.first_violation`,
`day07.can_reach`, `day11.blink`, `day11.count_stones`,
`day13.Machine` and `day13.parse_machines`, `day17.run`,
`day22.next_secret` and `wiring.suspicious_wires`.

## Command line

Installing the package also installs an `advent2024` command that solves one
part of one day:

```
advent2024 DAY PART [INPUT]
```

`DAY` is 1 to 25 and `PART` is 1 or 2 (day 25 has only part 1). `INPUT` is the
puzzle input file; it defaults to `day<DAY>.txt` in the current directory. For
example:

```
advent2024 11 2 day11.txt
```

The answer is printed on standard output; coordinate answers are printed as
`x,y`, and an answer of `None` as `no answer`. Input the solver rejects is
reported on standard error with exit status 1. The command always uses the
full-size puzzle parameters listed above.

## What it does not do

The package does not download puzzle inputs or submit answers; inputs must
already be on disk or in a string.