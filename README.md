# aocdays

Solutions to twenty-five daily programming puzzles. Each day lives in its
own module, `aocdays.day01` through `aocdays.day25`, and offers plain
functions that take the puzzle input as text and return the answer. The
`aocdays` command runs one or more days against input files and prints each
answer in a table together with the time it took.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command line

```
aocdays [DAY ...] [--data DIRECTORY]
```

Give the day numbers (1 to 25) to run. With no day numbers, day 23 runs.
Input files are read from the directory given by `--data` (default `data`),
one file per day, named after the day in words:

| Day | File               | Day | File                |
|-----|--------------------|-----|---------------------|
| 1   | `one.txt`          | 14  | `fourteen.txt`      |
| 2   | `two.txt`          | 15  | `fifteen.txt`       |
| 3   | `three.txt`        | 16  | `sixteen.txt`       |
| 4   | `four.txt`         | 17  | `seventeen.txt`     |
| 5   | `five.txt`         | 18  | `eighteen.txt`      |
| 6   | `six.txt`          | 19  | `nineteen.txt`      |
| 7   | `seven.txt`        | 20  | `twenty.txt`        |
| 8   | `eight.txt`        | 21  | `twentyone.txt`     |
| 9   | `nine.txt`         | 22  | `twentytwo.txt`     |
| 10  | `ten.txt`          | 23  | `twentythree.txt`   |
| 11  | `eleven.txt`       | 24  | `twentyfour.txt`    |
| 12  | `twelve.txt`       | 25  | `twentyfive.txt`    |
| 13  | `thirteen.txt`     |     |                     |

Examples:

```
aocdays 1 2 3
aocdays 23 --data data/example
```

For every day the command prints a banner naming the day, then a table with
one numbered row per part: the result and the elapsed time as
`HH:MM:SS.nnnnnnnnn`. Integers are printed with comma thousands separators.
After all days it prints `done.`. An unknown day number is rejected with a
usage error; a missing file or malformed input stops the run with a message
on standard error and exit status 1.

## Using the modules

Every day module offers `part_one(text)`, and days 1 to 22 also offer
`part_two(text)`, where `text` is the full contents of the input file:

```python
from pathlib import Path

from aocdays import day01, day14

text = Path("data/one.txt").read_text()
print(day01.part_one(text), day01.part_two(text))

rules = Path("data/fourteen.txt").read_text()
print(day14.part_two(rules))
```

Malformed input raises `ValueError`.

The modules also expose the pieces the answers are built from, for example
`day06.predict(timers, days)`, `day16.hex_to_bits`, `day16.version_sum` and
`day16.evaluate`, `day18.parse_number(line)` with `day18.add` and
`day18.reduce`, `day19.BeaconMap` for assembling scanner reports,
`day22.Cuboid` for overlapping-box volume arithmetic, `day23.least_cost` for
the amphipod burrow, and `day24.ALU` with `day24.Instruction` for running
ALU programs.

To run a single day from Python with the same printed table as the command,
use `aocdays.cli.run_day(day, path, out)`; it returns the list of answers.

## Reporting helpers

`aocdays.report` holds the helpers the command uses: `Table` for
fixed-width bordered tables with an optional running index, `print_banner`
for the day heading, `group_thousands` for rendering cell values, and
`format_elapsed`, `format_time`, `format_date` and `format_datetime` for
time stamps.

## What it does not do

- Days 23, 24 and 25 have a first part only; there is no `part_two` for them.
- Day 23 handles the two-row burrow only.
- Puzzle inputs are not fetched or included; supply your own files.