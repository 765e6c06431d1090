"""Command line runner that solves puzzle days and prints timing tables."""

import argparse
import sys
import time
from dataclasses import dataclass
from pathlib import Path

from aocdays import (
    day01, day02, day03, day04, day05, day06, day07, day08, day09, day10,
    day11, day12, day13, day14, day15, day16, day17, day18, day19, day20,
    day21, day22, day23, day24, day25,
)
from aocdays.report import Table, format_elapsed, print_banner


@dataclass(frozen=True)
class _Day:
    title: str
    stem: str
    parts: tuple
    compact: bool = False


def _full(title, module):
    return _Day(title, title.replace("-", "").lower(), (module.part_one, module.part_two))


def _single(title, module):
    return _Day(title, title.lower(), (module.part_one,), compact=True)


_DAYS = {
    1: _full("One", day01),
    2: _full("Two", day02),
    3: _full("Three", day03),
    4: _full("Four", day04),
    5: _full("Five", day05),
    6: _full("Six", day06),
    7: _full("Seven", day07),
    8: _full("Eight", day08),
    9: _full("Nine", day09),
    10: _full("Ten", day10),
    11: _full("Eleven", day11),
    12: _full("Twelve", day12),
    13: _full("Thirteen", day13),
    14: _full("Fourteen", day14),
    15: _full("Fifteen", day15),
    16: _full("Sixteen", day16),
    17: _full("Seventeen", day17),
    18: _full("Eighteen", day18),
    19: _full("Nineteen", day19),
    20: _full("Twenty", day20),
    21: _full("Twenty-One", day21),
    22: _full("TwentyTwo", day22),
    23: _single("TwentyThree", day23),
    24: _single("TwentyFour", day24),
    25: _single("TwentyFive", day25),
}


def run_day(day, path, out=None):
    """Solve one day from an input file, print a timing table and return the results."""
    spec = _DAYS.get(day)
    if spec is None:
        raise ValueError(f"no puzzle for day {day}")
    out = sys.stdout if out is None else out
    text = Path(path).read_text()

    width, banner = (20, 48) if spec.compact else (35, 78)
    print_banner(f"Day {spec.title}", banner, out)
    table = Table(2, width, True, out)
    table.header("Result", "Time")

    results = []
    for part in spec.parts:
        start = time.perf_counter_ns()
        value = part(text)
        elapsed = time.perf_counter_ns() - start
        table.row(value, format_elapsed(elapsed))
        results.append(value)

    table.separator()
    out.write("\n")
    return results


def main(argv=None):
    """Run the requested days and report their answers."""
    parser = argparse.ArgumentParser(
        prog="aocdays", description="Solve puzzle days from input files."
    )
    parser.add_argument("days", nargs="*", type=int, default=[23], help="day numbers 1-25")
    parser.add_argument("--data", default="data", help="directory holding <day>.txt inputs")
    args = parser.parse_args(argv)

    unknown = [day for day in args.days if day not in _DAYS]
    if unknown:
        parser.error(f"unknown day(s): {', '.join(map(str, unknown))}")

    for day in args.days:
        path = Path(args.data) / f"{_DAYS[day].stem}.txt"
        try:
            run_day(day, path, sys.stdout)
        except (OSError, ValueError) as exc:
            print(f"day {day}: {exc}", file=sys.stderr)
            return 1

    print("done.")
    return 0