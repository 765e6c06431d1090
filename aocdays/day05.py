"""Hydrothermal venture: count points covered by several vent lines."""

import re
from collections import Counter

_LINE = re.compile(r"^\s*(\d+)\s*,\s*(\d+)\s*->\s*(\d+)\s*,\s*(\d+)\s*$")


def parse(text):
    """Read segments of the form 'x1,y1 -> x2,y2'."""
    segments = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _LINE.match(line)
        if match is None:
            raise ValueError(f"malformed segment: {line!r}")
        x1, y1, x2, y2 = map(int, match.groups())
        segments.append(((x1, y1), (x2, y2)))
    return segments


def _sign(value):
    return (value > 0) - (value < 0)


def count_overlaps(segments, diagonals):
    """Number of points covered by at least two segments."""
    counts = Counter()
    for (x1, y1), (x2, y2) in segments:
        dx, dy = x2 - x1, y2 - y1
        slanted = bool(dx and dy)
        if slanted and not diagonals:
            continue
        steps = min(abs(dx), abs(dy)) if slanted else max(abs(dx), abs(dy))
        sx, sy = _sign(dx), _sign(dy)
        counts.update((x1 + i * sx, y1 + i * sy) for i in range(steps + 1))
    return sum(1 for count in counts.values() if count >= 2)


def part_one(text):
    """Overlaps counting horizontal and vertical lines only."""
    return count_overlaps(parse(text), False)


def part_two(text):
    """Overlaps counting diagonal lines too."""
    return count_overlaps(parse(text), True)