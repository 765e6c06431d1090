"""Trick shot: launch a probe into a target area."""

import math
import re
from dataclasses import dataclass

_AREA = re.compile(r"x=(-?\d+)\.\.(-?\d+),\s*y=(-?\d+)\.\.(-?\d+)")


@dataclass(frozen=True)
class Target:
    """An axis-aligned target area with inclusive bounds."""

    x0: int
    x1: int
    y0: int
    y1: int

    def within(self, x, y):
        """True when the point lies inside the area."""
        return self.x0 <= x <= self.x1 and self.y0 <= y <= self.y1

    def beyond(self, x, y):
        """True when the point is past the area and can no longer reach it."""
        return x > self.x1 or y < self.y0

    def hits(self, vx, vy):
        """True when a probe launched with this velocity lands in the area at some step."""
        x = y = 0
        while not self.within(x, y) and not self.beyond(x, y):
            x += vx
            y += vy
            if vx:
                vx -= 1
            vy -= 1
        return self.within(x, y)


def parse(text):
    """Read 'target area: x=A..B, y=C..D'."""
    match = _AREA.search(text)
    if match is None:
        raise ValueError(f"malformed target area: {text!r}")
    x0, x1, y0, y1 = map(int, match.groups())
    return Target(min(x0, x1), max(x0, x1), min(y0, y1), max(y0, y1))


def part_one(text):
    """Highest altitude reachable while still hitting the area."""
    target = parse(text)
    vy = abs(target.y0) - 1
    return vy * (vy + 1) // 2


def part_two(text):
    """Number of distinct launch velocities that hit the area."""
    target = parse(text)
    if target.x0 < 0:
        raise ValueError("target area must lie at non-negative x")
    vx_min = math.ceil((-1 + math.sqrt(1 + 8 * target.x0)) / 2)
    vy_max = abs(target.y0) - 1
    return sum(
        target.hits(vx, vy)
        for vx in range(vx_min, target.x1 + 1)
        for vy in range(target.y0, vy_max + 1)
    )