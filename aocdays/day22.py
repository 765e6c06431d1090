"""Reactor reboot: count cubes left on after overlapping cuboid steps."""

import re
from dataclasses import dataclass, field

_STEP = re.compile(
    r"^(on|off)\s+x=(-?\d+)\.\.(-?\d+),\s*y=(-?\d+)\.\.(-?\d+),\s*z=(-?\d+)\.\.(-?\d+)$"
)
_REGION = (-50, 50, -50, 50, -50, 50)


def _axes(bounds):
    return zip(bounds[::2], bounds[1::2])


@dataclass(eq=False)
class Cuboid:
    """An inclusive box (x0, x1, y0, y1, z0, z1) with the volume carved out of it."""

    bounds: tuple
    state: bool = False
    remove: list = field(default_factory=list, repr=False)

    def __post_init__(self):
        self.bounds = tuple(self.bounds)
        if len(self.bounds) != 6:
            raise ValueError("a cuboid needs six bounds")
        if any(lo > hi for lo, hi in _axes(self.bounds)):
            raise ValueError(f"inverted bounds: {self.bounds}")

    def overlaps(self, other):
        """True when the two boxes share at least one cube."""
        return all(
            max(a0, b0) <= min(a1, b1)
            for (a0, a1), (b0, b1) in zip(_axes(self.bounds), _axes(other.bounds))
        )

    def volume(self):
        """Number of cubes inside the box."""
        result = 1
        for lo, hi in _axes(self.bounds):
            result *= hi - lo + 1
        return result

    def intersection(self, other):
        """The box shared with another, in the off state."""
        if not self.overlaps(other):
            raise ValueError("cuboids do not overlap")
        bounds = []
        for (a0, a1), (b0, b1) in zip(_axes(self.bounds), _axes(other.bounds)):
            bounds += [max(a0, b0), min(a1, b1)]
        return Cuboid(tuple(bounds))

    def combine(self, other):
        """Carve the part shared with another box out of this one."""
        if not self.overlaps(other):
            return
        shared = self.intersection(other)
        for carved in self.remove:
            carved.combine(shared)
        self.remove.append(shared)

    def final_volume(self):
        """Volume left once every carved region is taken away."""
        return self.volume() - sum(carved.final_volume() for carved in self.remove)


def parse(text):
    """Read reboot steps as cuboids carrying their on/off state."""
    steps = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        match = _STEP.match(line)
        if match is None:
            raise ValueError(f"malformed reboot step: {line!r}")
        state, *limits = match.groups()
        steps.append(Cuboid(tuple(map(int, limits)), state == "on"))
    return steps


def _lit(steps):
    cubes = []
    for step in steps:
        for cube in cubes:
            cube.combine(step)
        if step.state:
            cubes.append(step)
    return sum(cube.final_volume() for cube in cubes)


def part_one(text):
    """Cubes on within the -50..50 region."""
    region = Cuboid(_REGION)
    clipped = []
    for step in parse(text):
        if step.overlaps(region):
            inside = step.intersection(region)
            inside.state = step.state
            clipped.append(inside)
    return _lit(clipped)


def part_two(text):
    """Cubes on across the whole reactor."""
    return _lit(parse(text))