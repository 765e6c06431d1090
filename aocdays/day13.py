"""Transparent origami: fold a sheet of dots along lines."""

from dataclasses import dataclass
from functools import reduce


@dataclass(frozen=True)
class Fold:
    """A fold along the line axis=line ('x' or 'y')."""

    axis: str
    line: int

    def __post_init__(self):
        if self.axis not in ("x", "y"):
            raise ValueError(f"fold axis must be 'x' or 'y', not {self.axis!r}")


def parse(text):
    """Read dot coordinates and fold instructions, returned as (points, folds)."""
    points, folds = [], []
    section_folds = False
    for line in text.splitlines():
        line = line.strip()
        if not line:
            section_folds = True
            continue
        if section_folds:
            spec = line.rsplit(" ", 1)[-1]
            axis, sep, value = spec.partition("=")
            if not sep:
                raise ValueError(f"malformed fold: {line!r}")
            folds.append(Fold(axis, int(value)))
        else:
            x, sep, y = line.partition(",")
            if not sep:
                raise ValueError(f"malformed coordinate: {line!r}")
            points.append((int(x), int(y)))
    return points, folds


def _mirror(value, line):
    return value if value < line else 2 * line - value


def fold_points(fold, points):
    """The set of dot positions after one fold."""
    if fold.axis == "y":
        return {(x, _mirror(y, fold.line)) for x, y in points}
    return {(_mirror(x, fold.line), y) for x, y in points}


def render(points):
    """Draw dots as '#' on a grid of spaces, one line per row."""
    points = set(points)
    if not points:
        return ""
    if any(x < 0 or y < 0 for x, y in points):
        raise ValueError("cannot render negative coordinates")
    width = max(x for x, _ in points) + 1
    height = max(y for _, y in points) + 1
    return "\n".join(
        "".join("#" if (x, y) in points else " " for x in range(width))
        for y in range(height)
    )


def part_one(text):
    """Number of visible dots after the first fold."""
    points, folds = parse(text)
    if not folds:
        raise ValueError("no fold instructions")
    return len(fold_points(folds[0], points))


def part_two(text):
    """The picture left after every fold."""
    points, folds = parse(text)
    return render(reduce(lambda dots, fold: fold_points(fold, dots), folds, set(points)))