"""Smoke basin: low points and basins of a height map."""

import math


def parse(text):
    """Read rows of single-digit heights."""
    rows = [[int(ch) for ch in line.strip()] for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("empty height map")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("height map rows differ in length")
    return rows


def _neighbours(heightmap, row, col):
    for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        r, c = row + dr, col + dc
        if 0 <= r < len(heightmap) and 0 <= c < len(heightmap[0]):
            yield r, c


def low_points(heightmap):
    """Positions lower than every orthogonal neighbour."""
    return [
        (row, col)
        for row, heights in enumerate(heightmap)
        for col, height in enumerate(heights)
        if all(height < heightmap[r][c] for r, c in _neighbours(heightmap, row, col))
    ]


def basin_size(heightmap, row, col):
    """Cells reachable by climbing upward from a point without touching a 9."""
    seen = {(row, col)}
    stack = [(row, col)]
    while stack:
        r, c = stack.pop()
        height = heightmap[r][c]
        for nr, nc in _neighbours(heightmap, r, c):
            value = heightmap[nr][nc]
            if height < value and value != 9 and (nr, nc) not in seen:
                seen.add((nr, nc))
                stack.append((nr, nc))
    return len(seen)


def part_one(text):
    """Sum of risk levels (height plus one) of the low points."""
    heightmap = parse(text)
    return sum(heightmap[r][c] + 1 for r, c in low_points(heightmap))


def part_two(text):
    """Product of the three largest basin sizes."""
    heightmap = parse(text)
    sizes = sorted((basin_size(heightmap, r, c) for r, c in low_points(heightmap)), reverse=True)
    if len(sizes) < 3:
        raise ValueError("fewer than three basins")
    return math.prod(sizes[:3])