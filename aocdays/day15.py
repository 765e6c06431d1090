"""Chiton: find the lowest-risk path through a cave grid."""

import heapq


def parse(text):
    """Read a rectangular grid of single-digit risk levels."""
    rows = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if not line.isdigit():
            raise ValueError(f"risk levels must be digits: {line!r}")
        rows.append([int(ch) for ch in line])
    if not rows:
        raise ValueError("empty risk grid")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("risk grid rows differ in length")
    return rows


def lowest_risk(grid):
    """Least total risk entered on a path from the top-left to the bottom-right."""
    if not grid or not grid[0]:
        raise ValueError("empty risk grid")
    rows, cols = len(grid), len(grid[0])
    target = (rows - 1, cols - 1)
    best = {(0, 0): 0}
    heap = [(0, 0, 0)]
    while heap:
        risk, r, c = heapq.heappop(heap)
        if (r, c) == target:
            return risk
        if risk > best[(r, c)]:
            continue
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if 0 <= nr < rows and 0 <= nc < cols:
                candidate = risk + grid[nr][nc]
                if candidate < best.get((nr, nc), float("inf")):
                    best[(nr, nc)] = candidate
                    heapq.heappush(heap, (candidate, nr, nc))
    raise ValueError("bottom-right corner is unreachable")


def _wrap(value):
    return (value - 1) % 9 + 1 if value > 9 else value


def expand(grid, factor):
    """Tile the grid factor times each way, raising risk by one per tile step."""
    if factor < 1:
        raise ValueError("expansion factor must be at least 1")
    return [
        [_wrap(value + tile_row + tile_col) for tile_col in range(factor) for value in row]
        for tile_row in range(factor)
        for row in grid
    ]


def part_one(text):
    """Lowest total risk across the given grid."""
    return lowest_risk(parse(text))


def part_two(text):
    """Lowest total risk across the grid tiled five times each way."""
    return lowest_risk(expand(parse(text), 5))