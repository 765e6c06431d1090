"""Dumbo octopus: simulate cascading energy flashes."""

_FLASH_LEVEL = 9


def parse(text):
    """Read a rectangular grid of single-digit energy levels."""
    rows = [[int(ch) for ch in line.strip()] for line in text.splitlines() if line.strip()]
    if not rows:
        raise ValueError("empty energy grid")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("energy grid rows differ in length")
    return rows


def _neighbours(row, col, rows, cols):
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            r, c = row + dr, col + dc
            if (dr or dc) and 0 <= r < rows and 0 <= c < cols:
                yield r, c


def step(energy):
    """Advance one step; return the new grid and the number of flashes."""
    grid = [[value + 1 for value in row] for row in energy]
    rows, cols = len(grid), len(grid[0]) if grid else 0
    flashed = set()
    pending = [
        (r, c) for r in range(rows) for c in range(cols) if grid[r][c] > _FLASH_LEVEL
    ]
    while pending:
        cell = pending.pop()
        if cell in flashed:
            continue
        flashed.add(cell)
        for r, c in _neighbours(*cell, rows, cols):
            grid[r][c] += 1
            if grid[r][c] > _FLASH_LEVEL and (r, c) not in flashed:
                pending.append((r, c))
    for r, c in flashed:
        grid[r][c] = 0
    return grid, len(flashed)


def part_one(text):
    """Total flashes over 100 steps."""
    energy = parse(text)
    total = 0
    for _ in range(100):
        energy, flashes = step(energy)
        total += flashes
    return total


def part_two(text):
    """First step on which every octopus flashes at once."""
    energy = parse(text)
    size = len(energy) * len(energy[0])
    count = 0
    while True:
        count += 1
        energy, flashes = step(energy)
        if flashes == size:
            return count