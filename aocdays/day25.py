"""Sea cucumber: herds moving east then south on a wrapping grid."""

EAST = ">"
SOUTH = "v"
EMPTY = "."


def parse(text):
    """Read the grid as a list of equal-length rows of '>', 'v' and '.'."""
    rows = [
        "".join(ch if ch in (EAST, SOUTH) else EMPTY for ch in line)
        for line in text.splitlines()
        if line.strip()
    ]
    if not rows:
        raise ValueError("empty sea floor")
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("sea floor rows differ in length")
    return rows


def _move(grid, herd, dr, dc):
    rows, cols = len(grid), len(grid[0])
    moved = [list(row) for row in grid]
    for r, row in enumerate(grid):
        for c, ch in enumerate(row):
            if ch != herd:
                continue
            nr, nc = (r + dr) % rows, (c + dc) % cols
            if grid[nr][nc] == EMPTY:
                moved[r][c] = EMPTY
                moved[nr][nc] = herd
    return ["".join(row) for row in moved]


def step(grid):
    """One step: the east herd moves together, then the south herd."""
    if not grid or not grid[0]:
        raise ValueError("empty sea floor")
    return _move(_move(list(grid), EAST, 0, 1), SOUTH, 1, 0)


def part_one(text):
    """First step on which no sea cucumber moves."""
    grid = parse(text)
    steps = 0
    while True:
        steps += 1
        moved = step(grid)
        if moved == grid:
            return steps
        grid = moved