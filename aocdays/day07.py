"""Treachery of whales: align crab submarines at the cheapest position."""


def parse(text):
    """Read comma-separated horizontal positions."""
    return [int(item) for item in text.strip().split(",") if item.strip()]


def fuel_used(positions, destination, decay=False):
    """Fuel to move every crab to the destination; with decay each step costs one more."""
    total = 0
    for position in positions:
        distance = abs(position - destination)
        total += distance * (distance + 1) // 2 if decay else distance
    return total


def optimize(positions, decay):
    """Least fuel found by bisecting between 0 and the furthest position."""
    if not positions:
        raise ValueError("no positions to align")
    start, end = 0, max(positions)
    fuel_start = fuel_used(positions, start, decay)
    fuel_end = fuel_used(positions, end, decay)
    while True:
        middle = (start + end) // 2
        fuel_middle = fuel_used(positions, middle, decay)
        if fuel_start < fuel_end:
            end, fuel_end = middle, fuel_middle
        else:
            start, fuel_start = middle, fuel_middle
        if end - start <= 1:
            return min(fuel_start, fuel_end)


def part_one(text):
    """Least fuel with constant step cost."""
    return optimize(parse(text), False)


def part_two(text):
    """Least fuel with increasing step cost."""
    return optimize(parse(text), True)