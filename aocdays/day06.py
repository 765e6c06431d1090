"""Lanternfish: population growth from spawn timers."""

from collections import Counter

_CYCLE = 7
_NEWBORN = 9


def parse(text):
    """Read comma-separated timer values."""
    return [int(item) for item in text.strip().split(",") if item.strip()]


def predict(timers, days):
    """Number of fish after the given number of days."""
    tally = Counter(timers)
    if any(timer < 0 or timer >= _NEWBORN for timer in tally):
        raise ValueError("timers must lie between 0 and 8")
    counts = [tally[timer] for timer in range(_NEWBORN)]
    for _ in range(days):
        spawning = counts.pop(0)
        counts.append(spawning)
        counts[_CYCLE - 1] += spawning
    return sum(counts)


def part_one(text):
    """Population after 80 days."""
    return predict(parse(text), 80)


def part_two(text):
    """Population after 256 days."""
    return predict(parse(text), 256)