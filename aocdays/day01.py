"""Sonar sweep: count increases in depth measurements."""


def parse(text):
    """Read whitespace-separated integer measurements."""
    return [int(token) for token in text.split()]


def _count_increases(values):
    return sum(later > earlier for earlier, later in zip(values, values[1:]))


def part_one(text):
    """Count measurements larger than the one before."""
    return _count_increases(parse(text))


def part_two(text):
    """Count increases between sums of sliding three-measurement windows."""
    values = parse(text)
    windows = [sum(group) for group in zip(values, values[1:], values[2:])]
    return _count_increases(windows)