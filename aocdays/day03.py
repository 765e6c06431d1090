"""Binary diagnostic: power consumption and life-support ratings."""


def parse(text):
    """Read binary numbers, returning the values and their common bit width."""
    lines = text.split()
    if not lines:
        raise ValueError("no diagnostic values")
    width = len(lines[0])
    if any(len(line) != width for line in lines):
        raise ValueError("diagnostic values differ in width")
    return [int(line, 2) for line in lines], width


def common_bits(values, width):
    """Return (most common, least common) bit patterns; ties favour 1 and 0."""
    most = least = 0
    for bit in range(width):
        ones = sum((value >> bit) & 1 for value in values)
        zeros = len(values) - ones
        if ones >= zeros:
            most |= 1 << bit
        if zeros > ones:
            least |= 1 << bit
    return most, least


def part_one(text):
    """Gamma rate times epsilon rate."""
    values, width = parse(text)
    most, _ = common_bits(values, width)
    mask = (1 << width) - 1
    return most * (~most & mask)


def _rating(values, width, use_most):
    remaining = list(values)
    for bit in reversed(range(width)):
        if len(remaining) == 1:
            break
        most, least = common_bits(remaining, width)
        wanted = ((most if use_most else least) >> bit) & 1
        kept = [value for value in remaining if (value >> bit) & 1 == wanted]
        remaining = kept or remaining[-1:]
    return remaining[0]


def part_two(text):
    """Oxygen generator rating times CO2 scrubber rating."""
    values, width = parse(text)
    return _rating(values, width, True) * _rating(values, width, False)