"""Trench map: enhance an infinite image with a lookup algorithm."""

_PIXELS = {".": False, "#": True}
ALGORITHM_SIZE = 512


def _row(line):
    try:
        return [_PIXELS[ch] for ch in line]
    except KeyError as exc:
        raise ValueError(f"unexpected pixel {exc.args[0]!r}") from None


def parse(text):
    """Read the enhancement algorithm and the input image, returned as (algorithm, image)."""
    lines = [line.strip() for line in text.splitlines()]
    if not lines or not lines[0]:
        raise ValueError("missing enhancement algorithm")
    algorithm = _row(lines[0])
    if len(algorithm) != ALGORITHM_SIZE:
        raise ValueError(f"algorithm must have {ALGORITHM_SIZE} entries")
    image = [_row(line) for line in lines[1:] if line]
    if not image:
        raise ValueError("missing input image")
    if any(len(row) != len(image[0]) for row in image):
        raise ValueError("image rows differ in length")
    return algorithm, image


def _index(image, background, row, col):
    height, width = len(image), len(image[0]) if image else 0
    index = 0
    for r in (row - 1, row, row + 1):
        for c in (col - 1, col, col + 1):
            lit = image[r][c] if 0 <= r < height and 0 <= c < width else background
            index = (index << 1) | lit
    return index


def enhance(image, algorithm, times):
    """Apply the algorithm repeatedly; the image grows by one pixel each side per pass."""
    if len(algorithm) != ALGORITHM_SIZE:
        raise ValueError(f"algorithm must have {ALGORITHM_SIZE} entries")
    if times < 0:
        raise ValueError("times cannot be negative")
    current = [list(row) for row in image]
    background = False
    for _ in range(times):
        height, width = len(current), len(current[0]) if current else 0
        current = [
            [algorithm[_index(current, background, r, c)] for c in range(-1, width + 1)]
            for r in range(-1, height + 1)
        ]
        background = algorithm[-1] if background else algorithm[0]
    return current


def count_lit(image):
    """Number of lit pixels."""
    return sum(sum(row) for row in image)


def part_one(text):
    """Lit pixels after two passes."""
    algorithm, image = parse(text)
    return count_lit(enhance(image, algorithm, 2))


def part_two(text):
    """Lit pixels after fifty passes."""
    algorithm, image = parse(text)
    return count_lit(enhance(image, algorithm, 50))