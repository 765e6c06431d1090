"""Beacon scanner: assemble overlapping scanner reports into one map."""

from itertools import combinations

_REFERENCE = (
    (0, 1, 2, 1, 1, 1),
    (0, 1, 2, 1, -1, -1),
    (0, 2, 1, 1, 1, -1),
    (0, 2, 1, 1, -1, 1),
    (0, 1, 2, -1, 1, -1),
    (0, 1, 2, -1, -1, 1),
    (0, 2, 1, -1, 1, 1),
    (0, 2, 1, -1, -1, -1),
)


def rotations():
    """The 24 orientations as (axis, axis, axis, sign, sign, sign) tuples."""
    return [
        ((axis + dx) % 3, (axis + dy) % 3, (axis + dz) % 3, sx, sy, sz)
        for axis in range(3)
        for dx, dy, dz, sx, sy, sz in _REFERENCE
    ]


_ROTATIONS = rotations()


def manhattan_distance(p, q):
    """Sum of absolute coordinate differences."""
    return sum(abs(a - b) for a, b in zip(p, q))


def _deltas(scanner, pivot, rotation):
    rx, ry, rz, sx, sy, sz = rotation
    deltas = [
        (sx * (q[rx] - pivot[rx]), sy * (q[ry] - pivot[ry]), sz * (q[rz] - pivot[rz]))
        for q in scanner
    ]
    offset = (-sx * pivot[rx], -sy * pivot[ry], -sz * pivot[rz])
    return deltas, offset


class BeaconMap:
    """Beacons and scanner origins gathered in the first scanner's frame."""

    MIN_OVERLAP = 12

    def __init__(self):
        self.beacons = set()
        self.origins = []

    def analyze(self, scanner):
        """Fit a scanner's report into the map; True when it was placed."""
        if not self.beacons:
            self.beacons.update(scanner)
            self.origins.append((0, 0, 0))
            return True

        for pivot in sorted(scanner):
            for rotation in _ROTATIONS:
                deltas, offset = _deltas(scanner, pivot, rotation)
                for ax, ay, az in sorted(self.beacons):
                    placed = [(dx + ax, dy + ay, dz + az) for dx, dy, dz in deltas]
                    matches = sum(point in self.beacons for point in placed)
                    if matches >= self.MIN_OVERLAP:
                        self.beacons.update(placed)
                        self.origins.append((offset[0] + ax, offset[1] + ay, offset[2] + az))
                        return True
        return False


def parse(text):
    """Read scanner reports as a list of sets of (x, y, z) positions."""
    scanners = []
    current = set()
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("---"):
            if current:
                scanners.append(current)
                current = set()
            continue
        parts = line.split(",")
        if len(parts) != 3:
            raise ValueError(f"malformed beacon position: {line!r}")
        current.add(tuple(int(part) for part in parts))
    if current:
        scanners.append(current)
    return scanners


def _assemble(scanners):
    if not scanners:
        raise ValueError("no scanner reports")
    beacon_map = BeaconMap()
    pending = list(scanners)
    while pending:
        remaining = [scanner for scanner in pending if not beacon_map.analyze(scanner)]
        if len(remaining) == len(pending):
            raise ValueError("some scanners cannot be aligned")
        pending = remaining
    return beacon_map


def part_one(text):
    """Number of distinct beacons."""
    return len(_assemble(parse(text)).beacons)


def part_two(text):
    """Largest Manhattan distance between any two scanners."""
    origins = _assemble(parse(text)).origins
    if len(origins) < 2:
        raise ValueError("need at least two scanners")
    return max(manhattan_distance(p, q) for p, q in combinations(origins, 2))