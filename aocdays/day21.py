"""Dirac dice: a deterministic game and a branching quantum game."""

import re
from collections import Counter
from functools import lru_cache

BOARD = 10
DETERMINISTIC_TARGET = 1000
QUANTUM_TARGET = 21
_DIE_SIDES = 100

_START = re.compile(r"(\d+)\s*$")
_ROLLS = tuple(
    sorted(Counter(a + b + c for a in (1, 2, 3) for b in (1, 2, 3) for c in (1, 2, 3)).items())
)


def _advance(position, steps):
    return (position + steps - 1) % BOARD + 1


def parse(text):
    """Read the two starting positions."""
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 2:
        raise ValueError("need a starting position for each player")
    positions = []
    for line in lines[:2]:
        match = _START.search(line)
        if match is None:
            raise ValueError(f"no starting position in {line!r}")
        position = int(match.group(1))
        if not 1 <= position <= BOARD:
            raise ValueError(f"starting position out of range: {position}")
        positions.append(position)
    return tuple(positions)


def deterministic(p1, p2):
    """Play with the hundred-sided die; return (score one, score two, rolls)."""
    positions = [p1, p2]
    scores = [0, 0]
    rolls = 0
    turn = 0
    while max(scores) < DETERMINISTIC_TARGET:
        for _ in range(3):
            positions[turn] += rolls % _DIE_SIDES + 1
            rolls += 1
        positions[turn] = _advance(positions[turn], 0)
        scores[turn] += positions[turn]
        turn ^= 1
    return scores[0], scores[1], rolls


@lru_cache(maxsize=None)
def quantum(p1, p2, s1, s2):
    """Universes won by (player to move, other player) from this state."""
    if s1 >= QUANTUM_TARGET:
        return 1, 0
    if s2 >= QUANTUM_TARGET:
        return 0, 1
    wins_mover = wins_other = 0
    for total, frequency in _ROLLS:
        position = _advance(p1, total)
        other, mover = quantum(p2, position, s2, s1 + position)
        wins_mover += mover * frequency
        wins_other += other * frequency
    return wins_mover, wins_other


def part_one(text):
    """Losing score times the number of rolls."""
    s1, s2, rolls = deterministic(*parse(text))
    return min(s1, s2) * rolls


def part_two(text):
    """Universes won by the player who wins in more of them."""
    p1, p2 = parse(text)
    return max(quantum(p1, p2, 0, 0))