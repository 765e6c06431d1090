"""Amphipod: sort amphipods into their rooms for the least energy."""

import heapq
from functools import lru_cache

SIZE = 19
EMPTY = "."
ROOMS_TOP = (3, 7, 11, 15)
ROOMS_BOTTOM = (4, 8, 12, 16)
ROOMS = frozenset(ROOMS_TOP + ROOMS_BOTTOM)
HALLWAY = frozenset({0, 1, 5, 9, 13, 17, 18})
DOORWAYS = frozenset({2, 6, 10, 14})
TARGETS = {"A": 3, "B": 7, "C": 11, "D": 15}
ENERGY = {"A": 1, "B": 10, "C": 100, "D": 1000}
SOLVED = "...AA..BB..CC..DD.."

_ALLOWED = frozenset(TARGETS) | {EMPTY}


def _check_state(state):
    if len(state) != SIZE:
        raise ValueError(f"a burrow state has {SIZE} positions, not {len(state)}")
    unknown = set(state) - _ALLOWED
    if unknown:
        raise ValueError(f"unexpected characters in state: {sorted(unknown)}")


def _check_position(position):
    if not 0 <= position < SIZE:
        raise ValueError(f"position out of range: {position}")


@lru_cache(maxsize=None)
def _route(src, dst):
    """Positions passed through from src to dst, the destination included."""
    pos = src
    rightward = dst > src
    steps = []
    while pos != dst:
        if pos in ROOMS_TOP:
            pos = pos + 1 if dst == pos + 1 else pos - 1
        elif pos in ROOMS_BOTTOM:
            pos -= 1
        elif pos in DOORWAYS:
            if dst in (pos + 1, pos + 2):
                pos += 1
            elif rightward:
                pos += 3
            else:
                pos -= 1
        elif pos <= 1 or pos >= SIZE - 1:
            pos += 1 if rightward else -1
        else:
            pos += 1 if rightward else -3
        if not 0 <= pos < SIZE or len(steps) > SIZE:
            raise ValueError(f"no route from {src} to {dst}")
        steps.append(pos)
    return tuple(steps)


def path_length(state, src, dst):
    """Steps from src to dst, or 0 when the way is blocked or src is dst."""
    _check_position(src)
    _check_position(dst)
    route = _route(src, dst)
    if any(state[pos] != EMPTY for pos in route):
        return 0
    return len(route)


def _is_valid(state, src, dst):
    kind = state[src]
    if src == dst or dst in DOORWAYS or not path_length(state, src, dst):
        return False
    target = TARGETS[kind]
    return (
        (src in ROOMS and dst in HALLWAY)
        or dst == target + 1
        or (dst == target and state[dst + 1] == kind)
    )


@lru_cache(maxsize=None)
def _moves(state):
    moves = []
    for src, kind in enumerate(state):
        if kind == EMPTY:
            continue
        target = TARGETS[kind]
        if src == target + 1 or (src == target and state[src + 1] == kind):
            continue
        for dst in sorted(HALLWAY | {target, target + 1}):
            if _is_valid(state, src, dst):
                moves.append((src, dst))
    return tuple(moves)


def valid_moves(state):
    """Legal (src, dst) moves from a state, ordered by source then destination."""
    _check_state(state)
    return list(_moves(state))


def _apply(state, src, dst):
    cells = list(state)
    cells[dst] = cells[src]
    cells[src] = EMPTY
    return "".join(cells)


def least_cost(state):
    """Least energy needed to reach the sorted burrow."""
    _check_state(state)
    best = {state: 0}
    heap = [(0, state)]
    while heap:
        cost, current = heapq.heappop(heap)
        if current == SOLVED:
            return cost
        if cost > best[current]:
            continue
        for src, dst in _moves(current):
            nxt = _apply(current, src, dst)
            total = cost + path_length(current, src, dst) * ENERGY[current[src]]
            if total < best.get(nxt, float("inf")):
                best[nxt] = total
                heapq.heappush(heap, (total, nxt))
    raise ValueError("the amphipods cannot be organised")


def _room_letters(line):
    letters = [ch for ch in line if ch.isalpha()]
    if len(letters) != len(ROOMS_TOP) or set(letters) - set(TARGETS):
        raise ValueError(f"expected four amphipods A-D in {line!r}")
    return letters


def parse(text):
    """Read the burrow diagram into a 19-character state."""
    lines = text.splitlines()
    if len(lines) < 4:
        raise ValueError("burrow diagram is too short")
    cells = [EMPTY] * SIZE
    for positions, line in ((ROOMS_TOP, lines[2]), (ROOMS_BOTTOM, lines[3])):
        for pos, letter in zip(positions, _room_letters(line)):
            cells[pos] = letter
    return "".join(cells)


def part_one(text):
    """Least energy to organise the amphipods."""
    return least_cost(parse(text))