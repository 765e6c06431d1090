"""Passage pathing: count routes through a cave system."""

from collections import defaultdict

START = "start"
END = "end"


def parse(text):
    """Read 'a-b' tunnels into an adjacency mapping."""
    graph = defaultdict(list)
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        left, sep, right = line.partition("-")
        if not sep or not left or not right:
            raise ValueError(f"malformed tunnel: {line!r}")
        graph[left].append(right)
        graph[right].append(left)
    return dict(graph)


def _is_small(name):
    return name[:1].islower()


def count_paths(graph, allow_revisit=False):
    """Number of routes from start to end visiting small caves once.

    With allow_revisit, a single small cave may be visited twice per route.
    """

    def walk(cave, visited, revisited):
        if cave == END:
            return 1
        total = 0
        for nxt in graph.get(cave, ()):
            if nxt == START:
                continue
            seen = _is_small(nxt) and nxt in visited
            if seen and (revisited or not allow_revisit):
                continue
            total += walk(nxt, visited | {nxt}, revisited or seen)
        return total

    if START not in graph:
        return 0
    return walk(START, frozenset({START}), False)


def part_one(text):
    """Routes that visit each small cave at most once."""
    return count_paths(parse(text), False)


def part_two(text):
    """Routes that may visit one small cave twice."""
    return count_paths(parse(text), True)