"""Snailfish: add and reduce nested pair numbers."""

import re
from itertools import permutations

_DIGITS = re.compile(r"\d+")
_EXPLODE_DEPTH = 4
_SPLIT_AT = 10


class Node:
    """A snailfish number: a regular number leaf or a pair of two nodes."""

    def __init__(self, value=None, left=None, right=None):
        self.value = value
        self.left = left
        self.right = right
        self.parent = None
        for child in (left, right):
            if child is not None:
                child.parent = self

    @property
    def is_pair(self):
        return self.value is None

    def copy(self):
        """A deep copy with its own parent links."""
        if not self.is_pair:
            return Node(self.value)
        return Node(left=self.left.copy(), right=self.right.copy())

    def magnitude(self):
        """Three times the left magnitude plus twice the right; a leaf is its value."""
        if not self.is_pair:
            return self.value
        return 3 * self.left.magnitude() + 2 * self.right.magnitude()

    def render(self):
        """The number in bracket notation."""
        if not self.is_pair:
            return str(self.value)
        return f"[{self.left.render()},{self.right.render()}]"

    def __str__(self):
        return self.render()


def _expect(text, pos, ch):
    if pos >= len(text) or text[pos] != ch:
        raise ValueError(f"expected {ch!r} at position {pos} in {text!r}")
    return pos + 1


def _parse(text, pos):
    if pos >= len(text):
        raise ValueError(f"unexpected end of {text!r}")
    if text[pos] == "[":
        left, pos = _parse(text, pos + 1)
        pos = _expect(text, pos, ",")
        right, pos = _parse(text, pos)
        pos = _expect(text, pos, "]")
        return Node(left=left, right=right), pos
    match = _DIGITS.match(text, pos)
    if match is None:
        raise ValueError(f"expected a number at position {pos} in {text!r}")
    return Node(int(match.group())), match.end()


def parse_number(line):
    """Read one snailfish number written in bracket notation."""
    text = line.strip()
    node, pos = _parse(text, 0)
    if pos != len(text):
        raise ValueError(f"trailing characters in {text!r}")
    return node


def _leaves(node):
    if node.is_pair:
        yield from _leaves(node.left)
        yield from _leaves(node.right)
    else:
        yield node


def _find_explodable(node, depth=0):
    if not node.is_pair:
        return None
    if depth >= _EXPLODE_DEPTH and not node.left.is_pair and not node.right.is_pair:
        return node
    return _find_explodable(node.left, depth + 1) or _find_explodable(node.right, depth + 1)


def _explode(root):
    pair = _find_explodable(root)
    if pair is None:
        return False
    leaves = list(_leaves(root))
    index = next(i for i, leaf in enumerate(leaves) if leaf is pair.left)
    if index > 0:
        leaves[index - 1].value += pair.left.value
    if index + 2 < len(leaves):
        leaves[index + 2].value += pair.right.value
    pair.value = 0
    pair.left = pair.right = None
    return True


def _split(root):
    leaf = next((leaf for leaf in _leaves(root) if leaf.value >= _SPLIT_AT), None)
    if leaf is None:
        return False
    value = leaf.value
    leaf.value = None
    leaf.left = Node(value // 2)
    leaf.right = Node(value - value // 2)
    leaf.left.parent = leaf
    leaf.right.parent = leaf
    return True


def add(left, right):
    """Pair two numbers without reducing; the operands become part of the result."""
    return Node(left=left, right=right)


def reduce(root):
    """Explode and split in place until neither applies; returns the root."""
    while _explode(root) or _split(root):
        pass
    return root


def _parse_all(text):
    numbers = [parse_number(line) for line in text.splitlines() if line.strip()]
    if not numbers:
        raise ValueError("no snailfish numbers")
    return numbers


def part_one(text):
    """Magnitude of the reduced sum of all numbers in order."""
    numbers = _parse_all(text)
    total = numbers[0]
    for number in numbers[1:]:
        total = reduce(add(total, number))
    return total.magnitude()


def part_two(text):
    """Largest magnitude of the sum of any two different numbers."""
    numbers = _parse_all(text)
    if len(numbers) < 2:
        raise ValueError("need at least two snailfish numbers")
    return max(
        reduce(add(a.copy(), b.copy())).magnitude() for a, b in permutations(numbers, 2)
    )