"""Dive: steer a submarine by forward/down/up commands."""

from enum import Enum


class Direction(Enum):
    FORWARD = "forward"
    DOWN = "down"
    UP = "up"


def parse(text):
    """Read (direction, amount) pairs; unrecognised commands are skipped."""
    tokens = text.split()
    if len(tokens) % 2:
        raise ValueError("every command needs an amount")
    known = {direction.value: direction for direction in Direction}
    commands = []
    for word, amount in zip(tokens[::2], tokens[1::2]):
        value = int(amount)
        if word in known:
            commands.append((known[word], value))
    return commands


def part_one(text):
    """Product of horizontal position and depth with direct depth changes."""
    horizontal = depth = 0
    for direction, amount in parse(text):
        if direction is Direction.FORWARD:
            horizontal += amount
        elif direction is Direction.DOWN:
            depth += amount
        else:
            depth -= amount
    return horizontal * depth


def part_two(text):
    """Product of horizontal position and depth when down/up change the aim."""
    horizontal = depth = aim = 0
    for direction, amount in parse(text):
        if direction is Direction.FORWARD:
            horizontal += amount
            depth += aim * amount
        elif direction is Direction.DOWN:
            aim += amount
        else:
            aim -= amount
    return horizontal * depth