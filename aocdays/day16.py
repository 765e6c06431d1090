"""Packet decoder: parse nested transmission packets."""

import math
import operator
from dataclasses import dataclass, field
from typing import Optional

_HEX_DIGITS = "0123456789ABCDEF"
_LITERAL = 4


def hex_to_bits(text):
    """Expand upper-case hexadecimal text into a string of '0' and '1'."""
    text = text.strip()
    for ch in text:
        if ch not in _HEX_DIGITS:
            raise ValueError(f"invalid hexadecimal digit {ch!r}")
    return "".join(format(int(ch, 16), "04b") for ch in text)


@dataclass
class _Packet:
    version: int
    type_id: int
    value: Optional[int] = None
    children: list = field(default_factory=list)


class _Reader:
    def __init__(self, bits):
        if set(bits) - {"0", "1"}:
            raise ValueError("bits must be a string of '0' and '1'")
        self.bits = bits
        self.pos = 0

    def read(self, count):
        end = self.pos + count
        if end > len(self.bits):
            raise ValueError("packet is truncated")
        chunk = self.bits[self.pos:end]
        self.pos = end
        return int(chunk, 2) if chunk else 0


def _read_packet(reader):
    version = reader.read(3)
    type_id = reader.read(3)
    if type_id == _LITERAL:
        value = 0
        more = 1
        while more:
            more = reader.read(1)
            value = (value << 4) | reader.read(4)
        return _Packet(version, type_id, value)

    children = []
    if reader.read(1):
        count = reader.read(11)
        children = [_read_packet(reader) for _ in range(count)]
    else:
        length = reader.read(15)
        stop = reader.pos + length
        while reader.pos <= stop - 11:
            children.append(_read_packet(reader))
        reader.pos = stop
    return _Packet(version, type_id, None, children)


def _compare(test):
    def apply(values):
        if len(values) < 2:
            raise ValueError("comparison packets need two sub-packets")
        return int(test(values[0], values[1]))

    return apply


_OPERATIONS = {
    0: sum,
    1: math.prod,
    2: min,
    3: lambda values: max(values, default=0),
    5: _compare(operator.gt),
    6: _compare(operator.lt),
    7: _compare(operator.eq),
}


def _versions(packet):
    return packet.version + sum(_versions(child) for child in packet.children)


def _value(packet):
    if packet.type_id == _LITERAL:
        return packet.value
    values = [_value(child) for child in packet.children]
    return _OPERATIONS[packet.type_id](values)


def version_sum(bits):
    """Sum of the version numbers of the outermost packet and all it contains."""
    return _versions(_read_packet(_Reader(bits)))


def evaluate(bits):
    """Value of the expression encoded by the outermost packet."""
    return _value(_read_packet(_Reader(bits)))


def _first_line(text):
    lines = text.strip().splitlines()
    if not lines:
        raise ValueError("no transmission")
    return lines[0]


def part_one(text):
    """Version sum of the transmission."""
    return version_sum(hex_to_bits(_first_line(text)))


def part_two(text):
    """Evaluated value of the transmission."""
    return evaluate(hex_to_bits(_first_line(text)))