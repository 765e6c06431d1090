import random

import pytest

from aocdays.day08 import parse, part_one, part_two

EXAMPLE = (
    "acedgfb cdfbe gcdfa fbcad dab cefabd cdfgeb eafb cagedb ab | "
    "cdfeb fcadb cdfeb cdbaf\n"
)

SEGMENTS = {
    0: "abcefg",
    1: "cf",
    2: "acdeg",
    3: "acdfg",
    4: "bcdf",
    5: "abdfg",
    6: "abdefg",
    7: "acf",
    8: "abcdefg",
    9: "abcdfg",
}

CASES = [
    ("abcdefg", (4, 0, 9, 2), 1),
    ("gfedcba", (1, 7, 8, 3), 2),
    ("dcagbfe", (5, 6, 2, 0), 3),
]


def _record_line(wiring, digits, seed):
    rng = random.Random(seed)
    table = str.maketrans("abcdefg", wiring)

    def scrambled(digit):
        pattern = SEGMENTS[digit].translate(table)
        return "".join(rng.sample(pattern, len(pattern)))

    order = list(range(10))
    rng.shuffle(order)
    signals = " ".join(scrambled(d) for d in order)
    outputs = " ".join(scrambled(d) for d in digits)
    return f"{signals} | {outputs}"


def test_example_value():
    assert part_two(EXAMPLE) == 5353


def test_decode_covers_all_digits():
    record = parse(EXAMPLE)[0]
    decoded = record.decode()
    assert set(decoded) == set("0123456789")
    assert sorted(decoded.values()) == sorted(record.signals)


@pytest.mark.parametrize("wiring, digits, seed", CASES)
def test_generated_record_round_trip(wiring, digits, seed):
    record = parse(_record_line(wiring, digits, seed))[0]
    assert record.value() == int("".join(map(str, digits)))


def test_part_one_counts_unique_digits():
    lines = [_record_line(w, d, s) for w, d, s in CASES]
    expected = sum(digit in (1, 4, 7, 8) for _, digits, _ in CASES for digit in digits)
    assert part_one("\n".join(lines)) == expected


def test_part_two_sums_lines():
    lines = [_record_line(w, d, s) for w, d, s in CASES]
    expected = sum(int("".join(map(str, digits))) for _, digits, _ in CASES)
    assert part_two("\n".join(lines)) == expected


def test_missing_bar_rejected():
    with pytest.raises(ValueError):
        parse("ab abc abcd")


def test_wrong_signal_count_rejected():
    with pytest.raises(ValueError):
        parse("ab abc | ab ab ab ab")


def test_unknown_output_pattern_rejected():
    line = EXAMPLE.split("|")[0] + "| ab ab ab xyz"
    with pytest.raises(ValueError):
        parse(line)[0].value()