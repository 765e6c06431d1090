import pytest

from aocdays.day01 import parse, part_one, part_two

EXAMPLE = "199\n200\n208\n210\n200\n207\n240\n269\n260\n263\n"


def test_parse_reads_all_values():
    values = parse(EXAMPLE)
    assert len(values) == 10
    assert values[0] == 199
    assert values[-1] == 263


def test_example_part_one():
    assert part_one(EXAMPLE) == 7


def test_example_part_two():
    assert part_two(EXAMPLE) == 5


def test_strictly_increasing_counts_every_step():
    text = "\n".join(str(n) for n in range(20))
    assert part_one(text) == 19


def test_constant_series_has_no_increases():
    assert part_one("5\n5\n5\n5\n") == 0
    assert part_two("5\n5\n5\n5\n") == 0


def test_too_short_for_windows():
    assert part_two("1\n2\n3\n") == 0


def test_parse_rejects_non_numbers():
    with pytest.raises(ValueError):
        parse("1\nabc\n")