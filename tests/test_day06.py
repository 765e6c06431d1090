import pytest

from aocdays.day06 import parse, part_one, part_two, predict

EXAMPLE = "3,4,3,1,2\n"


def test_parse():
    assert parse(EXAMPLE) == [3, 4, 3, 1, 2]


def test_example_part_one():
    assert part_one(EXAMPLE) == 5934


def test_example_part_two():
    assert part_two(EXAMPLE) == 26984457539


def test_zero_days_keeps_population():
    timers = parse(EXAMPLE)
    assert predict(timers, 0) == len(timers)


def test_population_never_shrinks():
    timers = parse(EXAMPLE)
    sizes = [predict(timers, days) for days in range(40)]
    assert sizes == sorted(sizes)


def test_order_of_timers_is_irrelevant():
    assert predict([1, 2, 3], 50) == predict([3, 1, 2], 50)


def test_out_of_range_timer_raises():
    with pytest.raises(ValueError):
        predict([9], 10)


def test_bad_number_raises():
    with pytest.raises(ValueError):
        parse("3,x,1")