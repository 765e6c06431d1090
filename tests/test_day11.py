import copy

import pytest

from aocdays.day11 import parse, part_one, part_two, step

EXAMPLE = """\
5483143223
2745854711
5264556173
6141336146
6357385478
4167524645
2176841721
6882881134
4846848554
5283751526
"""

SMALL = """\
11111
19991
19191
19991
11111
"""


def test_small_example_first_step():
    grid, _ = step(parse(SMALL))
    assert grid == [
        [3, 4, 5, 4, 3],
        [4, 0, 0, 0, 4],
        [5, 0, 0, 0, 5],
        [4, 0, 0, 0, 4],
        [3, 4, 5, 4, 3],
    ]


def test_part_one_example():
    assert part_one(EXAMPLE) == 1656


def test_part_two_example():
    assert part_two(EXAMPLE) == 195


def test_zero_cells_match_flash_count():
    energy = parse(EXAMPLE)
    for _ in range(20):
        energy, flashes = step(energy)
        assert sum(value == 0 for row in energy for value in row) == flashes


def test_levels_stay_in_range():
    energy = parse(EXAMPLE)
    for _ in range(15):
        energy, _ = step(energy)
        assert all(0 <= value <= 9 for row in energy for value in row)


def test_step_does_not_mutate_input():
    energy = parse(EXAMPLE)
    before = copy.deepcopy(energy)
    step(energy)
    assert energy == before


def test_full_grid_flashes_everywhere():
    energy = parse("999\n999\n999\n")
    grid, flashes = step(energy)
    assert flashes == len(energy) * len(energy[0])
    assert all(value == 0 for row in grid for value in row)


def test_ragged_grid_raises():
    with pytest.raises(ValueError):
        parse("123\n12\n")


def test_non_digit_raises():
    with pytest.raises(ValueError):
        parse("12x\n123\n")


def test_empty_grid_raises():
    with pytest.raises(ValueError):
        parse("\n\n")