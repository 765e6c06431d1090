import pytest

from aocdays.day09 import basin_size, low_points, parse, part_one, part_two

EXAMPLE = """\
2199943210
3987894921
9856789892
8767896789
9899965678
"""


def test_part_one_example():
    assert part_one(EXAMPLE) == 15


def test_part_two_example():
    assert part_two(EXAMPLE) == 1134


def test_parse_shape():
    heightmap = parse(EXAMPLE)
    assert len(heightmap) == 5
    assert all(len(row) == 10 for row in heightmap)
    assert heightmap[0][:3] == [2, 1, 9]


def test_low_points_are_strict_minima():
    heightmap = parse(EXAMPLE)
    points = low_points(heightmap)
    assert points
    for r, c in points:
        height = heightmap[r][c]
        for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < len(heightmap) and 0 <= nc < len(heightmap[0]):
                assert height < heightmap[nr][nc]


def test_basins_fit_within_non_nine_cells():
    heightmap = parse(EXAMPLE)
    sizes = [basin_size(heightmap, r, c) for r, c in low_points(heightmap)]
    assert min(sizes) >= 1
    assert sum(sizes) <= sum(h != 9 for row in heightmap for h in row)


def test_risk_matches_low_point_heights():
    heightmap = parse(EXAMPLE)
    points = low_points(heightmap)
    assert part_one(EXAMPLE) == sum(heightmap[r][c] for r, c in points) + len(points)


def test_too_few_basins():
    with pytest.raises(ValueError):
        part_two("191\n999\n")


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        parse("123\n45\n")


def test_non_digit_rejected():
    with pytest.raises(ValueError):
        parse("12a\n")