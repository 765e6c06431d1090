import re

import pytest

from aocdays.day18 import add, parse_number, part_one, part_two, reduce

SAMPLE_LINES = [
    "[[[0,[5,8]],[[1,7],[9,6]]],[[4,[1,2]],[[1,4],2]]]",
    "[[[5,[2,8]],4],[5,[[9,9],0]]]",
    "[6,[[[6,2],[5,6]],[[7,6],[4,7]]]]",
    "[[[6,[0,7]],[0,9]],[4,[9,[9,0]]]]",
]


def max_depth(rendered):
    depth = deepest = 0
    for ch in rendered:
        if ch == "[":
            depth += 1
            deepest = max(deepest, depth)
        elif ch == "]":
            depth -= 1
    return deepest


def test_magnitude_known_example():
    assert parse_number("[[1,2],[[3,4],5]]").magnitude() == 143


def test_reduce_known_sum():
    a = parse_number("[[[[4,3],4],4],[7,[[8,4],9]]]")
    b = parse_number("[1,1]")
    assert reduce(add(a, b)).render() == "[[[[0,7],4],[[7,8],[6,0]]],[8,1]]"


def test_explode_without_left_neighbour():
    assert reduce(parse_number("[[[[[9,8],1],2],3],4]")).render() == "[[[[0,9],2],3],4]"


@pytest.mark.parametrize("line", SAMPLE_LINES + ["[1,2]", "7", "[[1,9],[8,5]]"])
def test_render_round_trip(line):
    assert parse_number(line).render() == line


def test_leaf_magnitude_is_value():
    assert parse_number("9").magnitude() == 9


def test_add_does_not_reduce():
    result = add(parse_number("[1,2]"), parse_number("[3,4]"))
    assert result.render() == "[[1,2],[3,4]]"
    assert result.left.parent is result
    assert result.right.parent is result


def test_split_halves_value():
    root = reduce(parse_number("[15,1]"))
    low, high = root.left.left.value, root.left.right.value
    assert low + high == 15
    assert high - low in (0, 1)


def test_reduce_result_is_reduced():
    total = parse_number(SAMPLE_LINES[0])
    for line in SAMPLE_LINES[1:]:
        total = reduce(add(total, parse_number(line)))
        rendered = total.render()
        numbers = [int(token) for token in re.findall(r"\d+", rendered)]
        assert max_depth(rendered) <= 4
        assert max(numbers) < 10


def test_copy_is_independent():
    original = parse_number("[[[[4,3],4],4],[7,[[8,4],9]]]")
    before = original.render()
    duplicate = original.copy()
    reduce(add(duplicate, parse_number("[1,1]")))
    assert original.render() == before
    assert duplicate.left.parent is duplicate


def test_part_one_single_number():
    line = SAMPLE_LINES[1]
    assert part_one(line + "\n") == parse_number(line).magnitude()


def test_part_one_matches_manual_sum():
    total = parse_number(SAMPLE_LINES[0])
    for line in SAMPLE_LINES[1:]:
        total = reduce(add(total, parse_number(line)))
    assert part_one("\n".join(SAMPLE_LINES)) == total.magnitude()


def test_part_two_at_least_any_pair():
    text = "\n".join(SAMPLE_LINES)
    pair = reduce(add(parse_number(SAMPLE_LINES[0]), parse_number(SAMPLE_LINES[1])))
    assert part_two(text) >= pair.magnitude()


def test_part_two_needs_two_numbers():
    with pytest.raises(ValueError):
        part_two("[1,2]\n")


def test_part_one_empty_raises():
    with pytest.raises(ValueError):
        part_one("\n")


@pytest.mark.parametrize("line", ["[1,2", "[1;2]", "", "[1,2]]", "[a,1]"])
def test_parse_rejects_malformed(line):
    with pytest.raises(ValueError):
        parse_number(line)