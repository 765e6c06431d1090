import pytest

from aocdays.day10 import check_line, part_one, part_two

EXAMPLE = """\
[({(<(())[]>[[{[]{<()<>>
[(()[<>])]({[<{<<[]>>(
{([(<{}[<>[]}>{[]{[(<()>
(((({<>}<{<{<>}{[]{[]{}
[[<[([]))<([[{}[[()]]]
[{[{({}]{}}([{[{{{}}([]
{<[[]]>}<{[{[{[]{()[[[]
[<(<(<(<{}))><([]([]()
<{([([[(<>()){}]>(<<{{
<{([{{}}[<[[[<>{}]]]>[]]
"""

LINES = EXAMPLE.splitlines()
CORRUPT = [line for line in LINES if check_line(line).illegal is not None]
INCOMPLETE = [line for line in LINES if check_line(line).illegal is None]


def test_part_one_example():
    assert part_one(EXAMPLE) == 26397


def test_part_two_example():
    assert part_two(EXAMPLE) == 288957


def test_first_illegal_character():
    assert check_line("{([(<{}[<>[]}>{[]{[(<()>").illegal == "}"


@pytest.mark.parametrize("line", INCOMPLETE)
def test_completion_closes_line(line):
    result = check_line(line + check_line(line).completion)
    assert result.illegal is None
    assert result.completion == ""


@pytest.mark.parametrize("line", CORRUPT)
def test_corrupt_lines_have_no_completion(line):
    result = check_line(line)
    assert result.illegal in ")]}>"
    assert result.completion == ""


def test_part_one_only_counts_corrupt_lines():
    assert part_one("\n".join(CORRUPT)) == part_one(EXAMPLE)


def test_part_two_ignores_corrupt_lines():
    assert part_two("\n".join(INCOMPLETE)) == part_two(EXAMPLE)


def test_blank_lines_ignored():
    assert part_one(EXAMPLE + "\n\n") == part_one(EXAMPLE)
    assert part_two("\n" + EXAMPLE) == part_two(EXAMPLE)


def test_unbalanced_closer_raises():
    with pytest.raises(ValueError):
        check_line("]")


def test_unknown_character_raises():
    with pytest.raises(ValueError):
        check_line("(a)")


def test_part_two_without_incomplete_lines_raises():
    with pytest.raises(ValueError):
        part_two("\n".join(CORRUPT))