import pytest

from aocdays import day23

EXAMPLE = """#############
#...........#
###B#C#B#D###
  #A#D#C#A#
  #########
"""

EMPTY_STATE = "." * day23.SIZE


def test_parse_example():
    assert day23.parse(EXAMPLE) == "...BA..CD..BC..DA.."


def test_parse_rejects_short_input():
    with pytest.raises(ValueError):
        day23.parse("#############\n#...........#\n")


def test_parse_rejects_unknown_letter():
    with pytest.raises(ValueError):
        day23.parse(EXAMPLE.replace("B#C#B", "B#E#B"))


def test_path_length_is_symmetric_on_empty_burrow():
    places = sorted(day23.ROOMS | day23.HALLWAY)
    for src in places:
        for dst in places:
            assert day23.path_length(EMPTY_STATE, src, dst) == day23.path_length(
                EMPTY_STATE, dst, src
            )


def test_path_length_positive_between_distinct_places():
    assert day23.path_length(EMPTY_STATE, 4, 16) > day23.path_length(EMPTY_STATE, 3, 16)


def test_path_blocked_by_occupant():
    state = day23.parse(EXAMPLE)
    assert day23.path_length(state, 4, 0) == 0


def test_path_length_same_place_is_zero():
    assert day23.path_length(EMPTY_STATE, 5, 5) == 0


def test_path_length_rejects_bad_position():
    with pytest.raises(ValueError):
        day23.path_length(EMPTY_STATE, 0, 19)


def test_valid_moves_from_start_leave_top_rooms_for_hallway():
    moves = day23.valid_moves(day23.parse(EXAMPLE))
    assert moves
    assert {src for src, _ in moves} == set(day23.ROOMS_TOP)
    for top in day23.ROOMS_TOP:
        assert {dst for src, dst in moves if src == top} == set(day23.HALLWAY)


def test_solved_state_has_no_moves():
    assert day23.valid_moves(day23.SOLVED) == []


def test_least_cost_of_solved_state():
    assert day23.least_cost(day23.SOLVED) == 0


def test_least_cost_example():
    assert day23.part_one(EXAMPLE) == 12521


def test_least_cost_unsolvable():
    with pytest.raises(ValueError):
        day23.least_cost("...AA..BB..CC..DA..")


def test_least_cost_rejects_wrong_length():
    with pytest.raises(ValueError):
        day23.least_cost("...AA..")