import pytest

from advent2024.day16 import part_one, part_two

EXAMPLE = """\
###############
#.......#....E#
#.#.###.#.###.#
#.....#.#...#.#
#.###.#####.#.#
#.#.#.......#.#
#.#.#####.###.#
#...........#.#
###.#.#####.#.#
#...#.....#.#.#
#.#.#.###.#.#.#
#.....#...#.#.#
#.###.#.#.#.#.#
#S..#.....#...#
###############
"""


def _corridor(gap):
    inner = "S" + "." * gap + "E"
    wall = "#" * (len(inner) + 2)
    return f"{wall}\n#{inner}#\n{wall}\n"


def test_example_part_one():
    assert part_one(EXAMPLE) == 7036


def test_example_part_two():
    assert part_two(EXAMPLE) == 45


@pytest.mark.parametrize("gap", [0, 1, 4, 9])
def test_straight_corridor_costs_one_per_step(gap):
    assert part_one(_corridor(gap)) == gap + 1


@pytest.mark.parametrize("gap", [0, 1, 4, 9])
def test_straight_corridor_tiles_all_lie_on_best_path(gap):
    assert part_two(_corridor(gap)) == gap + 2


def test_facing_away_needs_a_half_turn():
    forward = _corridor(3)
    backward = forward.replace("S", "x").replace("E", "S").replace("x", "E")
    assert part_one(backward) - part_one(forward) == 2000


def test_best_path_tiles_cover_at_least_a_shortest_route():
    assert part_two(EXAMPLE) > part_one(EXAMPLE) % 1000


def test_unreachable_end_raises():
    maze = "#######\n#S.#.E#\n#######\n"
    with pytest.raises(ValueError):
        part_one(maze)
    with pytest.raises(ValueError):
        part_two(maze)


def test_missing_start_raises():
    with pytest.raises(ValueError):
        part_one("#####\n#..E#\n#####\n")