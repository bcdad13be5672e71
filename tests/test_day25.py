import pytest

from advent2024.day25 import part_one

EXAMPLE = """\
#####
.####
.####
.####
.#.#.
.#...
.....

#####
##.##
.#.##
...##
...#.
...#.
.....

.....
#....
#....
#...#
#.#.#
#.###
#####

.....
.....
#.#..
###..
###.#
###.#
#####

.....
.....
.....
#....
#.#..
#.#.#
#####
"""

EMPTY_LOCK = "#####\n.....\n.....\n.....\n.....\n.....\n.....\n"
EMPTY_KEY = ".....\n.....\n.....\n.....\n.....\n.....\n#####\n"
FULL_LOCK = "#####\n#####\n#####\n#####\n#####\n#####\n.....\n"


def test_example():
    assert part_one(EXAMPLE) == 3


def test_empty_lock_and_key_fit():
    assert part_one(EMPTY_LOCK + "\n" + EMPTY_KEY) == 1


def test_full_lock_rejects_any_cut_key():
    assert part_one(FULL_LOCK + "\n" + EXAMPLE) == part_one(EXAMPLE)


def test_doubling_input_quadruples_pairs():
    assert part_one(EXAMPLE + "\n" + EXAMPLE) == 4 * part_one(EXAMPLE)


def test_only_locks_give_no_pairs():
    assert part_one(EMPTY_LOCK + "\n" + FULL_LOCK) == 0


def test_ragged_schematic_raises():
    with pytest.raises(ValueError):
        part_one("#####\n..\n.....\n")


def test_schematic_without_solid_edge_raises():
    with pytest.raises(ValueError):
        part_one(".....\n.#...\n.....\n")