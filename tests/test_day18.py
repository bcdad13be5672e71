import pytest

from advent2024.day18 import part_one, part_two

EXAMPLE = """\
5,4
4,2
4,5
3,0
2,1
6,3
2,4
1,5
0,6
3,3
2,6
5,1
1,2
5,5
2,5
6,5
1,4
0,4
6,4
1,1
6,1
1,0
0,5
1,6
2,0
"""


def test_part_one_example():
    assert part_one(EXAMPLE, size=7, count=12) == 22


def test_part_two_example():
    assert part_two(EXAMPLE, size=7) == (6, 1)


def test_empty_grid_takes_manhattan_route():
    assert part_one("", size=5, count=0) == 8


def test_walled_start_is_unreachable():
    assert part_one("0,1\n1,0", size=3, count=2) is None


def test_part_two_byte_is_the_first_to_block():
    lines = EXAMPLE.split()
    blocker = part_two(EXAMPLE, size=7)
    index = lines.index(f"{blocker[0]},{blocker[1]}")
    assert part_one(EXAMPLE, size=7, count=index + 1) is None
    assert part_one(EXAMPLE, size=7, count=index) is not None


def test_part_two_never_blocked_raises():
    with pytest.raises(ValueError):
        part_two("0,2\n2,0", size=3)


def test_bad_line_raises():
    with pytest.raises(ValueError):
        part_one("1;2", size=3, count=1)