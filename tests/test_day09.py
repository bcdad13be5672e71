import pytest

from advent2024.day09 import part_one, part_two

EXAMPLE = "2333133121414131402"


def test_part_one_example():
    assert part_one(EXAMPLE) == 1928


def test_part_two_example():
    assert part_two(EXAMPLE) == 2858


def test_part_one_small_map():
    assert part_one("12345") == 60


def test_trailing_newline_ignored():
    assert part_one(EXAMPLE + "\n") == part_one(EXAMPLE)
    assert part_two(EXAMPLE + "\n") == part_two(EXAMPLE)


def test_no_free_space_means_no_moves():
    assert part_one("10101") == part_two("10101")


def test_trailing_free_space_changes_nothing():
    assert part_one("123459") == part_one("12345")
    assert part_two("123459") == part_two("12345")


def test_invalid_character_rejected():
    with pytest.raises(ValueError):
        part_one("12a3")