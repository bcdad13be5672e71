import pytest

from advent2024.day13 import Machine, parse_machines, part_one, part_two

EXAMPLE = """\
Button A: X+94, Y+34
Button B: X+22, Y+67
Prize: X=8400, Y=5400

Button A: X+26, Y+66
Button B: X+67, Y+21
Prize: X=12748, Y=12176

Button A: X+17, Y+86
Button B: X+84, Y+37
Prize: X=7870, Y=6450

Button A: X+69, Y+23
Button B: X+27, Y+71
Prize: X=18641, Y=10279
"""

BLOCKS = EXAMPLE.strip().split("\n\n")


def test_parse_reads_every_machine():
    machines = parse_machines(EXAMPLE)
    assert len(machines) == len(BLOCKS)
    assert machines[0] == Machine((94, 34), (22, 67), (8400, 5400))
    assert machines[-1].prize == (18641, 10279)


def test_part_one_example():
    assert part_one(EXAMPLE) == 480


def test_part_one_single_machine():
    assert part_one(BLOCKS[0]) == 280


def test_part_one_is_sum_over_machines():
    assert part_one(EXAMPLE) == sum(part_one(block) for block in BLOCKS)


def test_unwinnable_machine_adds_nothing():
    assert part_one(BLOCKS[0] + "\n\n" + BLOCKS[1]) == part_one(BLOCKS[0])


def test_part_two_example():
    assert part_two(EXAMPLE) == 875318608908


def test_part_two_parallel_buttons_win_nothing():
    text = "Button A: X+1, Y+1\nButton B: X+2, Y+2\nPrize: X=3, Y=3"
    assert part_two(text) == part_two("")


def test_malformed_block_raises():
    with pytest.raises(ValueError):
        parse_machines("Button A: X+1, Y+1\nPrize: X=3, Y=3")


def test_zero_button_offset_raises():
    with pytest.raises(ValueError):
        parse_machines("Button A: X+0, Y+1\nButton B: X+2, Y+2\nPrize: X=3, Y=3")