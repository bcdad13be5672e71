import pytest

from advent2024.day17 import part_one, part_two, run

EXAMPLE = """Register A: 729
Register B: 0
Register C: 0

Program: 0,1,5,4,3,0
"""

QUINE = """Register A: 2024
Register B: 0
Register C: 0

Program: 0,3,5,4,3,0
"""


def test_part_one_example():
    assert part_one(EXAMPLE) == "4,6,3,5,6,3,5,2,1,0"


def test_part_one_with_register_override():
    text = "Register A: 0\nRegister B: 0\nRegister C: 0\n\nProgram: 5,0,5,1,5,4\n"
    assert part_one(text, a=10) == "0,1,2"


def test_run_sets_b_from_c():
    assert run([2, 6, 5, 5], 0, 0, 9) == [1]


def test_run_outputs_are_three_bit():
    program = [0, 1, 5, 4, 3, 0]
    for a in range(1, 200, 7):
        assert all(0 <= value < 8 for value in run(program, a))


def test_run_rejects_operand_seven():
    with pytest.raises(ValueError):
        run([5, 7])


def test_run_rejects_unknown_opcode():
    with pytest.raises(ValueError):
        run([9, 0])


def test_part_two_example():
    assert part_two(QUINE) == 117440


def test_part_two_reproduces_program():
    answer = part_two(QUINE)
    assert run([0, 3, 5, 4, 3, 0], answer) == [0, 3, 5, 4, 3, 0]


def test_part_two_without_solution():
    text = "Register A: 1\nRegister B: 0\nRegister C: 0\n\nProgram: 5,0\n"
    with pytest.raises(ValueError):
        part_two(text)


def test_missing_program():
    with pytest.raises(ValueError):
        part_one("Register A: 1\n")