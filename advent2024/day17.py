"""Day 17: a three-bit computer and the search for a self-replicating input."""

import re

_REGISTER = re.compile(r"Register ([ABC]):\s*(\d+)")
_PROGRAM = re.compile(r"Program:\s*([0-9,\s]+)")


def _parse(text):
    registers = {name: int(value) for name, value in _REGISTER.findall(text)}
    match = _PROGRAM.search(text)
    if match is None:
        raise ValueError("the input holds no program")
    program = [int(token) for token in re.findall(r"\d+", match.group(1))]
    if not program:
        raise ValueError("the program is empty")
    return registers, program


def _combo(operand, a, b, c):
    if 0 <= operand <= 3:
        return operand
    if operand == 4:
        return a
    if operand == 5:
        return b
    if operand == 6:
        return c
    raise ValueError(f"invalid combo operand {operand}")


def _execute(program, a, b, c):
    """Yield the values the program outputs, one at a time."""
    ip = 0
    while ip < len(program):
        opcode = program[ip]
        if ip + 1 >= len(program):
            raise ValueError(f"opcode {opcode} at {ip} has no operand")
        operand = program[ip + 1]
        ip += 2
        if opcode == 0:
            a >>= _combo(operand, a, b, c)
        elif opcode == 1:
            b ^= operand
        elif opcode == 2:
            b = _combo(operand, a, b, c) % 8
        elif opcode == 3:
            if a != 0:
                ip = operand
        elif opcode == 4:
            b ^= c
        elif opcode == 5:
            yield _combo(operand, a, b, c) % 8
        elif opcode == 6:
            b = a >> _combo(operand, a, b, c)
        elif opcode == 7:
            c = a >> _combo(operand, a, b, c)
        else:
            raise ValueError(f"unknown opcode {opcode}")


def run(program, a=0, b=0, c=0):
    """Run the program with the given registers and return its output values."""
    return list(_execute(list(program), a, b, c))


def part_one(text, a=None):
    """Comma-joined output of the program; ``a`` overrides register A."""
    registers, program = _parse(text)
    if a is None:
        a = registers.get("A", 0)
    return ",".join(
        str(value) for value in run(program, a, registers.get("B", 0), registers.get("C", 0))
    )


def _first_output_is(program, a, target):
    try:
        first = next(_execute(program, a, 0, 0), None)
    except ValueError:
        return False
    return first is None or first == target


def part_two(text):
    """Lowest register A value found by matching the program's output digit by digit."""
    _, program = _parse(text)
    candidates = [0]
    for target in reversed(program):
        candidates = [
            base * 8 + digit
            for base in candidates
            for digit in range(8)
            if _first_output_is(program, base * 8 + digit, target)
        ]
    if not candidates:
        raise ValueError("no register value reproduces the program")
    return min(candidates)