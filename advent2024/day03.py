"""Day 3: summing multiplication instructions in corrupted memory."""

import re

_MUL = re.compile(r"mul\((\d+),(\d+)\)")
_INSTRUCTION = re.compile(r"mul\((\d+),(\d+)\)|do\(\)|don't\(\)")


def part_one(text):
    """Sum of the products of every well-formed mul(a,b)."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def part_two(text):
    """Sum of products, honouring do() and don't() switches."""
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(text):
        token = match.group(0)
        if token == "do()":
            enabled = True
        elif token == "don't()":
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return total