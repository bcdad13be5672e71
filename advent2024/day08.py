"""Day 8: antinodes produced by pairs of same-frequency antennas."""

from collections import defaultdict
from itertools import permutations
from math import gcd

_MAX_STEPS = 50


def _parse(text):
    lines = [line for line in text.splitlines() if line]
    if not lines:
        raise ValueError("the map is empty")
    antennas = defaultdict(list)
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            if char not in ".#":
                antennas[char].append((row, col))
    return antennas, len(lines), len(lines[0])


def _pairs(antennas):
    for positions in antennas.values():
        yield from permutations(positions, 2)


def part_one(text):
    """Distinct in-bounds antinodes lying twice as far from one antenna as the other."""
    antennas, height, width = _parse(text)
    nodes = set()
    for (ay, ax), (by, bx) in _pairs(antennas):
        row, col = 2 * by - ay, 2 * bx - ax
        if 0 <= row < height and 0 <= col < width:
            nodes.add((row, col))
    return len(nodes)


def part_two(text):
    """Distinct in-bounds grid points on any line through two same-frequency antennas."""
    antennas, height, width = _parse(text)
    nodes = set()
    for (ay, ax), (by, bx) in _pairs(antennas):
        dy, dx = by - ay, bx - ax
        divisor = gcd(dy, dx)
        dy, dx = dy // divisor, dx // divisor
        for step in range(1, _MAX_STEPS + 1):
            row, col = ay + step * dy, ax + step * dx
            if not (0 <= row < height and 0 <= col < width):
                break
            nodes.add((row, col))
    return len(nodes)