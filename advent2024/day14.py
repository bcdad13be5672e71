"""Day 14: security robots wrapping around a bathroom floor."""

import math
import re
from collections import Counter
from dataclasses import dataclass

_ROBOT = re.compile(r"p=(-?\d+),(-?\d+) v=(-?\d+),(-?\d+)")
_ROW_THRESHOLD = 13


@dataclass(frozen=True)
class _Robot:
    x: int
    y: int
    dx: int
    dy: int

    def position(self, seconds, width, height):
        return (self.x + seconds * self.dx) % width, (self.y + seconds * self.dy) % height


def _robots(text):
    robots = []
    for line in text.splitlines():
        if not line.strip():
            continue
        match = _ROBOT.fullmatch(line.strip())
        if match is None:
            raise ValueError(f"cannot read robot from {line!r}")
        robots.append(_Robot(*(int(value) for value in match.groups())))
    return robots


def part_one(text, width=101, height=103, seconds=100):
    """Safety factor: product of robot counts in the four quadrants."""
    middle_x, middle_y = width // 2, height // 2
    quadrants = Counter()
    for robot in _robots(text):
        x, y = robot.position(seconds, width, height)
        if x == middle_x or y == middle_y:
            continue
        quadrants[(x > middle_x, y > middle_y)] += 1
    return math.prod(
        quadrants[key]
        for key in ((False, False), (False, True), (True, False), (True, True))
    )


def part_two(text, iteration=7568, width=101, height=103):
    """Picture of the floor after iteration + 1 seconds.

    Returns None unless some row holds at least thirteen robots. Robots in
    the left half are drawn as '/', the others as '\\'.
    """
    seconds = iteration + 1
    cells = {}
    for robot in _robots(text):
        x, y = robot.position(seconds, width, height)
        cells[(x, y)] = "/" if x < width // 2 else "\\"
    per_row = Counter(y for _, y in cells)
    if not per_row or max(per_row.values()) < _ROW_THRESHOLD:
        return None
    return "\n".join(
        "".join(cells.get((x, y), " ") for x in range(width)) for y in range(height)
    )