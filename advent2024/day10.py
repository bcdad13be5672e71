"""Day 10: hiking trails climbing from height 0 to height 9."""

from collections import Counter

_STEPS = ((-1, 0), (0, -1), (1, 0), (0, 1))
_DIGITS = "0123456789"


def _parse(text):
    grid = {}
    for row, line in enumerate(line for line in text.splitlines() if line):
        for col, char in enumerate(line):
            if char not in _DIGITS:
                raise ValueError(f"invalid height {char!r} at row {row}, column {col}")
            grid[(row, col)] = int(char)
    return grid


def _trail_ends(grid, head):
    """Map each reachable height-9 cell to the number of trails reaching it."""
    counts = Counter({head: 1})
    for height in range(1, 10):
        following = Counter()
        for (row, col), paths in counts.items():
            for dy, dx in _STEPS:
                neighbour = (row + dy, col + dx)
                if grid.get(neighbour) == height:
                    following[neighbour] += paths
        counts = following
    return counts


def _trailheads(grid):
    return (cell for cell, height in grid.items() if height == 0)


def part_one(text):
    """Sum over trailheads of the number of distinct summits they reach."""
    grid = _parse(text)
    return sum(len(_trail_ends(grid, head)) for head in _trailheads(grid))


def part_two(text):
    """Sum over trailheads of the number of distinct trails starting there."""
    grid = _parse(text)
    return sum(sum(_trail_ends(grid, head).values()) for head in _trailheads(grid))