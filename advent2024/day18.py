"""Day 18: escaping a memory grid as bytes fall into it."""

from bisect import bisect_left
from collections import deque

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _bytes(text):
    positions = []
    for line in text.splitlines():
        if not line.strip():
            continue
        x, y = (int(value) for value in line.split(","))
        positions.append((x, y))
    return positions


def _shortest(blocked, size):
    """Steps from the top-left to the bottom-right corner, or None if cut off."""
    goal = (size - 1, size - 1)
    distances = {(0, 0): 0}
    queue = deque([(0, 0)])
    while queue:
        cell = queue.popleft()
        if cell == goal:
            return distances[cell]
        for dx, dy in _STEPS:
            neighbour = (cell[0] + dx, cell[1] + dy)
            if (
                0 <= neighbour[0] < size
                and 0 <= neighbour[1] < size
                and neighbour not in blocked
                and neighbour not in distances
            ):
                distances[neighbour] = distances[cell] + 1
                queue.append(neighbour)
    return None


def part_one(text, size=71, count=1024):
    """Fewest steps to the exit after the first ``count`` bytes fall, or None."""
    return _shortest(set(_bytes(text)[:count]), size)


def part_two(text, size=71):
    """Coordinates (x, y) of the first byte that cuts the exit off."""
    positions = _bytes(text)

    def cut_off(count):
        return _shortest(set(positions[:count]), size) is None

    index = bisect_left(range(1, len(positions) + 1), True, key=cut_off)
    if index == len(positions):
        raise ValueError("the exit stays reachable after every byte")
    return positions[index]