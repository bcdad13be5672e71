"""Day 20: cheating through walls on a single-track race."""

from collections import deque

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _parse(text):
    open_cells, walls = set(), set()
    end = None
    for row, line in enumerate(line for line in text.splitlines() if line):
        for col, char in enumerate(line):
            if char == "#":
                walls.add((row, col))
                continue
            open_cells.add((row, col))
            if char == "E":
                end = (row, col)
    if end is None:
        raise ValueError("the track shows no end tile")
    return open_cells, walls, end


def _distances(open_cells, end):
    """Distance from every reachable track cell to the end."""
    distances = {end: 0}
    queue = deque([end])
    while queue:
        row, col = queue.popleft()
        for dy, dx in _STEPS:
            neighbour = (row + dy, col + dx)
            if neighbour in open_cells and neighbour not in distances:
                distances[neighbour] = distances[(row, col)] + 1
                queue.append(neighbour)
    return distances


def part_one(text, threshold=100):
    """Walls whose removal saves at least ``threshold`` steps."""
    open_cells, walls, end = _parse(text)
    distances = _distances(open_cells, end)

    def saves(row, col):
        for first, second in (((row - 1, col), (row + 1, col)), ((row, col - 1), (row, col + 1))):
            if first in distances and second in distances:
                if abs(distances[first] - distances[second]) >= threshold + 2:
                    return True
        return False

    return sum(saves(row, col) for row, col in walls)


def part_two(text, threshold=100, radius=20):
    """Distinct cheats of at most ``radius`` steps saving at least ``threshold``."""
    open_cells, _, end = _parse(text)
    distances = _distances(open_cells, end)
    offsets = [
        (dy, dx, abs(dy) + abs(dx))
        for dy in range(-radius, radius + 1)
        for dx in range(-(radius - abs(dy)), radius - abs(dy) + 1)
    ]
    count = 0
    for (row, col), remaining in distances.items():
        for dy, dx, length in offsets:
            start = distances.get((row + dy, col + dx))
            if start is not None and start - remaining - length >= threshold:
                count += 1
    return count