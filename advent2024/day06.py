"""Day 6: following a patrolling guard around a lab."""

from dataclasses import dataclass

_STEPS = ((-1, 0), (0, 1), (1, 0), (0, -1))


@dataclass(frozen=True)
class _Lab:
    walls: frozenset
    start: tuple
    height: int
    width: int

    def inside(self, cell):
        row, col = cell
        return 0 <= row < self.height and 0 <= col < self.width

    def open_cells(self):
        return {
            (row, col)
            for row in range(self.height)
            for col in range(self.width)
            if (row, col) not in self.walls
        }


def _parse(text):
    lines = [line for line in text.splitlines() if line]
    walls = set()
    start = None
    for row, line in enumerate(lines):
        for col, char in enumerate(line):
            if char == "#":
                walls.add((row, col))
            elif char == "^" and start is None:
                start = (row, col)
    if start is None:
        raise ValueError("the map shows no guard")
    return _Lab(frozenset(walls), start, len(lines), len(lines[0]))


def _patrol(lab, obstacle=None):
    """Walk the guard; return the cells visited and whether the walk loops."""
    position = lab.start
    heading = 0
    visited = {position}
    states = set()
    while True:
        dy, dx = _STEPS[heading]
        ahead = (position[0] + dy, position[1] + dx)
        if not lab.inside(ahead):
            return visited, False
        if ahead in lab.walls or ahead == obstacle:
            heading = (heading + 1) % 4
            continue
        if (position, heading) in states:
            return visited, True
        states.add((position, heading))
        position = ahead
        visited.add(position)


def part_one(text):
    """Number of distinct cells the guard visits before leaving the map."""
    visited, looped = _patrol(_parse(text))
    if looped:
        raise ValueError("the guard never leaves the lab")
    return len(visited)


def part_two(text):
    """Number of cells where one new obstruction traps the guard in a loop."""
    lab = _parse(text)
    visited, looped = _patrol(lab)
    candidates = (lab.open_cells() if looped else visited) - {lab.start}
    return sum(_patrol(lab, cell)[1] for cell in candidates)