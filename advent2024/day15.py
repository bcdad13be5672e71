"""Day 15: a warehouse robot pushing boxes around."""

import re

_MOVES = {"^": (-1, 0), "v": (1, 0), "<": (0, -1), ">": (0, 1)}
_WIDE = {"#": "##", "O": "[]", ".": "..", "@": "@."}


def _parse(text, widen):
    layout, *rest = re.split(r"\n\s*\n", text, maxsplit=1)
    grid = {}
    robot = None
    for row, line in enumerate(line for line in layout.splitlines() if line.strip()):
        if widen:
            try:
                line = "".join(_WIDE[char] for char in line)
            except KeyError as error:
                raise ValueError(f"unknown tile {error.args[0]!r}") from None
        for col, char in enumerate(line):
            grid[(row, col)] = char
            if char == "@":
                robot = (row, col)
    if robot is None:
        raise ValueError("the map shows no robot")
    moves = []
    for char in "".join(rest):
        if char.isspace():
            continue
        if char not in _MOVES:
            raise ValueError(f"unknown move {char!r}")
        moves.append(_MOVES[char])
    return grid, robot, moves


def _ahead(cell, step, distance):
    return cell[0] + step[0] * distance, cell[1] + step[1] * distance


def _push_line(grid, robot, step, boxes):
    """Push a straight run of box tiles; return the robot's new position."""
    distance = 1
    while grid.get(_ahead(robot, step, distance)) in boxes:
        distance += 1
    if grid.get(_ahead(robot, step, distance), "#") == "#":
        return robot
    for k in range(distance, 1, -1):
        grid[_ahead(robot, step, k)] = grid[_ahead(robot, step, k - 1)]
    grid[robot] = "."
    robot = _ahead(robot, step, 1)
    grid[robot] = "@"
    return robot


def _push_stack(grid, robot, step):
    """Push wide boxes vertically, moving every box they lean on."""
    row, col = robot
    dy = step[0]
    layers = []
    front = {col}
    while True:
        ahead_row = row + dy * (len(layers) + 1)
        following = set()
        for c in front:
            tile = grid.get((ahead_row, c), "#")
            if tile == "#":
                return robot
            if tile == "[":
                following |= {c, c + 1}
            elif tile == "]":
                following |= {c, c - 1}
        if not following:
            break
        layers.append(following)
        front = following
    grid[robot] = "."
    for depth, columns in reversed(list(enumerate(layers, start=1))):
        source, target = row + dy * depth, row + dy * (depth + 1)
        for c in columns:
            grid[(target, c)] = grid[(source, c)]
            grid[(source, c)] = "."
    robot = (row + dy, col)
    grid[robot] = "@"
    return robot


def _score(grid, tile):
    return sum(100 * row + col for (row, col), char in grid.items() if char == tile)


def part_one(text):
    """Sum of box GPS coordinates after the robot has made every move."""
    grid, robot, moves = _parse(text, widen=False)
    for step in moves:
        robot = _push_line(grid, robot, step, {"O"})
    return _score(grid, "O")


def part_two(text):
    """Sum of box GPS coordinates in the doubled-width warehouse."""
    grid, robot, moves = _parse(text, widen=True)
    for step in moves:
        if step[0] == 0:
            robot = _push_line(grid, robot, step, {"[", "]"})
        else:
            robot = _push_stack(grid, robot, step)
    return _score(grid, "[")