"""Day 21: typing door codes through a chain of keypad-operating robots."""

from collections import Counter
from itertools import pairwise

_NUMERIC = {
    "7": (0, 0), "8": (0, 1), "9": (0, 2),
    "4": (1, 0), "5": (1, 1), "6": (1, 2),
    "1": (2, 0), "2": (2, 1), "3": (2, 2),
    "0": (3, 1), "A": (3, 2),
}
_NUMERIC_GAP = (3, 0)
_DIRECTIONAL = {
    "^": (0, 1), "A": (0, 2),
    "<": (1, 0), "v": (1, 1), ">": (1, 2),
}
_DIRECTIONAL_GAP = (0, 0)
_FIRST_PART_ROBOTS = 2
_SECOND_PART_ROBOTS = 25


def _moves(start, end):
    """The four runs of arrow presses between two keys: left, down, right, up."""
    (start_row, start_col), (end_row, end_col) = start, end
    return (
        "<" * max(start_col - end_col, 0),
        "v" * max(end_row - start_row, 0),
        ">" * max(end_col - start_col, 0),
        "^" * max(start_row - end_row, 0),
    )


def _best_route(start, end, gap):
    """Arrows that move a robot arm from start to end as cheaply as possible.

    Leftward moves go first, rightward moves last, unless that order would
    carry the arm over the gap in the keypad.
    """
    left, down, right, up = _moves(start, end)
    vertical = down + up
    horizontal = left + right
    (start_row, start_col), (end_row, end_col) = start, end
    if start_row == gap[0] and end_col == gap[1]:
        return vertical + horizontal
    if start_col == gap[1] and end_row == gap[0]:
        return horizontal + vertical
    if end_col < start_col:
        return horizontal + vertical
    return vertical + horizontal


def _plain_numeric_route(start, end):
    left, down, right, up = _moves(start, end)
    left_first = not (start[0] == _NUMERIC_GAP[0] and end[1] == _NUMERIC_GAP[1])
    down_first = not (start[1] == _NUMERIC_GAP[1] and end[0] == _NUMERIC_GAP[0])
    return (
        (left if left_first else "")
        + (down if down_first else "")
        + right
        + up
        + ("" if left_first else left)
        + ("" if down_first else down)
    )


def _plain_directional_route(start, end):
    left, down, right, up = _moves(start, end)
    return right + down + up + left


def _press(sequence, layout, route):
    """Arrow presses that make a robot at the given keypad type the sequence."""
    position = layout["A"]
    presses = []
    for key in sequence:
        target = layout[key]
        presses.append(route(position, target))
        presses.append("A")
        position = target
    return "".join(presses)


def _codes(text):
    codes = [line.strip() for line in text.splitlines() if line.strip()]
    for code in codes:
        unknown = set(code) - set(_NUMERIC)
        if unknown:
            raise ValueError(f"code {code!r} holds keys not on the keypad: {sorted(unknown)}")
    return codes


def _numeric_value(code):
    digits = "".join(char for char in code if char != "A")
    return int(digits) if digits else 0


def part_one(text):
    """Sum of complexities with two directional robots between you and the door."""
    total = 0
    for code in _codes(text):
        sequence = _press(code, _NUMERIC, _plain_numeric_route)
        for _ in range(_FIRST_PART_ROBOTS):
            sequence = _press(sequence, _DIRECTIONAL, _plain_directional_route)
        total += len(sequence) * _numeric_value(code)
    return total


def _expansions():
    """For each pair of directional keys, the key pairs the next robot must type."""
    return {
        (first, second): list(
            pairwise(
                "A"
                + _best_route(_DIRECTIONAL[first], _DIRECTIONAL[second], _DIRECTIONAL_GAP)
                + "A"
            )
        )
        for first in _DIRECTIONAL
        for second in _DIRECTIONAL
    }


def _sequence_length(code, robots, expansions):
    first = _press(
        code,
        _NUMERIC,
        lambda start, end: _best_route(start, end, _NUMERIC_GAP),
    )
    pairs = Counter(pairwise("A" + first))
    for _ in range(robots):
        following = Counter()
        for pair, amount in pairs.items():
            for step in expansions[pair]:
                following[step] += amount
        pairs = following
    return sum(pairs.values())


def part_two(text, robots=_SECOND_PART_ROBOTS):
    """Sum of complexities with the given number of directional robots in the chain."""
    if robots < 0:
        raise ValueError("the number of robots cannot be negative")
    expansions = _expansions()
    return sum(
        _sequence_length(code, robots, expansions) * _numeric_value(code)
        for code in _codes(text)
    )