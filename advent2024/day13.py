"""Day 13: claw machines driven by two buttons."""

import re
from dataclasses import dataclass

_PRIZE_OFFSET = 10_000_000_000_000
_SEARCH_LIMIT = 100
_LABELS = ("Button A", "Button B", "Prize")
_LINE = re.compile(r"(Button A|Button B|Prize): X=?([+-]?\d+), Y=?([+-]?\d+)")


@dataclass(frozen=True)
class Machine:
    """Offsets of the two buttons and the position of the prize."""

    a: tuple
    b: tuple
    prize: tuple


def parse_machines(text):
    """Read every machine description; blocks are separated by blank lines."""
    machines = []
    for block in re.split(r"\n\s*\n", text.strip()):
        lines = [line.strip() for line in block.splitlines() if line.strip()]
        if not lines:
            continue
        if len(lines) != len(_LABELS):
            raise ValueError(f"a machine is described by three lines, got {block!r}")
        coordinates = []
        for line, label in zip(lines, _LABELS):
            match = _LINE.fullmatch(line)
            if match is None or match.group(1) != label:
                raise ValueError(f"expected a {label} line, got {line!r}")
            coordinates.append((int(match.group(2)), int(match.group(3))))
        a, b, prize = coordinates
        if min(a + b) <= 0:
            raise ValueError(f"button offsets must be positive: {block!r}")
        machines.append(Machine(a, b, prize))
    return machines


def _cheapest_by_search(machine):
    """Fewest tokens with at most a hundred presses of each button, or None."""
    (ax, ay), (bx, by), (px, py) = machine.a, machine.b, machine.prize
    best = None
    for b_presses in range(_SEARCH_LIMIT + 1):
        rest_x, rest_y = px - b_presses * bx, py - b_presses * by
        if rest_x < 0 or rest_y < 0:
            continue
        a_presses, remainder_x = divmod(rest_x, ax)
        a_check, remainder_y = divmod(rest_y, ay)
        if remainder_x or remainder_y or a_presses != a_check:
            continue
        if a_presses > _SEARCH_LIMIT:
            continue
        cost = 3 * a_presses + b_presses
        if best is None or cost < best:
            best = cost
    return best


def _cheapest_by_algebra(machine, offset):
    """Tokens for the unique non-negative integer solution, or None."""
    (ax, ay), (bx, by), (px, py) = machine.a, machine.b, machine.prize
    px, py = px + offset, py + offset
    determinant = ax * by - ay * bx
    if determinant == 0:
        return None
    a_presses, remainder_a = divmod(px * by - py * bx, determinant)
    b_presses, remainder_b = divmod(py * ax - px * ay, determinant)
    if remainder_a or remainder_b or a_presses < 0 or b_presses < 0:
        return None
    return 3 * a_presses + b_presses


def part_one(text):
    """Fewest tokens to win every winnable prize, pressing each button at most 100 times."""
    costs = (_cheapest_by_search(machine) for machine in parse_machines(text))
    return sum(cost for cost in costs if cost is not None)


def part_two(text):
    """Fewest tokens once every prize lies ten trillion further along each axis."""
    costs = (
        _cheapest_by_algebra(machine, _PRIZE_OFFSET) for machine in parse_machines(text)
    )
    return sum(cost for cost in costs if cost is not None)