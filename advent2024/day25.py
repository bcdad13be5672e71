"""Day 25: which keys fit which locks."""

import re
from itertools import takewhile


def _height(rows, col):
    return sum(1 for _ in takewhile(lambda row: row[col] == "#", rows))


def _schematics(text):
    locks, keys = [], []
    space = None
    for block in re.split(r"\n\s*\n", text.strip()):
        rows = [line.strip() for line in block.splitlines() if line.strip()]
        if not rows:
            continue
        width = len(rows[0])
        if len(rows) < 2 or any(len(row) != width for row in rows):
            raise ValueError(f"a schematic must be a rectangle of rows: {block!r}")
        if space is None:
            space = len(rows) - 2
        elif space != len(rows) - 2:
            raise ValueError("schematics differ in height")
        if set(rows[0]) == {"#"}:
            locks.append(tuple(_height(rows[1:], col) for col in range(width)))
        elif set(rows[-1]) == {"#"}:
            keys.append(tuple(_height(rows[-2::-1], col) for col in range(width)))
        else:
            raise ValueError(f"schematic is neither a lock nor a key: {block!r}")
    return locks, keys, space


def part_one(text):
    """Number of lock and key pairs that fit together without overlapping."""
    locks, keys, space = _schematics(text)
    return sum(
        len(lock) == len(key) and all(pin + cut <= space for pin, cut in zip(lock, key))
        for lock in locks
        for key in keys
    )