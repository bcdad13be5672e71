"""Day 1: comparing two columns of location IDs."""

from collections import Counter


def _columns(text):
    """Split the puzzle input into its left and right columns of integers."""
    left, right = [], []
    for line in text.splitlines():
        if not line.strip():
            continue
        fields = line.split()
        if len(fields) != 2:
            raise ValueError(f"expected two numbers on a line, got {line!r}")
        first, second = (int(field) for field in fields)
        left.append(first)
        right.append(second)
    return left, right


def part_one(text):
    """Total distance between the sorted columns, paired off in order."""
    left, right = _columns(text)
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def part_two(text):
    """Similarity score: each left value times its count in the right column."""
    left, right = _columns(text)
    counts = Counter(right)
    return sum(value * counts[value] for value in left)