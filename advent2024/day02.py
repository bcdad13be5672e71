"""Day 2: checking reactor reports for safe level changes."""

from itertools import pairwise


def _levels(line):
    """Integers of a report line; tokens that are not integers are dropped."""
    levels = []
    for token in line.split(" "):
        try:
            levels.append(int(token))
        except ValueError:
            continue
    return levels


def _reports(text):
    return (_levels(line) for line in text.splitlines() if line.strip())


def first_violation(levels):
    """Index of the first level that breaks the safety rules, or None if safe.

    A report is safe when it is strictly increasing or strictly decreasing
    and neighbouring levels differ by one to three.
    """
    increasing = decreasing = True
    for index, (previous, current) in enumerate(pairwise(levels), start=1):
        if current >= previous:
            decreasing = False
        else:
            increasing = False
        if not 1 <= abs(current - previous) <= 3 or not (increasing or decreasing):
            return index
    return None


def _safe_with_dampener(levels):
    index = first_violation(levels)
    if index is None:
        return True
    candidates = [index, index - 1]
    if index > 1:
        candidates.append(index - 2)
    return any(
        first_violation(levels[:k] + levels[k + 1:]) is None for k in candidates
    )


def part_one(text):
    """Number of safe reports."""
    return sum(first_violation(levels) is None for levels in _reports(text))


def part_two(text):
    """Number of reports that are safe once at most one level is removed."""
    return sum(_safe_with_dampener(levels) for levels in _reports(text))