"""Day 22: monkey market secret numbers and banana prices."""

from collections import Counter
from itertools import pairwise

_MODULUS = 16777216
_ROUNDS = 2000


def next_secret(value):
    """The secret number that follows the given one."""
    value = (value ^ (value * 64)) % _MODULUS
    value = (value ^ (value // 32)) % _MODULUS
    return (value ^ (value * 2048)) % _MODULUS


def _seeds(text):
    return [int(line) for line in text.splitlines() if line.strip()]


def _secrets(seed):
    yield seed
    value = seed
    for _ in range(_ROUNDS):
        value = next_secret(value)
        yield value


def part_one(text):
    """Sum of each buyer's 2000th secret number."""
    total = 0
    for seed in _seeds(text):
        *_, last = _secrets(seed)
        total += last
    return total


def part_two(text):
    """Most bananas obtainable with one sequence of four price changes."""
    totals = Counter()
    for seed in _seeds(text):
        prices = [secret % 10 for secret in _secrets(seed)]
        changes = [after - before for before, after in pairwise(prices)]
        seen = set()
        for end in range(3, len(changes)):
            key = tuple(changes[end - 3:end + 1])
            if key in seen:
                continue
            seen.add(key)
            totals[key] += prices[end + 1]
    return max(totals.values(), default=0)