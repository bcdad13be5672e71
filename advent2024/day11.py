"""Day 11: counting stones that split and change with every blink."""

from collections import Counter


def blink(stone):
    """The stones that one stone turns into after a single blink."""
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return (int(digits[:half]), int(digits[half:]))
    return (stone * 2024,)


def count_stones(stones, blinks):
    """Number of stones after the given number of blinks."""
    counts = Counter(stones)
    for _ in range(blinks):
        following = Counter()
        for stone, amount in counts.items():
            for result in blink(stone):
                following[result] += amount
        counts = following
    return sum(counts.values())


def _stones(text):
    stones = []
    for token in text.split():
        try:
            value = int(token)
        except ValueError:
            continue
        if value >= 0:
            stones.append(value)
    return stones


def part_one(text):
    """Stones after 25 blinks."""
    return count_stones(_stones(text), 25)


def part_two(text):
    """Stones after 75 blinks."""
    return count_stones(_stones(text), 75)