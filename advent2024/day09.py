"""Day 9: compacting an amphipod disk map and computing its checksum."""

import string
from dataclasses import dataclass


@dataclass
class _Span:
    start: int
    length: int


def _digits(text):
    text = text.strip()
    if any(char not in string.digits for char in text):
        raise ValueError("a disk map holds only decimal digits")
    return [int(char) for char in text]


def part_one(text):
    """Checksum after moving file blocks one at a time into the leftmost gaps."""
    blocks = []
    for index, length in enumerate(_digits(text)):
        blocks.extend([index // 2 if index % 2 == 0 else None] * length)
    files = [block for block in blocks if block is not None]
    tail = reversed(files)
    total = 0
    for position, block in enumerate(blocks[: len(files)]):
        if block is None:
            block = next(tail)
        total += position * block
    return total


def part_two(text):
    """Checksum after moving whole files, highest id first, to the leftmost fit."""
    files, frees = [], []
    position = 0
    for index, length in enumerate(_digits(text)):
        (files if index % 2 == 0 else frees).append(_Span(position, length))
        position += length
    for file in reversed(files):
        for free in frees:
            if free.start > file.start:
                break
            if free.length >= file.length:
                file.start = free.start
                free.start += file.length
                free.length -= file.length
                break
    return sum(
        file_id * sum(range(file.start, file.start + file.length))
        for file_id, file in enumerate(files)
    )