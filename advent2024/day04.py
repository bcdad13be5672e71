"""Day 4: word search for XMAS."""

_WORD = "XMAS"
_DIRECTIONS = [
    (dy, dx) for dy in (-1, 0, 1) for dx in (-1, 0, 1) if (dy, dx) != (0, 0)
]


def _grid(text):
    lines = [line for line in text.splitlines() if line]
    return {
        (row, col): char
        for row, line in enumerate(lines)
        for col, char in enumerate(line)
    }


def part_one(text):
    """Occurrences of XMAS in any of the eight directions."""
    grid = _grid(text)
    return sum(
        all(
            grid.get((row + dy * step, col + dx * step)) == char
            for step, char in enumerate(_WORD)
        )
        for row, col in grid
        for dy, dx in _DIRECTIONS
    )


def part_two(text):
    """Occurrences of two MAS words crossing diagonally in an X."""
    grid = _grid(text)
    pair = {"M", "S"}
    count = 0
    for (row, col), char in grid.items():
        if char != "A":
            continue
        falling = {grid.get((row - 1, col - 1)), grid.get((row + 1, col + 1))}
        rising = {grid.get((row - 1, col + 1)), grid.get((row + 1, col - 1))}
        if falling == pair and rising == pair:
            count += 1
    return count