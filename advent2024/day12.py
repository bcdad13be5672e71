"""Day 12: fencing garden regions by perimeter and by number of sides."""

from collections import deque

_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _regions(text):
    """Yield each connected region of equal plants as a set of cells."""
    grid = {
        (row, col): char
        for row, line in enumerate(line for line in text.splitlines() if line)
        for col, char in enumerate(line)
    }
    seen = set()
    for cell, plant in grid.items():
        if cell in seen:
            continue
        seen.add(cell)
        region = {cell}
        queue = deque([cell])
        while queue:
            row, col = queue.popleft()
            for dy, dx in _STEPS:
                neighbour = (row + dy, col + dx)
                if neighbour not in seen and grid.get(neighbour) == plant:
                    seen.add(neighbour)
                    region.add(neighbour)
                    queue.append(neighbour)
        yield region


def _fences(region):
    """Yield (cell, direction) for every fence segment around the region."""
    for row, col in region:
        for dy, dx in _STEPS:
            if (row + dy, col + dx) not in region:
                yield (row, col), (dy, dx)


def _sides(region):
    count = 0
    for (row, col), (dy, dx) in _fences(region):
        previous = (row - abs(dx), col - abs(dy))
        continued = previous in region and (previous[0] + dy, previous[1] + dx) not in region
        if not continued:
            count += 1
    return count


def part_one(text):
    """Total price: area times perimeter, summed over regions."""
    return sum(
        len(region) * sum(1 for _ in _fences(region)) for region in _regions(text)
    )


def part_two(text):
    """Discounted price: area times number of sides, summed over regions."""
    return sum(len(region) * _sides(region) for region in _regions(text))