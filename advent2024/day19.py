"""Day 19: arranging towels into requested stripe designs."""


def _parse(text):
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("the input lists no towel patterns")
    patterns = [pattern for pattern in lines[0].split(", ") if pattern]
    return patterns, lines[1:]


def _arrangements(design, patterns):
    """Number of ways the design can be built from the patterns."""
    ways = [0] * (len(design) + 1)
    ways[0] = 1
    for start in range(len(design)):
        if not ways[start]:
            continue
        for pattern in patterns:
            if design.startswith(pattern, start):
                ways[start + len(pattern)] += ways[start]
    return ways[len(design)]


def part_one(text):
    """Number of designs that can be made at all."""
    patterns, designs = _parse(text)
    return sum(_arrangements(design, patterns) > 0 for design in designs)


def part_two(text):
    """Total number of ways to make every design."""
    patterns, designs = _parse(text)
    return sum(_arrangements(design, patterns) for design in designs)