"""Day 7: calibration equations built from +, * and concatenation."""


def can_reach(values, target, concat=False):
    """Whether the values, combined left to right, can produce the target.

    Operators are addition and multiplication, plus digit concatenation
    when ``concat`` is true. The search works backwards from the target.
    """
    if not values:
        raise ValueError("an equation needs at least one value")

    def search(index, goal):
        value = values[index]
        if index == 0:
            return value == goal
        if value and goal % value == 0 and search(index - 1, goal // value):
            return True
        if goal < value:
            return False
        if concat:
            modulus = 10 ** len(str(value))
            if goal % modulus == value and search(index - 1, (goal - value) // modulus):
                return True
        return search(index - 1, goal - value)

    return search(len(values) - 1, target)


def _equations(text):
    for line in text.splitlines():
        if not line.strip():
            continue
        head, _, tail = line.partition(": ")
        values = []
        for token in tail.split(" "):
            try:
                values.append(int(token))
            except ValueError:
                continue
        yield int(head), values


def part_one(text):
    """Sum of targets reachable with addition and multiplication."""
    return sum(
        target for target, values in _equations(text) if can_reach(values, target, False)
    )


def part_two(text):
    """Sum of targets reachable when concatenation is also allowed."""
    return sum(
        target for target, values in _equations(text) if can_reach(values, target, True)
    )