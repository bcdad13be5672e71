"""Day 16: the cheapest way through the reindeer maze."""

import heapq

# Headings in clockwise order, starting from east.
_HEADINGS = ((0, 1), (1, 0), (0, -1), (-1, 0))
_STEP_COST = 1
_TURNS = ((1, 1000), (3, 1000), (2, 2000))


def _parse(text):
    open_cells = set()
    start = end = None
    for row, line in enumerate(line for line in text.splitlines() if line):
        for col, char in enumerate(line):
            if char == "#":
                continue
            open_cells.add((row, col))
            if char == "S":
                start = (row, col)
            elif char == "E":
                end = (row, col)
    if start is None:
        raise ValueError("the maze shows no start tile")
    if end is None:
        raise ValueError("the maze shows no end tile")
    return open_cells, start, end


def _moves(state, open_cells):
    """Yield (cost, next_state) for every move out of a state."""
    (row, col), heading = state
    dy, dx = _HEADINGS[heading]
    ahead = (row + dy, col + dx)
    if ahead in open_cells:
        yield _STEP_COST, (ahead, heading)
    for turn, cost in _TURNS:
        yield cost, ((row, col), (heading + turn) % 4)


def _costs(open_cells, start):
    """Lowest cost of every reachable (cell, heading), starting east-facing."""
    costs = {}
    heap = [(0, start, 0)]
    while heap:
        cost, cell, heading = heapq.heappop(heap)
        state = (cell, heading)
        if state in costs:
            continue
        costs[state] = cost
        for step, following in _moves(state, open_cells):
            if following not in costs:
                heapq.heappush(heap, (cost + step, following[0], following[1]))
    return costs


def _best(costs, end):
    reached = [costs[(end, heading)] for heading in range(4) if (end, heading) in costs]
    if not reached:
        raise ValueError("the end tile cannot be reached")
    return min(reached)


def part_one(text):
    """Lowest score a reindeer can get walking from S to E."""
    open_cells, start, end = _parse(text)
    return _best(_costs(open_cells, start), end)


def part_two(text):
    """Number of tiles that lie on at least one best path."""
    open_cells, start, end = _parse(text)
    costs = _costs(open_cells, start)
    best = _best(costs, end)
    frontier = [(end, heading) for heading in range(4) if costs.get((end, heading)) == best]
    seen = set(frontier)
    while frontier:
        state = frontier.pop()
        (row, col), heading = state
        cost = costs[state]
        dy, dx = _HEADINGS[heading]
        predecessors = [(_STEP_COST, ((row - dy, col - dx), heading))]
        predecessors += [
            (turn_cost, ((row, col), (heading - turn) % 4)) for turn, turn_cost in _TURNS
        ]
        for step, previous in predecessors:
            if previous not in seen and costs.get(previous) == cost - step:
                seen.add(previous)
                frontier.append(previous)
    return len({cell for cell, _ in seen})