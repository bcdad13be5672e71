"""Day 23: finding sets of connected computers at a LAN party."""

from collections import defaultdict


def _graph(text):
    graph = defaultdict(set)
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        names = line.split("-")
        if len(names) != 2 or not all(names):
            raise ValueError(f"expected a connection like 'ab-cd', got {line!r}")
        first, second = names
        graph[first].add(second)
        graph[second].add(first)
    return graph


def part_one(text):
    """Number of three-computer cliques with a computer whose name starts with t."""
    graph = _graph(text)
    triangles = {
        frozenset((first, second, third))
        for first, neighbours in graph.items()
        for second in neighbours
        for third in neighbours & graph[second]
    }
    return sum(
        any(name.startswith("t") for name in triangle) for triangle in triangles
    )


def _maximal_cliques(graph):
    def expand(clique, candidates, excluded):
        if not candidates and not excluded:
            yield clique
            return
        pivot = max(candidates | excluded, key=lambda node: len(graph[node] & candidates))
        for node in sorted(candidates - graph[pivot]):
            yield from expand(
                clique | {node}, candidates & graph[node], excluded & graph[node]
            )
            candidates = candidates - {node}
            excluded = excluded | {node}

    yield from expand(frozenset(), set(graph), set())


def part_two(text):
    """Password: sorted names of the largest clique, joined by commas."""
    graph = _graph(text)
    if not graph:
        raise ValueError("the network has no connections")
    best = min(
        _maximal_cliques(graph), key=lambda clique: (-len(clique), sorted(clique))
    )
    return ",".join(sorted(best))