"""Day 5: page ordering rules for safety manual updates."""

from collections import Counter, deque
from itertools import combinations


def _parse(text):
    rules = set()
    updates = []
    lines = iter(text.splitlines())
    for line in lines:
        if not line.strip():
            break
        before, after = (int(page) for page in line.split("|"))
        rules.add((before, after))
    for line in lines:
        if line.strip():
            updates.append([int(page) for page in line.split(",")])
    return rules, updates


def _in_order(update, rules):
    return not any(
        (later, earlier) in rules for earlier, later in combinations(update, 2)
    )


def _middle(pages):
    if not pages:
        raise ValueError("an update must hold at least one page")
    return pages[(len(pages) - 1) // 2]


def _reorder(update, rules):
    """Topologically sort the pages of an update using the applicable rules."""
    pages = set(update)
    successors = {
        page: sorted(after for before, after in rules if before == page and after in pages)
        for page in pages
    }
    indegree = Counter(after for page in pages for after in successors[page])
    queue = deque(sorted(page for page in pages if indegree[page] == 0))
    order = []
    while queue:
        page = queue.popleft()
        order.append(page)
        for after in successors[page]:
            indegree[after] -= 1
            if indegree[after] == 0:
                queue.append(after)
    return order


def part_one(text):
    """Sum of the middle pages of updates already in the right order."""
    rules, updates = _parse(text)
    return sum(_middle(update) for update in updates if _in_order(update, rules))


def part_two(text):
    """Sum of the middle pages of the misordered updates once reordered."""
    rules, updates = _parse(text)
    return sum(
        _middle(_reorder(update, rules))
        for update in updates
        if not _in_order(update, rules)
    )