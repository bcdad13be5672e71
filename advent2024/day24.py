"""Day 24: simulating a circuit of logic gates."""

import re

_INITIAL = re.compile(r"(\w+):\s*([01])")
_GATE = re.compile(r"(\w+) (AND|OR|XOR) (\w+) -> (\w+)")
_OPERATIONS = {
    "AND": lambda left, right: left & right,
    "OR": lambda left, right: left | right,
    "XOR": lambda left, right: left ^ right,
}


def _parse(text):
    values = {}
    gates = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if "->" in line:
            match = _GATE.fullmatch(line)
            if match is None:
                raise ValueError(f"cannot read gate from {line!r}")
            gates.append(match.groups())
        else:
            match = _INITIAL.fullmatch(line)
            if match is None:
                raise ValueError(f"cannot read wire value from {line!r}")
            values[match.group(1)] = int(match.group(2))
    return values, gates


def _simulate(values, gates):
    """Evaluate every gate whose inputs become known."""
    values = dict(values)
    pending = list(gates)
    while pending:
        waiting = []
        for left, operation, right, output in pending:
            if left in values and right in values:
                values[output] = _OPERATIONS[operation](values[left], values[right])
            else:
                waiting.append((left, operation, right, output))
        if len(waiting) == len(pending):
            break
        pending = waiting
    return values


def part_one(text):
    """Number formed by the z wires, z00 being the lowest bit."""
    values, gates = _parse(text)
    values = _simulate(values, gates)
    bits = [values[name] for name in sorted(name for name in values if name.startswith("z"))]
    return sum(bit << position for position, bit in enumerate(bits))