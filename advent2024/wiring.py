"""Day 24, part two: spotting miswired gates in a ripple-carry adder."""

import re
from collections import Counter
from dataclasses import dataclass

_GATE = re.compile(r"(\w+) (AND|OR|XOR) (\w+) -> (\w+)")
_BIT = re.compile(r"([xyz])(\d+)")


@dataclass(frozen=True)
class _Gate:
    left: str
    operation: str
    right: str
    output: str


def _bit(name):
    """(letter, index) for an x, y or z wire, None for an internal wire."""
    match = _BIT.fullmatch(name)
    if match is None:
        return None
    return match.group(1), int(match.group(2))


def _gates(text):
    gates = []
    for line in text.splitlines():
        line = line.strip()
        if "->" not in line:
            continue
        match = _GATE.fullmatch(line)
        if match is None:
            raise ValueError(f"cannot read gate from {line!r}")
        gates.append(_Gate(*match.groups()))
    return gates


def suspicious_wires(text):
    """Sorted distinct names of wires that break the adder's expected shape.

    Every z output except the final carry must come from an XOR gate; the
    XOR of bit i's inputs must feed one AND and one XOR producing z_i; the
    AND of bit i's inputs must feed exactly one OR. Bit 0 is exempt from
    the last two rules.
    """
    gates = _gates(text)
    and_outputs, xor_outputs = {}, {}
    width = 0
    for gate in gates:
        for name in (gate.left, gate.right):
            bit = _bit(name)
            if bit is not None and bit[0] == "x":
                width = max(width, bit[1] + 1)
        first = _bit(gate.left)
        if first is not None:
            if gate.operation == "AND":
                and_outputs[first[1]] = gate.output
            elif gate.operation == "XOR":
                xor_outputs[first[1]] = gate.output

    suspects = set()
    for gate in gates:
        bit = _bit(gate.output)
        if bit is not None and bit[0] == "z" and gate.operation != "XOR" and bit[1] != width:
            suspects.add(gate.output)

    def users(wire):
        return [gate for gate in gates if wire in (gate.left, gate.right)]

    for index in range(width):
        if index not in xor_outputs:
            raise ValueError(f"no XOR gate combines the inputs of bit {index}")
        if index not in and_outputs:
            raise ValueError(f"no AND gate combines the inputs of bit {index}")
        if index == 0:
            continue

        wire = xor_outputs[index]
        readers = users(wire)
        counts = Counter(gate.operation for gate in readers)
        good = all(
            gate.operation != "XOR" or _bit(gate.output) == ("z", index)
            for gate in readers
        ) and (counts["AND"], counts["OR"], counts["XOR"]) == (1, 0, 1)
        if not good:
            suspects.add(wire)

        wire = and_outputs[index]
        counts = Counter(gate.operation for gate in users(wire))
        if (counts["AND"], counts["OR"], counts["XOR"]) != (0, 1, 0):
            suspects.add(wire)

    return sorted(suspects)


def part_two(text):
    """Comma-joined sorted names of the suspicious wires."""
    return ",".join(suspicious_wires(text))