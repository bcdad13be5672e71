"""Command line entry point: solve one part of one day's puzzle."""

import argparse
import sys
from pathlib import Path

from . import (
    day01, day02, day03, day04, day05, day06, day07, day08, day09, day10,
    day11, day12, day13, day14, day15, day16, day17, day18, day19, day20,
    day21, day22, day23, day24, day25, wiring,
)

_SOLVERS = {
    1: (day01.part_one, day01.part_two),
    2: (day02.part_one, day02.part_two),
    3: (day03.part_one, day03.part_two),
    4: (day04.part_one, day04.part_two),
    5: (day05.part_one, day05.part_two),
    6: (day06.part_one, day06.part_two),
    7: (day07.part_one, day07.part_two),
    8: (day08.part_one, day08.part_two),
    9: (day09.part_one, day09.part_two),
    10: (day10.part_one, day10.part_two),
    11: (day11.part_one, day11.part_two),
    12: (day12.part_one, day12.part_two),
    13: (day13.part_one, day13.part_two),
    14: (day14.part_one, day14.part_two),
    15: (day15.part_one, day15.part_two),
    16: (day16.part_one, day16.part_two),
    17: (day17.part_one, day17.part_two),
    18: (day18.part_one, day18.part_two),
    19: (day19.part_one, day19.part_two),
    20: (day20.part_one, day20.part_two),
    21: (day21.part_one, day21.part_two),
    22: (day22.part_one, day22.part_two),
    23: (day23.part_one, day23.part_two),
    24: (day24.part_one, wiring.part_two),
    25: (day25.part_one,),
}


def _format(answer):
    if answer is None:
        return "no answer"
    if isinstance(answer, tuple):
        return ",".join(str(value) for value in answer)
    return str(answer)


def main(argv=None):
    """Read a day's input, solve the requested part and print the answer."""
    parser = argparse.ArgumentParser(prog="advent2024", description="Solve a puzzle of one day.")
    parser.add_argument("day", type=int, choices=sorted(_SOLVERS))
    parser.add_argument("part", type=int, choices=(1, 2))
    parser.add_argument(
        "input", nargs="?", type=Path, help="puzzle input (default: day<N>.txt)"
    )
    args = parser.parse_args(argv)

    parts = _SOLVERS[args.day]
    if args.part > len(parts):
        parser.error(f"day {args.day} has no part {args.part}")
    path = args.input or Path(f"day{args.day}.txt")
    try:
        text = path.read_text()
    except OSError as error:
        parser.error(f"cannot read {path}: {error}")

    try:
        answer = parts[args.part - 1](text)
    except ValueError as error:
        print(f"advent2024: {error}", file=sys.stderr)
        return 1
    print(_format(answer))
    return 0


if __name__ == "__main__":
    sys.exit(main())