"""Solutions to the 2024 Advent of Code puzzles, one module per day, with a command line."""

__version__ = "0.1.0"