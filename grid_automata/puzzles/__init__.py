"""Puzzle solvers built on the grid and automaton engines.

Each module exposes ``part1(lines)`` and ``part2(lines)`` returning an int.
"""

from grid_automata.puzzles import hex_floor, navigation, pocket_cubes, seating, toboggan

PUZZLES = {
    "toboggan": toboggan,
    "seating": seating,
    "navigation": navigation,
    "pocket_cubes": pocket_cubes,
    "hex_floor": hex_floor,
}
"""Puzzle name -> solver module, in registration order."""

__all__ = ["PUZZLES", "hex_floor", "navigation", "pocket_cubes", "seating", "toboggan"]
