"""Centralized puzzle and simulation constants.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

ACTIVE_CHAR = "#"
"""Character marking an active cell in seed patterns and tree/occupied tiles."""

CUBE_GENERATIONS = 6
"""Boot-cycle length for the pocket-dimension cube automaton."""

HEX_GENERATIONS = 100
"""Number of daily flips simulated on the hex floor."""

ADJACENT_CROWD_THRESHOLD = 4
"""Occupied adjacent seats at which an occupied seat empties."""

VISIBLE_CROWD_THRESHOLD = 5
"""Occupied visible seats at which an occupied seat empties."""

TOBOGGAN_SLOPE: tuple[int, int] = (3, 1)
"""Default (right, down) slope for the single-slope tree count."""

TOBOGGAN_SLOPES: tuple[tuple[int, int], ...] = ((1, 1), (3, 1), (5, 1), (7, 1), (1, 2))
"""Slopes whose tree counts are multiplied together."""

INPUT_SUFFIX = "_input.txt"
"""File-name suffix for per-puzzle input files in the data directory."""
