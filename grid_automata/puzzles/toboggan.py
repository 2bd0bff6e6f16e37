"""Tree counting along straight slopes through a horizontally repeating map."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

from grid_automata.config.constants import TOBOGGAN_SLOPE
from grid_automata.config.types import TobogganConfig
from grid_automata.domain.errors import InvalidInputError
from grid_automata.domain.grid import DenseGrid
from grid_automata.domain.vector import Vector

OPEN = "."
TREE = "#"


def parse_map(lines: Sequence[str]) -> DenseGrid[bool]:
    """Parse a ``.``/``#`` map into a grid where True marks a tree."""
    rows: list[list[bool]] = []
    for y, line in enumerate(lines):
        line = line.strip()
        if set(line) - {OPEN, TREE}:
            raise InvalidInputError(f"unexpected character on line {y}: {line!r}")
        rows.append([char == TREE for char in line])
    return DenseGrid.from_rows(rows)


def traverse(grid: DenseGrid[bool], slope: Vector) -> Iterator[bool]:
    """Yield the tiles visited from the top-left corner until falling off the bottom."""
    if slope[1] < 1:
        raise ValueError("slope must move down at least one row per step")
    point = Vector.zeros(2)
    while point in grid:
        yield grid[point]
        point = grid.extent.wrap_first_axis(point + slope)


def count_trees(grid: DenseGrid[bool], slope: Vector) -> int:
    return sum(1 for tree in traverse(grid, slope) if tree)


def part1(lines: Sequence[str]) -> int:
    return count_trees(parse_map(lines), Vector(TOBOGGAN_SLOPE))


def part2(lines: Sequence[str], config: TobogganConfig | None = None) -> int:
    config = config or TobogganConfig()
    grid = parse_map(lines)
    return math.prod(count_trees(grid, Vector(slope)) for slope in config.slopes)
