"""Seat-layout automaton on a dense grid.

Empty seats fill when no occupied seat is in view; occupied seats empty when
too many are. The layout is stepped until it stops changing and the occupied
seats are counted.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from grid_automata.config.types import Neighborhood, SeatingConfig
from grid_automata.domain.errors import InvalidInputError
from grid_automata.domain.grid import DenseGrid
from grid_automata.domain.neighbors import DIRECTIONS_8
from grid_automata.domain.vector import Vector
from grid_automata.simulation.dense import Transition, stabilize


class Tile(Enum):
    FLOOR = "."
    EMPTY = "L"
    OCCUPIED = "#"


def parse_layout(lines: Sequence[str]) -> DenseGrid[Tile]:
    rows: list[list[Tile]] = []
    for y, line in enumerate(lines):
        try:
            rows.append([Tile(char) for char in line.strip()])
        except ValueError as exc:
            raise InvalidInputError(f"unrecognised tile on line {y}: {line!r}") from exc
    return DenseGrid.from_rows(rows)


def count_adjacent_occupied(grid: DenseGrid[Tile], point: Vector) -> int:
    return sum(1 for tile in grid.neighbors_8(point) if tile is Tile.OCCUPIED)


def count_visible_occupied(grid: DenseGrid[Tile], point: Vector) -> int:
    """Count directions whose first visible seat is occupied."""
    count = 0
    for offset in DIRECTIONS_8:
        ray = grid.ray(point, offset)
        next(ray)  # the ray starts at point itself
        first_seat = next((tile for _, tile in ray if tile is not Tile.FLOOR), None)
        if first_seat is Tile.OCCUPIED:
            count += 1
    return count


def seating_transition(config: SeatingConfig) -> Transition[Tile]:
    counter = (
        count_visible_occupied
        if config.neighborhood is Neighborhood.VISIBLE
        else count_adjacent_occupied
    )

    def transition(grid: DenseGrid[Tile], point: Vector, tile: Tile) -> Tile:
        if tile is Tile.EMPTY and counter(grid, point) == 0:
            return Tile.OCCUPIED
        if tile is Tile.OCCUPIED and counter(grid, point) >= config.crowd_threshold:
            return Tile.EMPTY
        return tile

    return transition


def settle(grid: DenseGrid[Tile], config: SeatingConfig) -> DenseGrid[Tile]:
    """Return the layout once seating stops changing."""
    result = stabilize(grid, seating_transition(config), max_generations=config.max_generations)
    return result.grid


def part1(lines: Sequence[str]) -> int:
    final = settle(parse_layout(lines), SeatingConfig())
    return final.count(Tile.OCCUPIED)


def part2(lines: Sequence[str]) -> int:
    final = settle(parse_layout(lines), SeatingConfig.visible())
    return final.count(Tile.OCCUPIED)
