"""Domain layer: coordinate vectors, bounded extents, dense grids, neighbor tables."""

from grid_automata.domain.errors import InvalidInputError
from grid_automata.domain.extent import BoundedExtent
from grid_automata.domain.grid import Cell, DenseGrid
from grid_automata.domain.neighbors import (
    DIRECTIONS_4,
    DIRECTIONS_8,
    HEX_OFFSETS,
    HexDirection,
    moore_offsets,
    parse_hex_path,
    walk_hex_path,
)
from grid_automata.domain.vector import Vector

__all__ = [
    "BoundedExtent",
    "Cell",
    "DIRECTIONS_4",
    "DIRECTIONS_8",
    "DenseGrid",
    "HEX_OFFSETS",
    "HexDirection",
    "InvalidInputError",
    "Vector",
    "moore_offsets",
    "parse_hex_path",
    "walk_hex_path",
]
