"""Neighbor-offset tables shared by the dense grid and the sparse automaton.

The enumeration order of each table is fixed; neighbor lookups yield results
in exactly this order.

The hexagonal grid is represented on a skewed square lattice, using six of
the eight Moore offsets::

         -1   0   +1
       +----+----+----+
    -1 | NW | NE |    |
       +----+----+----+
     0 | W  | X  | E  |
       +----+----+----+
    +1 |    | SW | SE |
       +----+----+----+
"""

from __future__ import annotations

import itertools
import re
from collections.abc import Iterable
from enum import Enum
from functools import lru_cache

from grid_automata.domain.errors import InvalidInputError
from grid_automata.domain.vector import Vector

DIRECTIONS_4: tuple[Vector, ...] = (
    Vector.of(0, -1),
    Vector.of(1, 0),
    Vector.of(0, 1),
    Vector.of(-1, 0),
)
"""Orthogonal 2D offsets: north, east, south, west."""

DIRECTIONS_8: tuple[Vector, ...] = (
    Vector.of(-1, -1),
    Vector.of(0, -1),
    Vector.of(1, -1),
    Vector.of(-1, 0),
    Vector.of(1, 0),
    Vector.of(-1, 1),
    Vector.of(0, 1),
    Vector.of(1, 1),
)
"""Orthogonal and diagonal 2D offsets, row by row from the north-west."""


@lru_cache(maxsize=None)
def moore_offsets(arity: int) -> tuple[Vector, ...]:
    """Return the ``3**arity - 1`` offsets of the Moore neighborhood."""
    if arity < 1:
        raise ValueError("arity must be >= 1")
    return tuple(
        Vector(delta)
        for delta in itertools.product((-1, 0, 1), repeat=arity)
        if any(delta)
    )


class HexDirection(Enum):
    """Six hex-grid directions with their skewed-lattice offsets."""

    E = "e"
    SE = "se"
    SW = "sw"
    W = "w"
    NW = "nw"
    NE = "ne"

    @property
    def offset(self) -> Vector:
        return _HEX_OFFSET_BY_DIRECTION[self]


_HEX_OFFSET_BY_DIRECTION: dict[HexDirection, Vector] = {
    HexDirection.E: Vector.of(1, 0),
    HexDirection.SE: Vector.of(1, 1),
    HexDirection.SW: Vector.of(0, 1),
    HexDirection.W: Vector.of(-1, 0),
    HexDirection.NW: Vector.of(-1, -1),
    HexDirection.NE: Vector.of(0, -1),
}

HEX_OFFSETS: tuple[Vector, ...] = tuple(d.offset for d in HexDirection)
"""Hex neighbor offsets in E, SE, SW, W, NW, NE order."""

# Two-letter tokens first so "se" is never read as "s" + "e".
_HEX_TOKEN_RE = re.compile(r"se|sw|nw|ne|e|w")


def parse_hex_path(text: str) -> list[HexDirection]:
    """Tokenize a run-together direction string such as ``"esenee"``."""
    text = text.strip()
    directions: list[HexDirection] = []
    position = 0
    while position < len(text):
        match = _HEX_TOKEN_RE.match(text, position)
        if match is None:
            raise InvalidInputError(
                f"unrecognised direction at offset {position} in {text!r}"
            )
        directions.append(HexDirection(match.group()))
        position = match.end()
    return directions


def walk_hex_path(directions: Iterable[HexDirection], start: Vector | None = None) -> Vector:
    """Return the tile reached by following *directions* from *start*."""
    position = start if start is not None else Vector.zeros(2)
    for direction in directions:
        position = position + direction.offset
    return position
