"""Dense, fixed-size grids addressed through a ``BoundedExtent``.

Cells are stored in a flat list indexed by the extent's row-major linear
index. Out-of-bounds lookups report an absent value (``None``) instead of
raising, so callers can tell "outside the grid" apart from any cell value.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

import numpy as np

from grid_automata.domain.errors import InvalidInputError
from grid_automata.domain.extent import BoundedExtent
from grid_automata.domain.neighbors import DIRECTIONS_4, DIRECTIONS_8
from grid_automata.domain.vector import Vector

T = TypeVar("T")


class Cell(Generic[T]):
    """Write-through handle to one grid cell, yielded by ``iter_cells_mut``."""

    __slots__ = ("_cells", "_index")

    def __init__(self, cells: list[T], index: int) -> None:
        self._cells = cells
        self._index = index

    @property
    def value(self) -> T:
        return self._cells[self._index]

    @value.setter
    def value(self, new_value: T) -> None:
        self._cells[self._index] = new_value


class DenseGrid(Generic[T]):
    """Fixed-size 2D grid of cell values."""

    def __init__(self, extent: BoundedExtent, cells: list[T]) -> None:
        if len(cells) != extent.area():
            raise ValueError(
                f"expected {extent.area()} cells for extent {extent.size!r}, got {len(cells)}"
            )
        self.extent = extent
        self._cells = cells

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]]) -> DenseGrid[T]:
        """Build a grid from equal-length rows; row ``y`` holds cells ``(0..w, y)``."""
        if not rows:
            raise InvalidInputError("cannot build a grid from zero rows")
        width = len(rows[0])
        if width == 0:
            raise InvalidInputError("cannot build a grid from empty rows")
        cells: list[T] = []
        for y, row in enumerate(rows):
            if len(row) != width:
                raise InvalidInputError(
                    f"row {y} has length {len(row)}, expected {width}"
                )
            cells.extend(row)
        return cls(BoundedExtent(Vector.of(width, len(rows))), cells)

    @property
    def size(self) -> Vector:
        return self.extent.size

    @property
    def width(self) -> int:
        return self.extent.size[0]

    @property
    def height(self) -> int:
        return self.extent.size[1]

    def __len__(self) -> int:
        return len(self._cells)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseGrid):
            return NotImplemented
        return self.extent == other.extent and self._cells == other._cells

    def __repr__(self) -> str:
        return f"DenseGrid(size={self.size!r})"

    def __contains__(self, point: object) -> bool:
        return point in self.extent

    def __getitem__(self, point: Vector) -> T:
        index = self.extent.linear_index(point)
        if index is None:
            raise KeyError(point)
        return self._cells[index]

    def get(self, point: Vector) -> T | None:
        index = self.extent.linear_index(point)
        if index is None:
            return None
        return self._cells[index]

    def set(self, point: Vector, value: T) -> bool:
        """Store *value* at *point*; returns False when *point* is out of bounds."""
        index = self.extent.linear_index(point)
        if index is None:
            return False
        self._cells[index] = value
        return True

    def iter_cells(self) -> Iterator[tuple[Vector, T]]:
        for point, value in zip(self.extent.iter_points(), self._cells):
            yield point, value

    def iter_cells_mut(self) -> Iterator[tuple[Vector, Cell[T]]]:
        for index, point in enumerate(self.extent.iter_points()):
            yield point, Cell(self._cells, index)

    def _lookup_offsets(self, point: Vector, offsets: Sequence[Vector]) -> Iterator[T | None]:
        if point.arity != self.extent.arity:
            return (None for _ in offsets)
        return (self.get(point + offset) for offset in offsets)

    def neighbors_4(self, point: Vector) -> Iterator[T | None]:
        """Orthogonal neighbors in N, E, S, W order; ``None`` outside the grid."""
        return self._lookup_offsets(point, DIRECTIONS_4)

    def neighbors_8(self, point: Vector) -> Iterator[T | None]:
        """All eight surrounding cells in ``DIRECTIONS_8`` order; ``None`` outside the grid."""
        return self._lookup_offsets(point, DIRECTIONS_8)

    def ray(self, point: Vector, offset: Vector) -> Iterator[tuple[Vector, T]]:
        """Walk from *point* (inclusive) in steps of *offset* until leaving the grid."""
        if not any(offset):
            raise ValueError("ray offset must be non-zero")
        return self._walk(point, offset)

    def _walk(self, point: Vector, offset: Vector) -> Iterator[tuple[Vector, T]]:
        current = point
        while True:
            index = self.extent.linear_index(current)
            if index is None:
                return
            yield current, self._cells[index]
            current = current + offset

    def count(self, value: T) -> int:
        return self._cells.count(value)

    def copy(self) -> DenseGrid[T]:
        """Independent clone; writes to the copy never show through to this grid."""
        return DenseGrid(self.extent, list(self._cells))

    def to_array(self) -> np.ndarray:
        """Return the cells as a ``(height, width)`` numpy array."""
        if self.extent.arity != 2:
            raise ValueError("to_array is only defined for 2D grids")
        array = np.empty((self.height, self.width), dtype=object)
        for point, value in self.iter_cells():
            array[point[1], point[0]] = value
        return array
