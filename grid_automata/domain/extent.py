"""Bounded hyper-rectangular index spaces.

A ``BoundedExtent`` of size ``(w, h, ...)`` contains the points with
``0 <= p[i] < size[i]`` on every axis, and maps them one-to-one onto dense
linear indices in row-major order (axis 0 varies fastest, so a 2D point maps
to ``y * w + x``).
"""

from __future__ import annotations

import itertools
import math
from collections.abc import Iterator
from dataclasses import dataclass

from grid_automata.domain.vector import Vector


@dataclass(frozen=True)
class BoundedExtent:
    """Index space ``[0, size[i])`` on every axis."""

    size: Vector

    def __post_init__(self) -> None:
        if any(c < 0 for c in self.size):
            raise ValueError(f"extent size must be non-negative, got {self.size!r}")

    @property
    def arity(self) -> int:
        return self.size.arity

    def area(self) -> int:
        return math.prod(self.size)

    def contains(self, point: Vector) -> bool:
        if point.arity != self.size.arity:
            return False
        return all(0 <= c < s for c, s in zip(point, self.size))

    def __contains__(self, point: object) -> bool:
        return isinstance(point, Vector) and self.contains(point)

    def linear_index(self, point: Vector) -> int | None:
        """Row-major index of *point*, or ``None`` if it lies outside the extent."""
        if not self.contains(point):
            return None
        index = 0
        stride = 1
        for c, s in zip(point, self.size):
            index += c * stride
            stride *= s
        return index

    def point_at(self, index: int) -> Vector | None:
        """Inverse of :meth:`linear_index`."""
        if not 0 <= index < self.area():
            return None
        components = []
        for s in self.size:
            index, c = divmod(index, s)
            components.append(c)
        return Vector(tuple(components))

    def wrap_first_axis(self, point: Vector) -> Vector:
        """Reduce axis 0 modulo the extent width, leaving other axes unchanged.

        Emulates a map that repeats forever along the first axis.
        """
        width = self.size[0]
        if width == 0:
            raise ValueError("cannot wrap over a zero-width extent")
        return Vector((point[0] % width,) + point.components[1:])

    def iter_points(self) -> Iterator[Vector]:
        """Yield every contained point in linear-index order."""
        # itertools.product varies its last argument fastest, so feed axes reversed.
        ranges = [range(s) for s in reversed(self.size.components)]
        for reversed_point in itertools.product(*ranges):
            yield Vector(reversed_point[::-1])
