"""Fixed-arity integer coordinate vectors.

A ``Vector`` is an immutable value type used as a set/dict key throughout the
grid and automaton layers. All arithmetic is elementwise and requires both
operands to share the same arity.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector:
    """An ordered tuple of integers identifying a point in N-dimensional space."""

    components: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.components:
            raise ValueError("Vector must have at least one component")

    @classmethod
    def of(cls, *components: int) -> Vector:
        return cls(tuple(components))

    @classmethod
    def zeros(cls, arity: int) -> Vector:
        if arity < 1:
            raise ValueError("arity must be >= 1")
        return cls((0,) * arity)

    @property
    def arity(self) -> int:
        return len(self.components)

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[int]:
        return iter(self.components)

    def __getitem__(self, axis: int) -> int:
        return self.components[axis]

    def __repr__(self) -> str:
        return f"Vector{self.components}"

    def _check_arity(self, other: Vector) -> None:
        if len(other.components) != len(self.components):
            raise ValueError(
                f"arity mismatch: {len(self.components)} vs {len(other.components)}"
            )

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_arity(other)
        return Vector(tuple(a + b for a, b in zip(self.components, other.components)))

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_arity(other)
        return Vector(tuple(a - b for a, b in zip(self.components, other.components)))

    def __mul__(self, scalar: int) -> Vector:
        if not isinstance(scalar, int):
            return NotImplemented
        return Vector(tuple(a * scalar for a in self.components))

    __rmul__ = __mul__

    def __mod__(self, other: Vector) -> Vector:
        """Elementwise remainder, following Python's floor-mod sign convention.

        The result takes the divisor's sign, so ``(-1,) % (3,)`` is ``(2,)``
        rather than the ``(-1,)`` a truncating remainder gives. Wrapping a
        negative coordinate back into ``[0, width)`` relies on this.
        """
        if not isinstance(other, Vector):
            return NotImplemented
        self._check_arity(other)
        return Vector(tuple(a % b for a, b in zip(self.components, other.components)))

    def __neg__(self) -> Vector:
        return Vector(tuple(-a for a in self.components))

    def checked_sub(self, other: Vector) -> Vector | None:
        """Subtract treating coordinates as natural numbers.

        Returns ``None`` instead of a vector when any axis of the result would
        fall below zero.
        """
        self._check_arity(other)
        result = tuple(a - b for a, b in zip(self.components, other.components))
        if any(c < 0 for c in result):
            return None
        return Vector(result)

    def min(self, other: Vector) -> Vector:
        self._check_arity(other)
        return Vector(tuple(min(a, b) for a, b in zip(self.components, other.components)))

    def max(self, other: Vector) -> Vector:
        self._check_arity(other)
        return Vector(tuple(max(a, b) for a, b in zip(self.components, other.components)))

    def manhattan_length(self) -> int:
        """Sum of absolute component values."""
        return sum(abs(a) for a in self.components)

    def extend(self, arity: int) -> Vector:
        """Pad trailing axes with zeros up to *arity*."""
        if arity < len(self.components):
            raise ValueError(f"cannot shrink a {len(self.components)}-vector to arity {arity}")
        return Vector(self.components + (0,) * (arity - len(self.components)))
