"""Sparse generational automaton over an unbounded integer lattice.

Only the active coordinates are stored. A step evaluates the *relevant set*
(every active cell plus all of its neighbors) against the frozen current
generation, collects the survivors into a new set, and swaps it in. Cells
outside the relevant set have no active neighbors and are not active, so no
rule with a birth count >= 1 can activate them.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Iterator, Sequence

from grid_automata.domain.neighbors import HEX_OFFSETS, moore_offsets
from grid_automata.domain.vector import Vector
from grid_automata.simulation.rules import Rule

logger = logging.getLogger(__name__)


class SparseAutomaton:
    """Set of active coordinates plus the neighbor table and rule that advance it."""

    def __init__(
        self,
        offsets: Sequence[Vector],
        rule: Rule,
        active: Iterable[Vector] = (),
    ) -> None:
        if not offsets:
            raise ValueError("offsets must not be empty")
        arity = offsets[0].arity
        if any(offset.arity != arity for offset in offsets):
            raise ValueError("all offsets must share the same arity")
        if any(not any(offset) for offset in offsets):
            raise ValueError("offsets must not include the origin")
        if len(set(offsets)) != len(offsets):
            raise ValueError("offsets must be distinct")
        self.offsets: tuple[Vector, ...] = tuple(offsets)
        self.arity = arity
        self.rule = rule
        self.generation = 0
        self._active: set[Vector] = set()
        for point in active:
            self.activate(point)

    @classmethod
    def moore(cls, arity: int, rule: Rule, active: Iterable[Vector] = ()) -> SparseAutomaton:
        """Automaton on the ``arity``-dimensional lattice with ``3**arity - 1`` neighbors."""
        return cls(moore_offsets(arity), rule, active)

    @classmethod
    def hexagonal(cls, rule: Rule, active: Iterable[Vector] = ()) -> SparseAutomaton:
        """Automaton on the skewed 2D lattice with six hex neighbors."""
        return cls(HEX_OFFSETS, rule, active)

    def __repr__(self) -> str:
        return (
            f"SparseAutomaton(arity={self.arity}, generation={self.generation}, "
            f"active={len(self._active)})"
        )

    def __len__(self) -> int:
        return len(self._active)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._active)

    def __contains__(self, point: object) -> bool:
        return point in self._active

    @property
    def active(self) -> frozenset[Vector]:
        return frozenset(self._active)

    def _check_point(self, point: Vector) -> None:
        if point.arity != self.arity:
            raise ValueError(f"expected a {self.arity}-vector, got {point!r}")

    def seed_from_rows(self, rows: Iterable[str], active_char: str = "#") -> SparseAutomaton:
        """Activate every *active_char* of a 2D text pattern at ``(x, y, 0, ...)``."""
        if self.arity < 2:
            raise ValueError("seeding from rows requires arity >= 2")
        for y, row in enumerate(rows):
            for x, char in enumerate(row.rstrip("\n")):
                if char == active_char:
                    self.activate(Vector.of(x, y).extend(self.arity))
        return self

    def activate(self, point: Vector) -> None:
        self._check_point(point)
        self._active.add(point)

    def flip(self, point: Vector) -> None:
        """Toggle *point* between active and inactive."""
        self._check_point(point)
        if point in self._active:
            self._active.remove(point)
        else:
            self._active.add(point)

    def is_active(self, point: Vector) -> bool:
        return point in self._active

    def active_count(self) -> int:
        return len(self._active)

    def neighbors(self, point: Vector) -> Iterator[Vector]:
        for offset in self.offsets:
            yield point + offset

    def active_neighbors(self, point: Vector) -> int:
        return sum(1 for neighbor in self.neighbors(point) if neighbor in self._active)

    def relevant_points(self) -> set[Vector]:
        """Every active cell and every neighbor of an active cell, deduplicated."""
        relevant: set[Vector] = set(self._active)
        for point in self._active:
            relevant.update(self.neighbors(point))
        return relevant

    def _neighbor_tally(self) -> Counter[Vector]:
        """Active-neighbor counts for every point with at least one active neighbor."""
        tally: Counter[Vector] = Counter()
        for point in self._active:
            tally.update(self.neighbors(point))
        return tally

    def step(self) -> SparseAutomaton:
        """Advance one generation and return self."""
        current = self._active
        tally = self._neighbor_tally()
        # Relevant set: the tally covers every neighbor of an active cell; add
        # isolated active cells, which no neighbor tallies.
        relevant = current.union(tally)
        next_active = {
            point for point in relevant if self.rule(point in current, tally.get(point, 0))
        }
        self._active = next_active
        self.generation += 1
        logger.debug(
            "generation %d: evaluated %d relevant cells, %d active",
            self.generation,
            len(relevant),
            len(next_active),
        )
        return self

    def run(self, generations: int) -> SparseAutomaton:
        if generations < 0:
            raise ValueError("generations must be >= 0")
        for _ in range(generations):
            self.step()
        return self

    def bounds(self) -> tuple[Vector, Vector] | None:
        """Elementwise (min, max) corners of the active cells, or ``None`` if empty."""
        points = iter(self._active)
        first = next(points, None)
        if first is None:
            return None
        low = high = first
        for point in points:
            low = low.min(point)
            high = high.max(point)
        return low, high
