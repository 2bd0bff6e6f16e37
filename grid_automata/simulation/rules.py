"""Two-state activation rules for generational automata.

A rule maps ``(currently_active, active_neighbor_count)`` to the cell's
activation in the next generation. Any callable with that signature works;
``LifeRule`` covers the birth/survival family written as ``B3/S23``.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

Rule = Callable[[bool, int], bool]

_RULE_RE = re.compile(r"^B(?P<birth>\d*)/S(?P<survive>\d*)$", re.IGNORECASE)


@dataclass(frozen=True)
class LifeRule:
    """Birth/survival rule keyed on the number of active neighbors."""

    birth: frozenset[int]
    survive: frozenset[int]

    def __post_init__(self) -> None:
        if any(n < 0 for n in self.birth | self.survive):
            raise ValueError("neighbor counts must be >= 0")
        # A birth on zero neighbors would activate every cell of an unbounded space.
        if 0 in self.birth:
            raise ValueError("birth on 0 active neighbors is not supported")

    @classmethod
    def from_counts(cls, birth: Iterable[int], survive: Iterable[int]) -> LifeRule:
        return cls(birth=frozenset(birth), survive=frozenset(survive))

    @classmethod
    def parse(cls, notation: str) -> LifeRule:
        """Parse ``"B3/S23"`` style notation (single-digit counts only)."""
        match = _RULE_RE.match(notation.strip())
        if match is None:
            raise ValueError(f"Expected B<digits>/S<digits> notation, got: {notation}")
        return cls.from_counts(
            birth=(int(c) for c in match["birth"]),
            survive=(int(c) for c in match["survive"]),
        )

    def __call__(self, active: bool, active_neighbors: int) -> bool:
        if active:
            return active_neighbors in self.survive
        return active_neighbors in self.birth

    def __str__(self) -> str:
        birth = "".join(str(n) for n in sorted(self.birth))
        survive = "".join(str(n) for n in sorted(self.survive))
        return f"B{birth}/S{survive}"


CONWAY_RULE = LifeRule.from_counts(birth={3}, survive={2, 3})
"""Conway's rule, used for the 3D and 4D pocket-dimension cubes."""

HEX_TILE_RULE = LifeRule.from_counts(birth={2}, survive={1, 2})
"""Hex floor rule: black tiles with 0 or more than 2 black neighbors flip to white,
white tiles with exactly 2 black neighbors flip to black."""
