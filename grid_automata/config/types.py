"""Configuration dataclasses for the puzzle solvers.

All frozen dataclasses that parameterise seating, toboggan, pocket-cube and
hex-floor runs live here. Each validates its fields on construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from grid_automata.config.constants import (
    ADJACENT_CROWD_THRESHOLD,
    CUBE_GENERATIONS,
    HEX_GENERATIONS,
    TOBOGGAN_SLOPES,
    VISIBLE_CROWD_THRESHOLD,
)
from grid_automata.simulation.rules import CONWAY_RULE, HEX_TILE_RULE, LifeRule

__all__ = [
    "AutomatonConfig",
    "Neighborhood",
    "SeatingConfig",
    "TobogganConfig",
]


class Neighborhood(Enum):
    """How a seat finds the seats it reacts to."""

    ADJACENT = "adjacent"
    VISIBLE = "visible"


@dataclass(frozen=True)
class SeatingConfig:
    """Seat-layout automaton parameters."""

    neighborhood: Neighborhood = Neighborhood.ADJACENT
    crowd_threshold: int = ADJACENT_CROWD_THRESHOLD
    max_generations: int | None = None

    def __post_init__(self) -> None:
        if not 1 <= self.crowd_threshold <= 8:
            raise ValueError("crowd_threshold must be in [1, 8]")
        if self.max_generations is not None and self.max_generations < 0:
            raise ValueError("max_generations must be >= 0")

    @classmethod
    def visible(cls) -> SeatingConfig:
        return cls(neighborhood=Neighborhood.VISIBLE, crowd_threshold=VISIBLE_CROWD_THRESHOLD)


@dataclass(frozen=True)
class AutomatonConfig:
    """Sparse-automaton run parameters."""

    dimensions: int = 3
    generations: int = CUBE_GENERATIONS
    rule: LifeRule = CONWAY_RULE

    def __post_init__(self) -> None:
        if self.dimensions < 2:
            raise ValueError("dimensions must be >= 2")
        if self.generations < 0:
            raise ValueError("generations must be >= 0")

    @classmethod
    def hex_floor(cls) -> AutomatonConfig:
        return cls(dimensions=2, generations=HEX_GENERATIONS, rule=HEX_TILE_RULE)


@dataclass(frozen=True)
class TobogganConfig:
    """Slopes, as (right, down) steps, for the tree-count traversal."""

    slopes: tuple[tuple[int, int], ...] = TOBOGGAN_SLOPES

    def __post_init__(self) -> None:
        if not self.slopes:
            raise ValueError("slopes must not be empty")
        for right, down in self.slopes:
            if right < 0 or down < 1:
                raise ValueError(f"slope must move right >= 0 and down >= 1, got {(right, down)}")
