"""Configuration layer: constants and typed config dataclasses."""

from grid_automata.config.constants import (
    ACTIVE_CHAR,
    ADJACENT_CROWD_THRESHOLD,
    CUBE_GENERATIONS,
    HEX_GENERATIONS,
    INPUT_SUFFIX,
    TOBOGGAN_SLOPE,
    TOBOGGAN_SLOPES,
    VISIBLE_CROWD_THRESHOLD,
)
from grid_automata.config.types import (
    AutomatonConfig,
    Neighborhood,
    SeatingConfig,
    TobogganConfig,
)

__all__ = [
    "ACTIVE_CHAR",
    "ADJACENT_CROWD_THRESHOLD",
    "AutomatonConfig",
    "CUBE_GENERATIONS",
    "HEX_GENERATIONS",
    "INPUT_SUFFIX",
    "Neighborhood",
    "SeatingConfig",
    "TOBOGGAN_SLOPE",
    "TOBOGGAN_SLOPES",
    "TobogganConfig",
    "VISIBLE_CROWD_THRESHOLD",
]
