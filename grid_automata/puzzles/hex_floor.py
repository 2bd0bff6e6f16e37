"""Hexagonal tile floor.

Each input line is a run-together path of hex directions (``e``, ``se``,
``sw``, ``w``, ``nw``, ``ne``) from a shared reference tile; the tile at the
end of each path is flipped. The black tiles then evolve as a hex automaton.
"""

from __future__ import annotations

from collections.abc import Sequence

from grid_automata.config.types import AutomatonConfig
from grid_automata.domain.neighbors import HexDirection, parse_hex_path, walk_hex_path
from grid_automata.domain.vector import Vector
from grid_automata.simulation.sparse import SparseAutomaton


def parse_paths(lines: Sequence[str]) -> list[list[HexDirection]]:
    return [parse_hex_path(line) for line in lines if line.strip()]


def lay_tiles(paths: Sequence[Sequence[HexDirection]], config: AutomatonConfig) -> SparseAutomaton:
    """Flip the destination tile of every path; black tiles are the active cells."""
    floor = SparseAutomaton.hexagonal(config.rule)
    origin = Vector.zeros(2)
    for path in paths:
        floor.flip(walk_hex_path(path, origin))
    return floor


def part1(lines: Sequence[str]) -> int:
    return lay_tiles(parse_paths(lines), AutomatonConfig.hex_floor()).active_count()


def part2(lines: Sequence[str], config: AutomatonConfig | None = None) -> int:
    config = config or AutomatonConfig.hex_floor()
    floor = lay_tiles(parse_paths(lines), config)
    return floor.run(config.generations).active_count()
