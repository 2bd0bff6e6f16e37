"""Conway cubes in a 3D or 4D pocket dimension.

The 2D starting slice is placed on the first two axes with every other axis
at zero, then the automaton runs for a fixed boot cycle.
"""

from __future__ import annotations

from collections.abc import Sequence

from grid_automata.config.constants import ACTIVE_CHAR
from grid_automata.config.types import AutomatonConfig
from grid_automata.domain.errors import InvalidInputError
from grid_automata.simulation.sparse import SparseAutomaton


def parse_pocket(lines: Sequence[str], config: AutomatonConfig) -> SparseAutomaton:
    for y, line in enumerate(lines):
        if set(line.strip()) - {".", ACTIVE_CHAR}:
            raise InvalidInputError(f"unexpected character on line {y}: {line!r}")
    automaton = SparseAutomaton.moore(config.dimensions, config.rule)
    return automaton.seed_from_rows((line.strip() for line in lines), active_char=ACTIVE_CHAR)


def boot(lines: Sequence[str], config: AutomatonConfig) -> int:
    """Run the boot cycle and return the number of active cubes."""
    automaton = parse_pocket(lines, config)
    return automaton.run(config.generations).active_count()


def part1(lines: Sequence[str]) -> int:
    return boot(lines, AutomatonConfig(dimensions=3))


def part2(lines: Sequence[str]) -> int:
    return boot(lines, AutomatonConfig(dimensions=4))
