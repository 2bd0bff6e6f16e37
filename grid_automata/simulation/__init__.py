"""Simulation engines: activation rules, sparse automata, dense-grid stepping."""

from grid_automata.simulation.dense import StabilizeResult, Transition, stabilize, step_grid
from grid_automata.simulation.rules import CONWAY_RULE, HEX_TILE_RULE, LifeRule, Rule
from grid_automata.simulation.sparse import SparseAutomaton

__all__ = [
    "CONWAY_RULE",
    "HEX_TILE_RULE",
    "LifeRule",
    "Rule",
    "SparseAutomaton",
    "StabilizeResult",
    "Transition",
    "stabilize",
    "step_grid",
]
