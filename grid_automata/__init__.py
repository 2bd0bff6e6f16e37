"""Grid abstractions and a generational cellular-automaton engine."""

from grid_automata.domain import BoundedExtent, DenseGrid, InvalidInputError, Vector
from grid_automata.simulation import LifeRule, SparseAutomaton, stabilize, step_grid

__all__ = [
    "BoundedExtent",
    "DenseGrid",
    "InvalidInputError",
    "LifeRule",
    "SparseAutomaton",
    "Vector",
    "stabilize",
    "step_grid",
]
