"""Generation stepping for dense grids.

Each generation reads the frozen previous grid and writes into an independent
copy, which then replaces it. Writing into the grid being read would let
early updates leak into later neighbor counts within the same pass.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from grid_automata.domain.grid import DenseGrid
from grid_automata.domain.vector import Vector

logger = logging.getLogger(__name__)

T = TypeVar("T")

Transition = Callable[[DenseGrid[T], Vector, T], T]
"""``(previous_grid, point, current_value) -> next_value``."""


@dataclass(frozen=True)
class StabilizeResult(Generic[T]):
    """Fixed point reached by :func:`stabilize`."""

    grid: DenseGrid[T]
    generations: int


def step_grid(grid: DenseGrid[T], transition: Transition[T]) -> tuple[DenseGrid[T], int]:
    """Compute the next generation of *grid*.

    Returns the new grid and the number of cells whose value changed. *grid*
    itself is never modified.
    """
    next_grid = grid.copy()
    changes = 0
    for point, cell in next_grid.iter_cells_mut():
        current = cell.value
        new_value = transition(grid, point, current)
        if new_value != current:
            cell.value = new_value
            changes += 1
    return next_grid, changes


def stabilize(
    grid: DenseGrid[T],
    transition: Transition[T],
    max_generations: int | None = None,
) -> StabilizeResult[T]:
    """Step *grid* until a generation changes nothing.

    ``generations`` in the result counts the steps that changed at least one
    cell. Raises ``RuntimeError`` when ``max_generations`` such steps pass
    without reaching a fixed point.
    """
    if max_generations is not None and max_generations < 0:
        raise ValueError("max_generations must be >= 0")
    generations = 0
    while True:
        next_grid, changes = step_grid(grid, transition)
        if changes == 0:
            logger.debug("grid stabilized after %d generations", generations)
            return StabilizeResult(grid=grid, generations=generations)
        if max_generations is not None and generations >= max_generations:
            raise RuntimeError(f"grid did not stabilize within {max_generations} generations")
        grid = next_grid
        generations += 1
        logger.debug("generation %d: %d cells changed", generations, changes)
