"""Named solution registry used by the command line runner."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path

from grid_automata.io.inputs import input_path, read_lines
from grid_automata.puzzles import PUZZLES

Solution = Callable[[], int]


class SolutionRegistry:
    """Maps solution names such as ``seating_part1`` to zero-argument callables."""

    def __init__(self) -> None:
        self._solutions: dict[str, Solution] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._solutions

    def __len__(self) -> int:
        return len(self._solutions)

    def add(self, name: str, solution: Solution) -> None:
        if name in self._solutions:
            raise ValueError(f"solution {name!r} already exists")
        self._solutions[name] = solution

    def names(self) -> list[str]:
        return sorted(self._solutions)

    def run(self, name: str) -> int:
        try:
            solution = self._solutions[name]
        except KeyError:
            raise KeyError(f"no solution {name!r}") from None
        return solution()

    def run_all(self) -> Iterator[tuple[str, int]]:
        for name in self.names():
            yield name, self.run(name)


def _bind(solver: Callable[[list[str]], int], path: Path) -> Solution:
    return lambda: solver(read_lines(path))


def build_registry(data_dir: Path) -> SolutionRegistry:
    """Register ``<puzzle>_part1``/``<puzzle>_part2`` reading inputs from *data_dir*."""
    registry = SolutionRegistry()
    for puzzle, module in PUZZLES.items():
        path = input_path(data_dir, puzzle)
        registry.add(f"{puzzle}_part1", _bind(module.part1, path))
        registry.add(f"{puzzle}_part2", _bind(module.part2, path))
    return registry
