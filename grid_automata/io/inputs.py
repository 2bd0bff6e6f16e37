"""Input-file helpers for puzzle solvers."""

from __future__ import annotations

from pathlib import Path

from grid_automata.config.constants import INPUT_SUFFIX


def input_path(data_dir: Path, puzzle: str) -> Path:
    """Return path to the input file for *puzzle* within *data_dir*."""
    return Path(data_dir) / f"{puzzle}{INPUT_SUFFIX}"


def read_lines(path: Path) -> list[str]:
    """Read *path* as text lines without line terminators.

    Trailing blank lines are dropped; blank lines inside the file are kept.
    """
    lines = Path(path).read_text(encoding="utf-8").splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    return lines
