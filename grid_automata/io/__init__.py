"""I/O helpers: input-file paths and line reading."""

from grid_automata.io.inputs import input_path, read_lines

__all__ = ["input_path", "read_lines"]
