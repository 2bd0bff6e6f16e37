"""Error types raised while building grids and automata from parsed input."""

from __future__ import annotations


class InvalidInputError(ValueError):
    """Raised when input cannot be turned into a grid, path, or seed pattern."""
