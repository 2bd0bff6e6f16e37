"""Ship navigation instructions on an integer plane (y grows southward)."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from grid_automata.domain.errors import InvalidInputError
from grid_automata.domain.vector import Vector


class Heading(Enum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    @property
    def offset(self) -> Vector:
        return _HEADING_OFFSETS[self]

    def rotate(self, quarter_turns: int) -> Heading:
        """Turn clockwise by *quarter_turns* (negative turns counter-clockwise)."""
        return Heading((self.value + quarter_turns) % 4)


_HEADING_OFFSETS: dict[Heading, Vector] = {
    Heading.NORTH: Vector.of(0, -1),
    Heading.EAST: Vector.of(1, 0),
    Heading.SOUTH: Vector.of(0, 1),
    Heading.WEST: Vector.of(-1, 0),
}

_HEADING_CODES = {"N": Heading.NORTH, "E": Heading.EAST, "S": Heading.SOUTH, "W": Heading.WEST}


@dataclass(frozen=True)
class Action:
    """One instruction: ``code`` is one of N, E, S, W, L, R, F."""

    code: str
    value: int

    @property
    def quarter_turns(self) -> int:
        """Signed clockwise quarter turns for L/R actions."""
        turns = self.value // 90
        return -turns if self.code == "L" else turns


def parse_action(text: str) -> Action:
    text = text.strip()
    code, raw_value = text[:1], text[1:]
    if code not in {"N", "E", "S", "W", "L", "R", "F"}:
        raise InvalidInputError(f"unrecognised action: {text!r}")
    try:
        value = int(raw_value)
    except ValueError as exc:
        raise InvalidInputError(f"invalid action value: {text!r}") from exc
    if code in {"L", "R"} and value % 90 != 0:
        raise InvalidInputError(f"rotation must be a multiple of 90 degrees: {text!r}")
    return Action(code=code, value=value)


def parse_actions(lines: Sequence[str]) -> list[Action]:
    return [parse_action(line) for line in lines if line.strip()]


def rotate_clockwise(vector: Vector, quarter_turns: int) -> Vector:
    for _ in range(quarter_turns % 4):
        vector = Vector.of(-vector[1], vector[0])
    return vector


def sail(actions: Sequence[Action]) -> Vector:
    """Move the ship itself; starts at the origin facing east."""
    position = Vector.zeros(2)
    heading = Heading.EAST
    for action in actions:
        if action.code in _HEADING_CODES:
            position = position + _HEADING_CODES[action.code].offset * action.value
        elif action.code in {"L", "R"}:
            heading = heading.rotate(action.quarter_turns)
        else:
            position = position + heading.offset * action.value
    return position


def sail_by_waypoint(actions: Sequence[Action], waypoint: Vector | None = None) -> Vector:
    """Move a waypoint relative to the ship; F moves the ship toward it."""
    position = Vector.zeros(2)
    waypoint = waypoint if waypoint is not None else Vector.of(10, -1)
    for action in actions:
        if action.code in _HEADING_CODES:
            waypoint = waypoint + _HEADING_CODES[action.code].offset * action.value
        elif action.code in {"L", "R"}:
            waypoint = rotate_clockwise(waypoint, action.quarter_turns)
        else:
            position = position + waypoint * action.value
    return position


def part1(lines: Sequence[str]) -> int:
    return sail(parse_actions(lines)).manhattan_length()


def part2(lines: Sequence[str]) -> int:
    return sail_by_waypoint(parse_actions(lines)).manhattan_length()
