"""A guard's patrol around obstacles, and obstacles that trap it in a loop."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import AbstractSet, Iterable

from advent.location import CardinalDirection, Coordinate

__all__ = [
    "CycleDetected",
    "Guard",
    "parse_map",
    "simulate_patrol",
    "introduce_obstacles",
]

_N = CardinalDirection.NORTH
_E = CardinalDirection.EAST
_S = CardinalDirection.SOUTH
_W = CardinalDirection.WEST

_STEPS = {_N: (-1, 0), _E: (0, 1), _S: (1, 0), _W: (0, -1)}
_RIGHT_TURNS = {_N: _E, _E: _S, _S: _W, _W: _N}


class CycleDetected(Exception):
    """The guard came back to a cell facing a way it already walked."""


@dataclass
class Guard:
    """The guard's position and the direction it faces."""

    location: Coordinate
    orientation: CardinalDirection = _N

    def in_bounds(self, dimensions: Coordinate) -> bool:
        """Whether the guard is inside a grid of the given rows and columns."""
        return self.location.in_bounds(dimensions.row, dimensions.col)

    def _next_location(self) -> Coordinate:
        try:
            dr, dc = _STEPS[self.orientation]
        except KeyError:
            raise ValueError(f"guard cannot face {self.orientation.name}") from None
        return Coordinate(self.location.row + dr, self.location.col + dc)

    def can_advance(self, obstacles: AbstractSet[Coordinate]) -> bool:
        """Whether the cell ahead is free of obstacles."""
        return self._next_location() not in obstacles

    def advance(self) -> None:
        """Step one cell forward."""
        self.location = self._next_location()

    def turn_right(self) -> None:
        """Turn a quarter turn clockwise."""
        self.orientation = _RIGHT_TURNS.get(self.orientation, self.orientation)


def parse_map(stream: Iterable[str]) -> tuple[set[Coordinate], Guard, Coordinate]:
    """Return the obstacles, the guard (facing north), and the grid size."""
    obstacles: set[Coordinate] = set()
    guard = Guard(Coordinate(0, 0))
    rows = 0
    columns = 0
    for row, raw_line in enumerate(stream):
        line = raw_line.rstrip("\r\n")
        rows = row + 1
        if columns == 0:
            columns = len(line)
        for col, char in enumerate(line):
            if char == "^":
                guard.location = Coordinate(row, col)
            elif char == "#":
                obstacles.add(Coordinate(row, col))
    return obstacles, guard, Coordinate(rows, columns)


def simulate_patrol(
    guard: Guard, obstacles: AbstractSet[Coordinate], dimensions: Coordinate
) -> set[Coordinate]:
    """Return the cells the guard visits before leaving the grid.

    The given guard is not moved. Raises CycleDetected if the guard loops.
    """
    walker = replace(guard)
    visited = {walker.location}
    headings: dict[Coordinate, set[CardinalDirection]] = {}

    while walker.in_bounds(dimensions):
        if not walker.can_advance(obstacles):
            walker.turn_right()
            continue
        walker.advance()
        if walker.in_bounds(dimensions):
            visited.add(walker.location)
            seen = headings.setdefault(walker.location, set())
            if walker.orientation in seen:
                raise CycleDetected(f"cycle at {walker.location}")
            seen.add(walker.orientation)

    return visited


def introduce_obstacles(
    guard: Guard, obstacles: AbstractSet[Coordinate], dimensions: Coordinate
) -> int:
    """Count the free cells where one new obstacle would trap the guard in a loop."""
    loops = 0
    for row in range(dimensions.row):
        for col in range(dimensions.col):
            candidate = Coordinate(row, col)
            if candidate in obstacles or candidate == guard.location:
                continue
            try:
                simulate_patrol(guard, set(obstacles) | {candidate}, dimensions)
            except CycleDetected:
                loops += 1
    return loops