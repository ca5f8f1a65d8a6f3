"""Following a loop of pipes from its starting tile."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from advent.location import VECTORS, CardinalDirection, Point

__all__ = ["Pipe", "Situation", "distance_to_furthest_pipe_from_start"]

_N = CardinalDirection.NORTH
_E = CardinalDirection.EAST
_S = CardinalDirection.SOUTH
_W = CardinalDirection.WEST


class Pipe(Enum):
    """Pipe shapes, each joining two compass directions."""

    VERTICAL = 0
    HORIZONTAL = 1
    NORTHEAST_CONNECTOR = 2
    NORTHWEST_CONNECTOR = 3
    SOUTHEAST_CONNECTOR = 4
    SOUTHWEST_CONNECTOR = 5

    @property
    def directions(self) -> tuple[CardinalDirection, CardinalDirection]:
        """The two directions this pipe opens towards."""
        return _DIRECTIONS_BY_PIPE[self]


_DIRECTIONS_BY_PIPE = {
    Pipe.VERTICAL: (_N, _S),
    Pipe.HORIZONTAL: (_E, _W),
    Pipe.NORTHEAST_CONNECTOR: (_N, _E),
    Pipe.NORTHWEST_CONNECTOR: (_N, _W),
    Pipe.SOUTHEAST_CONNECTOR: (_S, _E),
    Pipe.SOUTHWEST_CONNECTOR: (_S, _W),
}

_PIPES_BY_LABEL = {
    "|": Pipe.VERTICAL,
    "-": Pipe.HORIZONTAL,
    "L": Pipe.NORTHEAST_CONNECTOR,
    "J": Pipe.NORTHWEST_CONNECTOR,
    "F": Pipe.SOUTHEAST_CONNECTOR,
    "7": Pipe.SOUTHWEST_CONNECTOR,
}

_OPPOSITE = {_N: _S, _S: _N, _E: _W, _W: _E}


@dataclass
class Situation:
    """A walker's position on the pipe grid; points are (row, column)."""

    pipes_by_location: dict[Point, Pipe]
    starting_position: Point
    current_position: Point
    orientation: CardinalDirection
    steps: int = 0

    def _accepts(self, position: Point, entering: CardinalDirection) -> bool:
        if position == self.starting_position:
            return True
        pipe = self.pipes_by_location.get(position)
        return pipe is not None and _OPPOSITE[entering] in pipe.directions

    def advance(self) -> None:
        """Take one step along the loop, never turning straight back."""
        at_start = self.current_position == self.starting_position
        if not at_start:
            ways_forward = self.pipes_by_location[self.current_position].directions
        for vector in VECTORS:
            if vector.direction == _OPPOSITE[self.orientation]:
                continue
            if not at_start and vector.direction not in ways_forward:
                continue
            next_position = self.current_position.add(vector.point)
            if self._accepts(next_position, vector.direction):
                self.orientation = vector.direction
                self.current_position = next_position
                self.steps += 1
                return
        raise ValueError(f"the pipe at {self.current_position} leads nowhere")


def _parse(stream: Iterable[str]) -> tuple[dict[Point, Pipe], Point]:
    pipes: dict[Point, Pipe] = {}
    start: Point | None = None
    for row, raw_line in enumerate(stream):
        for col, label in enumerate(raw_line.rstrip("\r\n")):
            if label == ".":
                continue
            if label == "S":
                start = Point(row, col)
                continue
            try:
                pipes[Point(row, col)] = _PIPES_BY_LABEL[label]
            except KeyError:
                raise ValueError(f"unknown tile {label!r}") from None
    if start is None:
        raise ValueError("no starting tile S")
    return pipes, start


def distance_to_furthest_pipe_from_start(stream: Iterable[str]) -> int:
    """Return the number of steps to the point of the loop furthest from the start."""
    pipes, start = _parse(stream)

    orientation = next(
        (
            vector.direction
            for vector in VECTORS
            if (pipe := pipes.get(start.add(vector.point))) is not None
            and _OPPOSITE[vector.direction] in pipe.directions
        ),
        None,
    )
    if orientation is None:
        raise ValueError("no pipe connects to the starting tile")

    situation = Situation(
        pipes_by_location=pipes,
        starting_position=start,
        current_position=start,
        orientation=orientation,
    )
    situation.advance()
    while situation.current_position != situation.starting_position:
        situation.advance()
    return situation.steps // 2