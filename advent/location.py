"""Grid coordinates, points, compass directions and movement vectors."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import IntEnum

__all__ = [
    "CardinalDirection",
    "Coordinate",
    "Point",
    "Rotation",
    "Slope",
    "Vector",
    "VECTORS",
]


class CardinalDirection(IntEnum):
    """The eight compass directions, clockwise from north."""

    NORTH = 0
    NORTHEAST = 1
    EAST = 2
    SOUTHEAST = 3
    SOUTH = 4
    SOUTHWEST = 5
    WEST = 6
    NORTHWEST = 7

    def reverse(self) -> CardinalDirection:
        """Return the direction ``(self + 2) mod 4``."""
        return CardinalDirection((self + 2) % 4)


_STEPS: dict[CardinalDirection, tuple[int, int]] = {
    CardinalDirection.NORTH: (-1, 0),
    CardinalDirection.NORTHEAST: (-1, 1),
    CardinalDirection.EAST: (0, 1),
    CardinalDirection.SOUTHEAST: (1, 1),
    CardinalDirection.SOUTH: (1, 0),
    CardinalDirection.SOUTHWEST: (1, -1),
    CardinalDirection.WEST: (0, -1),
    CardinalDirection.NORTHWEST: (-1, -1),
}


@dataclass(frozen=True, order=True)
class Coordinate:
    """A row/column position in a grid."""

    row: int
    col: int

    def neighbors(self) -> list[Coordinate]:
        """Return the eight surrounding cells, clockwise from north."""
        return [
            Coordinate(self.row + dr, self.col + dc)
            for dr, dc in (_STEPS[d] for d in CardinalDirection)
        ]

    def with_next_n(self, n: int, direction: CardinalDirection) -> list[Coordinate]:
        """Return this cell and the next ``n`` in ``direction``, sorted by row then column."""
        dr, dc = _STEPS.get(direction, (0, 0))
        cells = [Coordinate(self.row + dr * step, self.col + dc * step) for step in range(n + 1)]
        return sorted(cells)

    def in_bounds(self, rows: int, cols: int) -> bool:
        """Whether the cell lies inside a grid of the given size."""
        return 0 <= self.row < rows and 0 <= self.col < cols

    def delta(self, other: Coordinate) -> Coordinate:
        """Return the offset from ``other`` to this cell."""
        return Coordinate(self.row - other.row, self.col - other.col)


@dataclass(frozen=True)
class Slope:
    """A rise over a run."""

    rise: int
    run: int


class Rotation(IntEnum):
    """Sense of a quarter turn."""

    CLOCKWISE = 1
    COUNTERCLOCKWISE = 2


@dataclass(frozen=True)
class Point:
    """A point with up to four integer components."""

    x: int = 0
    y: int = 0
    z: int = 0
    w: int = 0

    def neighbors(self) -> list[Point]:
        """Return the six hexagonal-grid neighbours in the x/y plane."""
        return [
            Point(self.x + 1, self.y),
            Point(self.x - 1, self.y),
            Point(self.x, self.y + 1),
            Point(self.x, self.y - 1),
            Point(self.x + 1, self.y - 1),
            Point(self.x - 1, self.y + 1),
        ]

    def manhattan_distance(self, other: Point) -> int:
        """Return the taxicab distance in the x/y plane."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def rotate90(self, direction: Rotation) -> Point:
        """Return this point turned a quarter turn about the origin."""
        if direction == Rotation.CLOCKWISE:
            return replace(self, x=self.y, y=-self.x)
        if direction == Rotation.COUNTERCLOCKWISE:
            return replace(self, x=-self.y, y=self.x)
        return self

    def add(self, other: Point) -> Point:
        """Return the x/y sum of the two points."""
        return Point(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class Vector:
    """A unit step paired with the compass direction it points."""

    point: Point
    direction: CardinalDirection


VECTORS: tuple[Vector, ...] = (
    Vector(Point(0, 1), CardinalDirection.EAST),
    Vector(Point(0, -1), CardinalDirection.WEST),
    Vector(Point(1, 0), CardinalDirection.SOUTH),
    Vector(Point(-1, 0), CardinalDirection.NORTH),
)