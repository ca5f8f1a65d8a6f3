"""Two-dimensional integer points."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Point"]


@dataclass(frozen=True)
class Point:
    """A point on an integer grid."""

    x: int = 0
    y: int = 0

    def manhattan_distance(self, other: Point) -> int:
        """Return the taxicab distance between this point and ``other``."""
        return abs(self.x - other.x) + abs(self.y - other.y)