"""Antennas and the antinodes their frequencies produce."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import permutations
from typing import Iterable, Mapping, Sequence

from advent.location import Coordinate

__all__ = ["Antenna", "find_antennae", "find_antinodes", "find_resonant_antinodes"]


@dataclass(frozen=True)
class Antenna:
    """An antenna's frequency label and where it stands."""

    frequency: str
    location: Coordinate


def find_antennae(stream: Iterable[str]) -> tuple[dict[str, list[Antenna]], Coordinate]:
    """Return antennas grouped by frequency, and the grid size as rows and columns."""
    antennae: dict[str, list[Antenna]] = {}
    rows = 0
    columns = 0
    for row, raw_line in enumerate(stream):
        line = raw_line.rstrip("\r\n")
        rows = row + 1
        if columns == 0:
            columns = len(line)
        for col, char in enumerate(line):
            if char != ".":
                antennae.setdefault(char, []).append(Antenna(char, Coordinate(row, col)))
    return antennae, Coordinate(rows, columns)


def _pairs(antennae: Mapping[str, Sequence[Antenna]]):
    for antennas in antennae.values():
        for first, second in permutations(antennas, 2):
            yield first.location, first.location.delta(second.location)


def find_antinodes(
    antennae: Mapping[str, Sequence[Antenna]], dimensions: Coordinate
) -> set[Coordinate]:
    """Return cells in the grid one spacing beyond each pair of like antennas."""
    antinodes = set()
    for origin, delta in _pairs(antennae):
        antinode = Coordinate(origin.row + delta.row, origin.col + delta.col)
        if antinode.in_bounds(dimensions.row, dimensions.col):
            antinodes.add(antinode)
    return antinodes


def find_resonant_antinodes(
    antennae: Mapping[str, Sequence[Antenna]], dimensions: Coordinate
) -> set[Coordinate]:
    """Return every grid cell on the line of each pair of like antennas, outwards."""
    antinodes = set()
    for origin, delta in _pairs(antennae):
        antinode = origin
        while antinode.in_bounds(dimensions.row, dimensions.col):
            antinodes.add(antinode)
            antinode = Coordinate(antinode.row + delta.row, antinode.col + delta.col)
    return antinodes