"""Engine schematics: part numbers next to symbols and gear ratios."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import AbstractSet, Iterable

from advent.location import Coordinate

__all__ = ["PartNumber", "find_part_numbers", "determine_total_gear_ratio"]

_NUMBER = re.compile(r"\d+")


@dataclass(frozen=True)
class PartNumber:
    """A number in the schematic and the cells its digits occupy."""

    number: int
    digit_locales: tuple[Coordinate, ...]

    def is_adjacent_to_a_symbol(self, symbol_locations: AbstractSet[Coordinate]) -> bool:
        """Whether any digit touches, even diagonally, one of the symbol cells."""
        return any(
            neighbor in symbol_locations
            for locale in self.digit_locales
            for neighbor in locale.neighbors()
        )

    def is_adjacent_to_location(self, coordinate: Coordinate) -> bool:
        """Whether any digit touches, even diagonally, ``coordinate``."""
        return any(coordinate in locale.neighbors() for locale in self.digit_locales)


def find_part_numbers(
    stream: Iterable[str],
) -> tuple[list[PartNumber], set[Coordinate]]:
    """Return the numbers next to a symbol, and the cells that hold a ``*``."""
    candidates: list[PartNumber] = []
    symbols: set[Coordinate] = set()
    gears: set[Coordinate] = set()

    for row, raw_line in enumerate(stream):
        line = raw_line.rstrip("\r\n")
        for match in _NUMBER.finditer(line):
            cells = tuple(Coordinate(row, col) for col in range(match.start(), match.end()))
            candidates.append(PartNumber(int(match.group()), cells))
        for col, character in enumerate(line):
            if character == "." or character.isdecimal():
                continue
            symbols.add(Coordinate(row, col))
            if character == "*":
                gears.add(Coordinate(row, col))

    parts = [part for part in candidates if part.is_adjacent_to_a_symbol(symbols)]
    return parts, gears


def determine_total_gear_ratio(
    part_numbers: Iterable[PartNumber], gear_locations: Iterable[Coordinate]
) -> int:
    """Sum the products of the two parts around every gear that touches exactly two."""
    parts = list(part_numbers)
    total = 0
    for gear in gear_locations:
        adjacent = [part for part in parts if part.is_adjacent_to_location(gear)]
        if len(adjacent) == 2:
            total += adjacent[0].number * adjacent[1].number
    return total