"""Counting XMAS words and X-shaped MAS crosses in a letter grid."""

from __future__ import annotations

from typing import Iterable, Sequence

from advent.location import CardinalDirection, Coordinate

__all__ = ["count_xmases", "count_xs"]

_WORD = "XMAS"


def _parse_puzzle(stream: Iterable[str]) -> list[str]:
    return [line.rstrip("\r\n") for line in stream]


def _spells_xmas(cells: Sequence[Coordinate], puzzle: list[str]) -> bool:
    rows, cols = len(puzzle), len(puzzle[0])
    if not all(cell.in_bounds(rows, cols) for cell in cells):
        return False
    letters = "".join(puzzle[cell.row][cell.col] for cell in cells)
    return letters == _WORD or letters[::-1] == _WORD


def count_xmases(stream: Iterable[str]) -> int:
    """Count distinct straight runs of cells that spell XMAS in either direction."""
    puzzle = _parse_puzzle(stream)
    if not puzzle:
        return 0
    found: set[tuple[Coordinate, ...]] = set()
    for row, letters in enumerate(puzzle):
        for col in range(len(letters)):
            start = Coordinate(row, col)
            for direction in CardinalDirection:
                cells = tuple(start.with_next_n(len(_WORD) - 1, direction))
                if cells not in found and _spells_xmas(cells, puzzle):
                    found.add(cells)
    return len(found)


def _is_mas(first: str, second: str) -> bool:
    return {first, second} == {"M", "S"}


def count_xs(stream: Iterable[str]) -> int:
    """Count the A cells crossed by MAS on both diagonals."""
    puzzle = _parse_puzzle(stream)
    if not puzzle:
        return 0
    rows, cols = len(puzzle), len(puzzle[0])
    total = 0
    for row, letters in enumerate(puzzle):
        for col, letter in enumerate(letters):
            if letter != "A":
                continue
            neighbors = Coordinate(row, col).neighbors()
            ne = neighbors[CardinalDirection.NORTHEAST]
            sw = neighbors[CardinalDirection.SOUTHWEST]
            nw = neighbors[CardinalDirection.NORTHWEST]
            se = neighbors[CardinalDirection.SOUTHEAST]
            if not all(cell.in_bounds(rows, cols) for cell in (ne, sw, nw, se)):
                continue
            if _is_mas(puzzle[ne.row][ne.col], puzzle[sw.row][sw.col]) and _is_mas(
                puzzle[nw.row][nw.col], puzzle[se.row][se.col]
            ):
                total += 1
    return total