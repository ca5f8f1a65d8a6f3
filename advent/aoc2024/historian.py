"""Comparing two lists of location IDs."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

__all__ = [
    "match_pairs",
    "parse_lists",
    "similarity_score",
    "find_total_distance",
    "do_find_total_distance",
]


def parse_lists(stream: Iterable[str]) -> tuple[list[int], list[int]]:
    """Return the left and right columns, in input order."""
    left: list[int] = []
    right: list[int] = []
    for raw_line in stream:
        fields = raw_line.split()
        if not fields:
            continue
        if len(fields) < 2:
            raise ValueError(f"expected two values in {raw_line!r}")
        left.append(int(fields[0]))
        right.append(int(fields[1]))
    return left, right


def match_pairs(stream: Iterable[str]) -> list[tuple[int, int]]:
    """Pair the smallest left value with the smallest right value, and so on."""
    left, right = parse_lists(stream)
    return list(zip(sorted(left), sorted(right)))


def find_total_distance(pairs: Iterable[Sequence[int]]) -> int:
    """Sum the absolute differences within each pair."""
    return sum(abs(pair[0] - pair[1]) for pair in pairs)


def do_find_total_distance(stream: Iterable[str]) -> int:
    """Pair the lists in sorted order and sum their distances."""
    return find_total_distance(match_pairs(stream))


def similarity_score(stream: Iterable[str]) -> int:
    """Sum each left value times how often it appears in the right list."""
    left, right = parse_lists(stream)
    occurrences = Counter(right)
    return sum(value * occurrences[value] for value in left)