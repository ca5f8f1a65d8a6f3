"""Reactor reports: checking that levels change safely."""

from __future__ import annotations

from typing import Iterable, Sequence

__all__ = ["is_safe", "is_safe_with_tolerance", "parse_reports"]

_MIN_DIFFERENCE = 1
_MAX_DIFFERENCE = 3


def is_safe(report: Sequence[int]) -> bool:
    """Whether levels move in one direction by between 1 and 3 each step."""
    levels = list(report)
    if levels != sorted(levels) and levels != sorted(levels, reverse=True):
        return False
    return all(
        _MIN_DIFFERENCE <= abs(a - b) <= _MAX_DIFFERENCE for a, b in zip(levels, levels[1:])
    )


def is_safe_with_tolerance(report: Sequence[int]) -> bool:
    """Whether the report is safe, or becomes safe with one level removed."""
    if is_safe(report):
        return True
    levels = list(report)
    return any(
        is_safe(levels[:index] + levels[index + 1:]) for index in range(len(levels))
    )


def parse_reports(stream: Iterable[str]) -> list[list[int]]:
    """Parse one report of space-separated levels per line."""
    return [[int(value) for value in line.split()] for line in stream]