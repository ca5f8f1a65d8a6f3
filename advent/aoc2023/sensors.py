"""Extrapolating sensor readings by repeated differences."""

from __future__ import annotations

from typing import Iterable, Sequence

__all__ = ["extrapolate", "extrapolate_sensor_readings"]


def extrapolate(reading: Sequence[int]) -> tuple[int, int]:
    """Return the values that would come before and after ``reading``."""
    if not reading:
        raise ValueError("cannot extrapolate an empty reading")
    if len(set(reading)) == 1:
        return reading[0], reading[0]
    deltas = [b - a for a, b in zip(reading, reading[1:])]
    prior, following = extrapolate(deltas)
    return reading[0] - prior, reading[-1] + following


def extrapolate_sensor_readings(stream: Iterable[str]) -> list[list[int]]:
    """Parse readings, one per line, and return each with both extrapolated ends."""
    results = []
    for line in stream:
        reading = [int(value) for value in line.split()]
        prior, following = extrapolate(reading)
        results.append([prior, *reading, following])
    return results