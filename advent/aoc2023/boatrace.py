"""Toy boat races: counting the ways to beat a record."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

__all__ = ["Kerning", "RaceStrategy", "find_winning_race_strategies"]


class Kerning(Enum):
    """Whether the spaces between numbers separate races or are misprints."""

    BAD = 0
    GOOD = 1


@dataclass
class RaceStrategy:
    """A race's time and record, and how many charging times beat the record."""

    record_distance: int
    time_alloted: int
    winners: int = 0

    def determine_winners(self) -> None:
        """Compute ``winners`` from the shortest charging time that beats the record."""
        min_charging_time = next(
            (
                charge
                for charge in range(self.record_distance)
                if charge * (self.time_alloted - charge) > self.record_distance
            ),
            0,
        )
        self.winners = self.time_alloted - 2 * min_charging_time + 1


def _read_values(fields: list[str], kerning: Kerning) -> list[int]:
    if kerning is Kerning.GOOD:
        joined = "".join(fields)
        return [int(joined) if joined else 0]
    return [int(field) for field in fields]


def find_winning_race_strategies(
    stream: Iterable[str], kerning: Kerning = Kerning.BAD
) -> list[RaceStrategy]:
    """Parse the race sheet and return each race with its winner count."""
    times: list[int] = []
    distances: list[int] = []

    for raw_line in stream:
        line = raw_line.rstrip("\r\n")
        if line.startswith("Time:"):
            times.extend(_read_values(line[len("Time:"):].split(), kerning))
        elif line.startswith("Distance:"):
            distances.extend(_read_values(line[len("Distance:"):].split(), kerning))

    if len(distances) < len(times):
        raise ValueError("fewer record distances than race times")

    strategies = [
        RaceStrategy(record_distance=distance, time_alloted=time)
        for time, distance in zip(times, distances)
    ]
    for strategy in strategies:
        strategy.determine_winners()
    return strategies