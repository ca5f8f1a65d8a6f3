"""Seed-to-location lookups through a chain of category maps."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import count
from typing import Iterable

__all__ = ["SeedStrategy", "find_lowest_location"]

_NO_LOCATION = 2**63 - 1

_CATEGORIES = (
    "seed",
    "soil",
    "fertilizer",
    "water",
    "light",
    "temperature",
    "humidity",
    "location",
)
_PROGRESSION = tuple(zip(_CATEGORIES, _CATEGORIES[1:]))


class SeedStrategy(Enum):
    """How the numbers on the ``seeds:`` line are read."""

    DIRECT = 0
    PAIRWISE = 1


@dataclass(frozen=True)
class _CategoryMap:
    src_start: int
    dest_start: int
    width: int

    def forward(self, value: int) -> int | None:
        if self.src_start <= value < self.src_start + self.width:
            return self.dest_start + (value - self.src_start)
        return None

    def backward(self, value: int) -> int | None:
        if self.dest_start <= value < self.dest_start + self.width:
            return self.src_start + (value - self.dest_start)
        return None


@dataclass(frozen=True)
class _SeedRange:
    start: int
    end: int

    def __contains__(self, seed: int) -> bool:
        return self.start <= seed <= self.end


_Maps = dict[tuple[str, str], list[_CategoryMap]]


def _parse_numbers(text: str) -> list[int]:
    return [int(value) for value in text.split()]


def _location_of(seed: int, maps: _Maps) -> int:
    value = seed
    for key in _PROGRESSION:
        for category_map in maps.get(key, ()):
            mapped = category_map.forward(value)
            if mapped is not None:
                value = mapped
                break
    return value


def _seed_of(location: int, maps: _Maps) -> int:
    value = location
    for key in reversed(_PROGRESSION):
        for category_map in maps.get(key, ()):
            mapped = category_map.backward(value)
            if mapped is not None:
                value = mapped
                break
    return value


def _min_location_in_ranges(seed_ranges: list[_SeedRange], maps: _Maps) -> int:
    if not seed_ranges:
        return _NO_LOCATION
    for location in count():
        seed = _seed_of(location, maps)
        if any(seed in seed_range for seed_range in seed_ranges):
            return location
    return _NO_LOCATION


def find_lowest_location(
    stream: Iterable[str], strategy: SeedStrategy = SeedStrategy.DIRECT
) -> int:
    """Return the lowest location reachable from any of the almanac's seeds."""
    seeds: list[int] = []
    seed_ranges: list[_SeedRange] = []
    maps: _Maps = {}
    current_key = ("", "")

    for raw_line in stream:
        line = raw_line.rstrip("\r\n")
        if not line.strip():
            continue
        if line.startswith("seeds: "):
            values = _parse_numbers(line[len("seeds: "):])
            if strategy is SeedStrategy.PAIRWISE:
                seed_ranges.extend(
                    _SeedRange(start, start + length - 1)
                    for start, length in zip(values[0::2], values[1::2])
                )
            else:
                seeds = values
        elif line.endswith(" map:"):
            source, destination = line[: -len(" map:")].split("-to-")
            current_key = (source, destination)
        else:
            dest_start, src_start, width = _parse_numbers(line)[:3]
            maps.setdefault(current_key, []).append(
                _CategoryMap(src_start=src_start, dest_start=dest_start, width=width)
            )

    for category_maps in maps.values():
        category_maps.sort(key=lambda category_map: category_map.src_start)

    if seeds:
        return min(_NO_LOCATION, *(_location_of(seed, maps) for seed in seeds))
    return _min_location_in_ranges(seed_ranges, maps)