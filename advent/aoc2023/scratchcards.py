"""Scratchcard scoring and card copying."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable

__all__ = ["Scratchcard", "find_winning_scratchcards"]


@dataclass(frozen=True)
class Scratchcard:
    """A card with its drawn numbers, winning numbers and derived score."""

    number: int
    numbers: frozenset[int]
    winning_numbers: frozenset[int]
    value: int = field(init=False)
    num_matches: int = field(init=False)

    def __post_init__(self) -> None:
        matches = len(self.numbers & self.winning_numbers)
        object.__setattr__(self, "num_matches", matches)
        object.__setattr__(self, "value", 2 ** (matches - 1) if matches else 0)


def _parse_numbers(text: str) -> frozenset[int]:
    return frozenset(int(value) for value in text.split())


def find_winning_scratchcards(stream: Iterable[str]) -> tuple[list[Scratchcard], dict[int, int]]:
    """Return the winning cards and how many copies of each card number are held."""
    cards = []
    for number, line in enumerate(stream, start=1):
        drawn_part, numbers_part = line.rstrip("\r\n").split(" | ")
        winning_part = drawn_part.split(": ")[1]
        cards.append(
            Scratchcard(number, _parse_numbers(numbers_part), _parse_numbers(winning_part))
        )

    winners = [card for card in cards if card.value > 0]

    counts = Counter(card.number for card in cards)
    for card in winners:
        copies = counts[card.number]
        for won in range(card.number + 1, card.number + card.num_matches + 1):
            counts[won] += copies

    return winners, dict(counts)