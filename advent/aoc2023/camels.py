"""Camel Cards: classifying and ranking poker-like hands."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Sequence

__all__ = [
    "Card",
    "Rule",
    "HandType",
    "Hand",
    "Wager",
    "new_hand",
    "sort_camel_card_wagers",
]


class Card(IntEnum):
    """Card ranks; a joker ranks below every other card."""

    JOKER = 0
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def label(self) -> str:
        """The character that stands for this card."""
        return _LABELS_BY_CARD[self]


_CARDS_BY_LABEL = {
    "2": Card.TWO,
    "3": Card.THREE,
    "4": Card.FOUR,
    "5": Card.FIVE,
    "6": Card.SIX,
    "7": Card.SEVEN,
    "8": Card.EIGHT,
    "9": Card.NINE,
    "T": Card.TEN,
    "J": Card.JACK,
    "Q": Card.QUEEN,
    "K": Card.KING,
    "A": Card.ACE,
}

_LABELS_BY_CARD = {card: label for label, card in _CARDS_BY_LABEL.items()}
_LABELS_BY_CARD[Card.JOKER] = "J"


class Rule(Enum):
    """Whether J is a jack or a wild joker."""

    NO_JOKERS = 0
    JOKERS_WILD = 1


class HandType(IntEnum):
    """Hand strengths, weakest first."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    FULL_HOUSE = 4
    FOUR_OF_A_KIND = 5
    FIVE_OF_A_KIND = 6


@dataclass(frozen=True)
class Hand:
    """A hand of cards and its type."""

    cards: tuple[Card, ...]
    type: HandType

    def __str__(self) -> str:
        return "".join(card.label for card in self.cards)


@dataclass(frozen=True)
class Wager:
    """A hand and the bid placed on it."""

    hand: Hand
    bid: int

    def __str__(self) -> str:
        return f"{self.hand} {self.bid}"


def _classify(counts: Counter[Card]) -> HandType:
    values = list(counts.values())
    if len(values) == 1:
        return HandType.FIVE_OF_A_KIND
    if len(values) == 2:
        if 4 in values or 1 in values:
            return HandType.FOUR_OF_A_KIND
        return HandType.FULL_HOUSE
    if len(values) == 5:
        return HandType.HIGH_CARD
    if 3 in values:
        return HandType.THREE_OF_A_KIND
    pairs = values.count(2)
    if pairs == 1:
        return HandType.ONE_PAIR
    if pairs == 2:
        return HandType.TWO_PAIR
    return HandType.HIGH_CARD


def new_hand(cards: Sequence[Card], rule: Rule = Rule.NO_JOKERS) -> Hand:
    """Build a hand, treating jokers as the most useful card under JOKERS_WILD."""
    if not cards:
        raise ValueError("a hand needs at least one card")
    counts = Counter(cards)
    if rule is Rule.JOKERS_WILD:
        jokers = counts.pop(Card.JOKER, 0)
        if counts:
            best = max(counts, key=counts.__getitem__)
        else:
            best = Card.JOKER
        counts[best] += jokers
    return Hand(cards=tuple(cards), type=_classify(counts))


def _parse_card(label: str, rule: Rule) -> Card:
    if label == "J" and rule is Rule.JOKERS_WILD:
        return Card.JOKER
    try:
        return _CARDS_BY_LABEL[label]
    except KeyError:
        raise ValueError(f"unknown card label {label!r}") from None


def _parse_wager(line: str, rule: Rule) -> Wager:
    parts = line.split()
    if len(parts) < 2:
        raise ValueError(f"malformed wager line {line!r}")
    cards = [_parse_card(label, rule) for label in parts[0]]
    return Wager(hand=new_hand(cards, rule), bid=int(parts[1]))


def sort_camel_card_wagers(
    stream: Iterable[str], rule: Rule = Rule.NO_JOKERS
) -> list[Wager]:
    """Parse wagers, one per line, and return them from weakest hand to strongest."""
    wagers = [_parse_wager(line.rstrip("\r\n"), rule) for line in stream]
    wagers.sort(key=lambda wager: (wager.hand.type, wager.hand.cards))
    return wagers