import io

from advent.aoc2023.scratchcards import Scratchcard, find_winning_scratchcards

SAMPLE = """Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53
Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19
Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1
Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83
Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36
Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11"""


def test_determine_scratchcard_valuation():
    winners, counts = find_winning_scratchcards(io.StringIO(SAMPLE))
    assert len(winners) == 4
    assert sum(w.value for w in winners) == 13
    assert sum(counts.values()) == 30


def test_winners_are_in_card_order():
    winners, _ = find_winning_scratchcards(io.StringIO(SAMPLE))
    assert [w.number for w in winners] == [1, 2, 3, 4]


def test_scratchcard_without_matches_is_worthless():
    card = Scratchcard(1, frozenset({1, 2}), frozenset({3, 4}))
    assert card.value == 0
    assert card.num_matches == 0


def test_scratchcard_value_doubles_per_extra_match():
    one = Scratchcard(1, frozenset({1, 2, 3}), frozenset({1}))
    three = Scratchcard(2, frozenset({1, 2, 3}), frozenset({1, 2, 3}))
    assert one.value == 1
    assert three.num_matches == 3
    assert three.value == 4


def test_every_card_has_at_least_one_copy():
    _, counts = find_winning_scratchcards(io.StringIO(SAMPLE))
    assert all(counts[n] >= 1 for n in range(1, 7))