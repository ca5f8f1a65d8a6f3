import pytest

from advent.aoc2024.printqueue import (
    Ruleset,
    can_print,
    correct_print_request,
    parse_rules_and_pages,
)

EXAMPLE = """47|53
97|13
97|61
97|47
75|29
61|13
75|53
29|13
97|29
53|29
61|53
97|53
61|29
47|13
75|47
97|75
47|61
75|61
47|29
75|13
53|13

75,47,61,53,29
97,61,53,29,13
75,29,13
75,97,47,61,53
61,13,29
97,13,75,29,47"""


@pytest.fixture
def parsed():
    return parse_rules_and_pages(EXAMPLE.splitlines(keepends=True))


def test_parse_rules_and_pages(parsed):
    ruleset, page_lists = parsed
    assert len(page_lists) == 6
    assert len(ruleset) <= 21


def test_printable_count(parsed):
    ruleset, page_lists = parsed
    assert sum(1 for pages in page_lists if can_print(ruleset, pages)) == 3


def test_sum_of_middle_pages(parsed):
    ruleset, page_lists = parsed
    total = sum(pages[len(pages) // 2] for pages in page_lists if can_print(ruleset, pages))
    assert total == 143


def test_print_correction(parsed):
    ruleset, page_lists = parsed
    assert correct_print_request(ruleset, page_lists[3]) == [97, 75, 47, 61, 53]


def test_corrected_lists_are_printable(parsed):
    ruleset, page_lists = parsed
    for pages in page_lists:
        corrected = correct_print_request(ruleset, pages)
        assert sorted(corrected) == sorted(pages)
        assert can_print(ruleset, corrected)


def test_compare(parsed):
    ruleset, _ = parsed
    assert ruleset.compare(97, 75) == -1
    assert ruleset.compare(75, 97) == 1
    assert ruleset.compare(1, 2) == 0


def test_precedents(parsed):
    ruleset, _ = parsed
    assert ruleset.precedents(47) == [75, 97]
    assert ruleset.precedents(97) == []


def test_malformed_rule_raises():
    with pytest.raises(ValueError):
        parse_rules_and_pages(["47-53\n"])


def test_empty_ruleset_allows_anything():
    assert can_print(Ruleset(), [3, 2, 1])