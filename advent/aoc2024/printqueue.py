"""Page ordering rules for a print queue."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, Sequence

__all__ = ["Ruleset", "parse_rules_and_pages", "can_print", "correct_print_request"]


class Ruleset(dict):
    """Maps each page to the set of pages that must be printed before it."""

    def precedents(self, page: int) -> list[int]:
        """Return the pages that must come before ``page``, in ascending order."""
        return sorted(self.get(page, ()))

    def compare(self, page_a: int, page_b: int) -> int:
        """Return 1 if ``page_b`` must precede ``page_a``, -1 for the reverse, else 0."""
        if page_b in self.get(page_a, ()):
            return 1
        if page_a in self.get(page_b, ()):
            return -1
        return 0


def parse_rules_and_pages(stream: Iterable[str]) -> tuple[Ruleset, list[list[int]]]:
    """Parse ``a|b`` rules, a blank line, then comma-separated page lists."""
    ruleset = Ruleset()
    page_lists: list[list[int]] = []
    parsing_rules = True
    for raw_line in stream:
        line = raw_line.rstrip("\r\n")
        if line == "":
            parsing_rules = False
            continue
        if parsing_rules:
            parent, sep, child = line.partition("|")
            if not sep:
                raise ValueError(f"malformed rule {line!r}")
            ruleset.setdefault(int(child), set()).add(int(parent))
        else:
            page_lists.append([int(page) for page in line.split(",")])
    return ruleset, page_lists


def can_print(ruleset: Ruleset, pages: Sequence[int]) -> bool:
    """Whether ``pages`` respects every rule among the requested pages."""
    requested = set(pages)
    printed: set[int] = set()
    for page in pages:
        for precedent in ruleset.precedents(page):
            if precedent in requested and precedent not in printed:
                return False
        printed.add(page)
    return True


def correct_print_request(ruleset: Ruleset, pages: Sequence[int]) -> list[int]:
    """Return the pages stably reordered so that the rules are respected."""
    return sorted(pages, key=cmp_to_key(ruleset.compare))