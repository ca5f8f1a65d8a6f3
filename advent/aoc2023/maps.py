"""Walking a left/right network of nodes."""

from __future__ import annotations

import math
from itertools import cycle
from typing import Callable, Iterable

__all__ = ["determine_trip_length", "determine_ghostly_trip_length"]

_TURNS = {"L": 0, "R": 1}

_Network = dict[str, tuple[str, str]]


def _parse_instructions(text: str) -> list[int]:
    try:
        return [_TURNS[label] for label in text]
    except KeyError as error:
        raise ValueError(f"unknown instruction {error.args[0]!r}") from None


def _parse_node(text: str) -> tuple[str, tuple[str, str]]:
    name, sep, targets = text.partition(" = ")
    if not sep:
        raise ValueError(f"malformed node line {text!r}")
    left, sep, right = targets.removeprefix("(").removesuffix(")").partition(", ")
    if not sep:
        raise ValueError(f"malformed node line {text!r}")
    return name, (left, right)


def _parse(stream: Iterable[str]) -> tuple[list[int], _Network]:
    instructions: list[int] | None = None
    network: _Network = {}
    for raw_line in stream:
        line = raw_line.rstrip("\r\n")
        if not line.strip():
            continue
        if instructions is None:
            instructions = _parse_instructions(line)
        else:
            name, targets = _parse_node(line)
            network[name] = targets
    if not instructions:
        raise ValueError("no instructions given")
    return instructions, network


def _walk(
    start: str,
    instructions: list[int],
    network: _Network,
    finished: Callable[[str], bool],
) -> int:
    current = start
    turns = cycle(instructions)
    steps = 0
    while True:
        try:
            current = network[current][next(turns)]
        except KeyError:
            raise ValueError(f"unknown node {current!r}") from None
        steps += 1
        if finished(current):
            return steps


def determine_trip_length(stream: Iterable[str]) -> int:
    """Count the steps from ``AAA`` to ``ZZZ``."""
    instructions, network = _parse(stream)
    if "AAA" not in network:
        raise ValueError("no starting node AAA")
    return _walk("AAA", instructions, network, lambda name: name == "ZZZ")


def determine_ghostly_trip_length(stream: Iterable[str]) -> int:
    """Count the steps until every ``..A`` node is at a ``..Z`` node at once."""
    instructions, network = _parse(stream)
    starts = [name for name in network if name.endswith("A")]
    if not starts:
        raise ValueError("no starting nodes ending in A")
    lengths = [
        _walk(start, instructions, network, lambda name: name.endswith("Z"))
        for start in starts
    ]
    return math.lcm(*lengths)