"""Cube games: which games a bag could have produced, and the smallest bag for each."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Iterable

__all__ = [
    "Color",
    "Round",
    "Game",
    "Constraint",
    "limited_colors",
    "find_possible_games",
    "find_minimum_viable_game_configs",
]


class Color(Enum):
    """Cube colours."""

    RED = 0
    BLUE = 1
    GREEN = 2


_COLORS_BY_NAME = {color.name.lower(): color for color in Color}


@dataclass(frozen=True)
class Round:
    """One handful of cubes shown from the bag."""

    cubes: tuple[Color, ...]
    counts: Counter[Color] = field(init=False, compare=False, hash=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "counts", Counter(self.cubes))


@dataclass(frozen=True)
class Game:
    """A numbered game and the rounds played in it."""

    number: int
    rounds: tuple[Round, ...]


Constraint = Callable[[Game], bool]


def limited_colors(max_red: int, max_blue: int, max_green: int) -> Constraint:
    """Return a constraint met by games whose rounds never exceed the given counts."""
    limits = {Color.RED: max_red, Color.BLUE: max_blue, Color.GREEN: max_green}

    def constraint(game: Game) -> bool:
        return all(
            round_.counts[color] <= limit
            for round_ in game.rounds
            for color, limit in limits.items()
        )

    return constraint


def _parse_cubes(text: str) -> list[Color]:
    cubes: list[Color] = []
    for part in text.split(", "):
        fields = part.split()
        if len(fields) < 2:
            raise ValueError(f"malformed cube count {part!r}")
        try:
            color = _COLORS_BY_NAME[fields[1]]
        except KeyError:
            raise ValueError(f"unknown cube colour {fields[1]!r}") from None
        cubes.extend([color] * int(fields[0]))
    return cubes


def _parse_game(line: str) -> Game:
    header, sep, rounds_text = line.partition(": ")
    if not sep:
        raise ValueError(f"malformed game line {line!r}")
    number = int(header.removeprefix("Game "))
    rounds = tuple(Round(tuple(_parse_cubes(raw))) for raw in rounds_text.split("; "))
    return Game(number=number, rounds=rounds)


def _parse_games(stream: Iterable[str]) -> list[Game]:
    return [
        _parse_game(line.rstrip("\r\n"))
        for line in stream
        if line.strip()
    ]


def find_possible_games(stream: Iterable[str], *constraints: Constraint) -> list[Game]:
    """Return the games that satisfy every constraint, in input order."""
    return [
        game
        for game in _parse_games(stream)
        if all(constraint(game) for constraint in constraints)
    ]


def _minimum_config(game: Game) -> dict[Color, int]:
    return {
        color: max(round_.counts[color] for round_ in game.rounds)
        for color in (Color.RED, Color.BLUE, Color.GREEN)
    }


def find_minimum_viable_game_configs(stream: Iterable[str]) -> list[dict[Color, int]]:
    """Return, per game, the fewest cubes of each colour that make it possible."""
    return [_minimum_config(game) for game in _parse_games(stream)]