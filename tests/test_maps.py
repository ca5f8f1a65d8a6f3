import io

import pytest

from advent.aoc2023.maps import determine_ghostly_trip_length, determine_trip_length


def _network(instructions, nodes):
    lines = [instructions, ""]
    lines.extend(f"{name} = ({left}, {right})" for name, (left, right) in nodes.items())
    return "\n".join(lines)


FIRST = _network(
    "RL",
    {
        "AAA": ("BBB", "CCC"),
        "BBB": ("DDD", "EEE"),
        "CCC": ("ZZZ", "GGG"),
        "DDD": ("DDD", "DDD"),
        "EEE": ("EEE", "EEE"),
        "GGG": ("GGG", "GGG"),
        "ZZZ": ("ZZZ", "ZZZ"),
    },
)

SECOND = _network(
    "LLR",
    {
        "AAA": ("BBB", "BBB"),
        "BBB": ("AAA", "ZZZ"),
        "ZZZ": ("ZZZ", "ZZZ"),
    },
)

GHOSTLY = _network(
    "LR",
    {
        "11A": ("11B", "XXX"),
        "11B": ("XXX", "11Z"),
        "11Z": ("11B", "XXX"),
        "22A": ("22B", "XXX"),
        "22B": ("22C", "22C"),
        "22C": ("22Z", "22Z"),
        "22Z": ("22B", "22B"),
        "XXX": ("XXX", "XXX"),
    },
)


@pytest.mark.parametrize("text, expected", [(FIRST, 2), (SECOND, 6)])
def test_determine_trip_length(text, expected):
    assert determine_trip_length(io.StringIO(text)) == expected


def test_determine_ghostly_trip_length():
    assert determine_ghostly_trip_length(io.StringIO(GHOSTLY)) == 6


def test_missing_start_raises():
    with pytest.raises(ValueError):
        determine_trip_length(io.StringIO("L\n\nBBB = (BBB, BBB)"))


def test_unknown_instruction_raises():
    with pytest.raises(ValueError):
        determine_trip_length(io.StringIO("LX\n\nAAA = (ZZZ, ZZZ)"))


def test_unknown_target_node_raises():
    with pytest.raises(ValueError):
        determine_trip_length(io.StringIO("L\n\nAAA = (QQQ, QQQ)"))