import io

from advent.aoc2023.engines import (
    PartNumber,
    determine_total_gear_ratio,
    find_part_numbers,
)
from advent.location import Coordinate

SCHEMATIC = """467..114..
...*......
..35..633.
......#...
617*......
.....+.58.
..592.....
......755.
...$.*....
.664.598.."""


def test_find_part_numbers():
    parts, gears = find_part_numbers(io.StringIO(SCHEMATIC))
    assert len(parts) == 8
    assert sum(part.number for part in parts) == 4361
    assert determine_total_gear_ratio(parts, gears) == 467835


def test_gear_locations():
    _, gears = find_part_numbers(io.StringIO(SCHEMATIC))
    assert gears == {Coordinate(1, 3), Coordinate(4, 3), Coordinate(8, 5)}


def test_number_at_line_end_is_found():
    parts, _ = find_part_numbers(io.StringIO("..#\n.12"))
    assert [part.number for part in parts] == [12]
    assert parts[0].digit_locales == (Coordinate(1, 1), Coordinate(1, 2))


def test_is_adjacent_to_location():
    part = PartNumber(467, (Coordinate(0, 0), Coordinate(0, 1), Coordinate(0, 2)))
    assert part.is_adjacent_to_location(Coordinate(1, 3)) is True
    assert part.is_adjacent_to_location(Coordinate(1, 4)) is False


def test_is_adjacent_to_a_symbol():
    part = PartNumber(114, (Coordinate(0, 5), Coordinate(0, 6), Coordinate(0, 7)))
    assert part.is_adjacent_to_a_symbol({Coordinate(1, 3)}) is False
    assert part.is_adjacent_to_a_symbol({Coordinate(1, 8)}) is True


def test_gear_with_one_part_contributes_nothing():
    parts, gears = find_part_numbers(io.StringIO("12*..\n....."))
    assert determine_total_gear_ratio(parts, gears) == 0