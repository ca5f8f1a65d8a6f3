import pytest

from advent.location import (
    VECTORS,
    CardinalDirection,
    Coordinate,
    Point,
    Rotation,
    Slope,
    Vector,
)


def test_neighbors_are_eight_distinct_adjacent_cells():
    c = Coordinate(5, 7)
    neighbors = c.neighbors()
    assert len(set(neighbors)) == 8
    assert c not in neighbors
    assert all(max(abs(n.row - c.row), abs(n.col - c.col)) == 1 for n in neighbors)


def test_neighbors_start_north_and_go_clockwise():
    c = Coordinate(5, 7)
    neighbors = c.neighbors()
    assert neighbors[CardinalDirection.NORTH] == Coordinate(4, 7)
    assert neighbors[CardinalDirection.WEST] == Coordinate(5, 6)


def test_with_next_n_east():
    assert Coordinate(0, 0).with_next_n(3, CardinalDirection.EAST) == [
        Coordinate(0, 0),
        Coordinate(0, 1),
        Coordinate(0, 2),
        Coordinate(0, 3),
    ]


@pytest.mark.parametrize("direction", list(CardinalDirection))
def test_with_next_n_is_sorted_line_including_start(direction):
    start = Coordinate(10, 10)
    cells = start.with_next_n(3, direction)
    assert len(cells) == 4
    assert start in cells
    assert cells == sorted(cells, key=lambda c: (c.row, c.col))
    steps = {cells[i + 1].delta(cells[i]) for i in range(len(cells) - 1)}
    assert len(steps) == 1


def test_opposite_directions_cover_same_cells():
    start = Coordinate(3, 3)
    north = set(start.with_next_n(3, CardinalDirection.NORTH))
    south_from_top = set(Coordinate(0, 3).with_next_n(3, CardinalDirection.SOUTH))
    assert north == south_from_top


@pytest.mark.parametrize(
    "coordinate, expected",
    [
        (Coordinate(0, 0), True),
        (Coordinate(-1, 0), False),
        (Coordinate(0, -1), False),
        (Coordinate(4, 0), False),
        (Coordinate(0, 4), False),
        (Coordinate(3, 3), True),
    ],
)
def test_in_bounds(coordinate, expected):
    assert coordinate.in_bounds(4, 4) is expected


def test_delta_round_trip():
    a, b = Coordinate(8, 2), Coordinate(3, 9)
    d = a.delta(b)
    assert Coordinate(b.row + d.row, b.col + d.col) == a
    assert a.delta(a) == Coordinate(0, 0)


def test_reverse_follows_modulo_four_rule():
    assert CardinalDirection.NORTH.reverse() == CardinalDirection.EAST
    assert CardinalDirection.EAST.reverse() == CardinalDirection.NORTH
    assert all(d.reverse() < 4 for d in CardinalDirection)


def test_rotate_four_times_is_identity():
    p = Point(3, -7, 2, 1)
    q = p
    for _ in range(4):
        q = q.rotate90(Rotation.CLOCKWISE)
    assert q == p


def test_rotate_clockwise_then_counterclockwise_is_identity():
    p = Point(5, 9)
    assert p.rotate90(Rotation.CLOCKWISE).rotate90(Rotation.COUNTERCLOCKWISE) == p


def test_rotation_preserves_distance_from_origin():
    p = Point(4, -6)
    origin = Point()
    assert p.rotate90(Rotation.CLOCKWISE).manhattan_distance(origin) == p.manhattan_distance(origin)


def test_add_and_subtract_round_trip():
    a, b = Point(2, 3), Point(-7, 11)
    assert a.add(b).add(Point(-b.x, -b.y)) == a


def test_point_neighbors_are_distinct_and_unit_away_or_diagonal():
    p = Point(1, 1)
    neighbors = p.neighbors()
    assert len(set(neighbors)) == 6
    assert all(1 <= p.manhattan_distance(n) <= 2 for n in neighbors)


def test_vectors_are_unit_steps_in_four_directions():
    assert {v.direction for v in VECTORS} == {
        CardinalDirection.NORTH,
        CardinalDirection.EAST,
        CardinalDirection.SOUTH,
        CardinalDirection.WEST,
    }
    assert all(v.point.manhattan_distance(Point()) == 1 for v in VECTORS)


def test_vector_and_slope_are_value_objects():
    assert Vector(Point(0, 1), CardinalDirection.EAST) == VECTORS[0]
    assert Slope(1, 2) == Slope(1, 2)