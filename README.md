# advent

Solvers for Advent of Code puzzles from 2023 and 2024, together with the
small helpers they share: grid coordinates and compass directions, min and
max heaps, and a function that downloads a day's puzzle input.

The package has no dependencies outside the standard library.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the solvers

Every solver reads puzzle input from an iterable of text lines, so an open
text file, an `io.StringIO` or a plain list of strings all work.

```python
import io

from advent.aoc2023.trebuchet import process_calibration_document
from advent.aoc2024.historian import similarity_score
from advent.aoc2024.wordsearch import count_xmases

with open("day01.txt") as stream:
    print(process_calibration_document(stream))

print(similarity_score(io.StringIO("3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n")))  # 31

with open("day04.txt") as stream:
    print(count_xmases(stream))
```

The 2023 puzzles live in `advent.aoc2023`:

- `trebuchet` – `process_calibration_document`, `calibration_value`
- `cubes` – `find_possible_games` with `limited_colors(...)`, `find_minimum_viable_game_configs`
- `engines` – `find_part_numbers`, `determine_total_gear_ratio`
- `scratchcards` – `find_winning_scratchcards`
- `almanac` – `find_lowest_location` with `SeedStrategy.DIRECT` or `SeedStrategy.PAIRWISE`
- `boatrace` – `find_winning_race_strategies` with `Kerning.BAD` or `Kerning.GOOD`
- `camels` – `sort_camel_card_wagers` with `Rule.NO_JOKERS` or `Rule.JOKERS_WILD`, `new_hand`
- `maps` – `determine_trip_length`, `determine_ghostly_trip_length`
- `sensors` – `extrapolate_sensor_readings`, `extrapolate`
- `pipes` – `distance_to_furthest_pipe_from_start`

The 2024 puzzles live in `advent.aoc2024`:

- `historian` – `match_pairs`, `find_total_distance`, `do_find_total_distance`, `similarity_score`
- `reports` – `parse_reports`, `is_safe`, `is_safe_with_tolerance`
- `mulling` – `find_instructions`, `find_doables`
- `wordsearch` – `count_xmases`, `count_xs`
- `printqueue` – `parse_rules_and_pages`, `can_print`, `correct_print_request`
- `gallivant` – `parse_map`, `simulate_patrol`, `introduce_obstacles`
  (`simulate_patrol` raises `CycleDetected` when the guard loops)
- `bridgerepair` – `parse_calibration_equations`; `PartialEquation.could_be_made_true(*ALL_OPERATORS)`
  considers concatenation as well as `+` and `*`
- `collinearity` – `find_antennae`, `find_antinodes`, `find_resonant_antinodes`

## Helpers

- `advent.location` – `Coordinate` (row/column, with `neighbors`, `with_next_n`,
  `in_bounds`, `delta`), `CardinalDirection`, `Point`, `Vector`, `VECTORS`,
  `Rotation` and `Slope`.
- `advent.points` – a plain two-dimensional `Point` with `manhattan_distance`.
- `advent.heaps` – `MinHeap` and `MaxHeap` with `push`, `pop` and `len()`;
  popping an empty heap raises `IndexError`.

## Fetching input

`advent.fetch.fetch_input(year, day, session_id)` downloads a day's input,
sending the session cookie, and returns the open HTTP response; read its
bytes and decode them, and close it when done. It prints how long the
download took. `fetch_test_input(day, session_id)` does the same for the
current year. Network errors are raised as `OSError`.

## Command line

The `advent` command fetches a day's input and prints the answer of one
solver: the number of resonant antinodes (`advent.aoc2024.collinearity`).

```
DAY=8 YEAR=2024 SESSION_ID=placeholder advent
```

- `DAY` or `--day` – the puzzle day to fetch
- `YEAR` or `--year` – the event year; defaults to the current year
- `SESSION_ID` – your session cookie

It exits with status 1 if the input cannot be fetched.

## What it does not do

The command runs only the antinode solver; there is no option to pick
another puzzle or part from the command line. The other solvers are used
from Python.