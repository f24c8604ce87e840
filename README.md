# adventgrid

Solvers for ten daily programming puzzles: paired lists (`day01`), level
reports (`day02`), corrupted instructions (`day03`), word searches (`day04`),
page ordering (`day05`), guard patrols (`day06`), calibration equations
(`day07`), antenna antinodes (`day08`), disk compaction (`day09`) and hiking
trails (`day10`). It also includes `Grid`, a rectangular grid container that
the grid puzzles share. The package has no dependencies beyond the standard
library.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Command line

Each puzzle has its own command. Each command takes one optional argument,
the path of the puzzle input, and prints the answers to both parts:

```
adventgrid-day01 [path]    # default path: Lists.txt
adventgrid-day02 [path]    # default path: Data.txt
adventgrid-day03 [path]    # default path: Data.txt
adventgrid-day04 [path]    # default path: Data.txt
adventgrid-day05 [path]    # default path: Data.txt
adventgrid-day06 [path]    # default path: Data.txt
adventgrid-day07 [path]    # default path: Data.txt
adventgrid-day08 [path]    # default path: Data.txt
adventgrid-day09 [path]    # default path: Data.txt
adventgrid-day10 [path]    # default path: Data.txt
```

If the file cannot be read, most commands print `File error` and exit with
status 1. `adventgrid-day01` and `adventgrid-day02` instead treat a missing
file as empty input, and `adventgrid-day03` prints `File error` and carries on
with empty input. `adventgrid-day06` also prints how many milliseconds the
route and loop search took.

## Library use

The solvers can also be called directly:

```python
from adventgrid import day01, day03, day09

left = [3, 4, 2, 1, 3, 3]
right = [4, 3, 5, 3, 9, 3]
day01.total_distance(left, right)     # 11
day01.similarity_score(left, right)   # 31

memory = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"
day03.sum_multiplications(memory)          # 161
day03.sum_enabled_multiplications(memory)  # 48

disk = day09.create_disk("2333133121414131402")
day09.checksum(day09.compress_blocks(disk))  # 1928
day09.checksum(day09.compress_files(disk))   # 2858
```

Every puzzle module has a parser for its input text (`day01.parse_lists`,
`day02.parse_reports`, `day04.parse_grid`, `day05.parse_input`,
`day06.parse_map`, `day07.parse_equations`, `day08.parse_antennas`,
`day10.parse_heights`) and functions for each part, for example
`day02.count_safe(reports, dampener=True)`, `day05.middle_page_sums`,
`day07.calibration_totals`, `day08.count_resonant_antinodes` and
`day10.trail_totals`. In `day06`, the guard's heading is a `Direction` enum
(`UP`, `RIGHT`, `DOWN`, `LEFT`); `run_patrol_route` and
`find_obstruction_loops` mark the visited cells on the grid they are given.

## The grid

`adventgrid.grid.Grid` holds values row by row with a fixed number of columns:

```python
from adventgrid.grid import Grid

grid = Grid(3, [1, 2, 3, 4, 5, 6])   # 2 rows of 3
grid[1, 2]            # 6
grid[0, 0] = 9
grid.add_row([7, 8, 9])
grid.num_rows         # 3
grid.num_columns = 9  # reshape to 1 row of 9
len(grid)             # 9
print(grid)           # "Grid: 1x9" followed by the rows
```

`Grid()` starts empty and takes its width from the first row added. A row of
the wrong width, a column count that does not divide the number of values, or
a zero column count raises `ValueError`; a position outside the grid, or
`delete_row` on an empty grid, raises `IndexError`. `clear` empties the grid
and forgets its width.