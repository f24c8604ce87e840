"""Day 6: a guard's patrol route and obstructions that trap it in a loop."""

from __future__ import annotations

import argparse
import sys
import time
from enum import Enum
from pathlib import Path

from adventgrid.grid import Grid

OBSTACLE = "#"


class Direction(Enum):
    """Heading of the guard, valued by the symbol used on the map."""

    UP = "^"
    RIGHT = ">"
    DOWN = "v"
    LEFT = "<"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    def turned_right(self) -> Direction:
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % len(_CLOCKWISE)]


_DELTAS = {
    Direction.UP: (-1, 0),
    Direction.RIGHT: (0, 1),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
}
_CLOCKWISE = [Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT]
_GUARDS = {direction.value: direction for direction in Direction}


def parse_map(text: str) -> tuple[Grid[str], int, int, Direction]:
    """Build the map grid and locate the guard (the last one found wins)."""
    grid: Grid[str] = Grid()
    guard: tuple[int, int, Direction] | None = None
    for row, line in enumerate(text.splitlines()):
        for col, char in enumerate(line):
            if char in _GUARDS:
                guard = (row, col, _GUARDS[char])
        grid.add_row(line)
    if guard is None:
        raise ValueError("No guard found on the map.")
    return (grid, *guard)


def count_char(grid: Grid[str], char: str = "X") -> int:
    """Number of cells holding ``char``."""
    return sum(
        grid[row, col] == char
        for row in range(grid.num_rows)
        for col in range(grid.num_columns)
    )


def _inside(grid: Grid[str], row: int, col: int) -> bool:
    return 0 <= row < grid.num_rows and 0 <= col < grid.num_columns


def _step(
    grid: Grid[str], row: int, col: int, direction: Direction
) -> tuple[int, int, Direction] | None:
    """Next guard state, or None once the guard would leave the map."""
    drow, dcol = direction.delta
    ahead_row, ahead_col = row + drow, col + dcol
    if not _inside(grid, ahead_row, ahead_col):
        return None
    if grid[ahead_row, ahead_col] == OBSTACLE:
        return row, col, direction.turned_right()
    return ahead_row, ahead_col, direction


def run_patrol_route(grid: Grid[str], row: int, col: int, direction: Direction) -> None:
    """Walk the guard off the map, marking every visited cell with ``X``."""
    state: tuple[int, int, Direction] | None = (row, col, direction)
    if not _inside(grid, row, col):
        return
    while state is not None:
        row, col, direction = state
        grid[row, col] = "X"
        state = _step(grid, row, col, direction)


def is_loop(grid: Grid[str], row: int, col: int, direction: Direction) -> bool:
    """Whether the guard, starting here, walks forever instead of leaving."""
    seen: set[tuple[int, int, Direction]] = set()
    state: tuple[int, int, Direction] | None = (row, col, direction)
    if not _inside(grid, row, col):
        return False
    while state is not None:
        if state in seen:
            return True
        seen.add(state)
        state = _step(grid, *state)
    return False


def find_obstruction_loops(
    grid: Grid[str], row: int, col: int, direction: Direction, mark: str = "X"
) -> list[tuple[int, int]]:
    """Cells where one new obstruction would trap the guard in a loop.

    The guard's path is marked with ``mark`` along the way. Each cell the
    guard is about to enter is tried once, the first time it is reached.
    """
    loops: list[tuple[int, int]] = []
    tried: set[tuple[int, int]] = set()
    while _inside(grid, row, col):
        grid[row, col] = mark
        drow, dcol = direction.delta
        ahead = (row + drow, col + dcol)
        if not _inside(grid, *ahead):
            break
        if grid[ahead] == OBSTACLE:
            direction = direction.turned_right()
            continue
        if ahead not in tried:
            tried.add(ahead)
            grid[ahead] = OBSTACLE
            if is_loop(grid, row, col, direction):
                loops.append(ahead)
            grid[ahead] = mark
        row, col = ahead
    return loops


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Trace the guard's patrol.")
    parser.add_argument("path", nargs="?", default="Data.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.path).read_text()
    except OSError:
        print("File error", file=sys.stderr)
        return 1
    grid, row, col, direction = parse_map(text)
    start = time.perf_counter()
    run_patrol_route(grid, row, col, direction)
    loops = find_obstruction_loops(grid, row, col, direction)
    elapsed = int((time.perf_counter() - start) * 1000)
    print(f"TIME TO RUN: {elapsed} MILLISECONDS.")
    print(
        "Number of distinct positions guard will visit before leaving area: "
        f"{count_char(grid)}"
    )
    print(f"Number of different positions choosable for a new obstruction: {len(loops)}")
    return 0