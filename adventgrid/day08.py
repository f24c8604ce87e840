"""Day 8: antinodes created by pairs of same-frequency antennas."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator, Mapping, Sequence
from itertools import combinations
from pathlib import Path

from adventgrid.grid import Grid

EMPTY = "."
ANTINODE = "#"

Position = tuple[int, int]
Antennas = Mapping[str, Sequence[Position]]


def parse_antennas(text: str) -> tuple[Grid[str], dict[str, list[Position]]]:
    """Build the map grid and the positions of every antenna by frequency."""
    grid: Grid[str] = Grid()
    antennas: dict[str, list[Position]] = {}
    for row, line in enumerate(text.splitlines()):
        for col, char in enumerate(line):
            if char != EMPTY:
                antennas.setdefault(char, []).append((row, col))
        grid.add_row(line)
    return grid, antennas


def _inside(grid: Grid[str], row: int, col: int) -> bool:
    return 0 <= row < grid.num_rows and 0 <= col < grid.num_columns


def _pairs(antennas: Antennas) -> Iterator[tuple[Position, Position]]:
    for positions in antennas.values():
        if len(positions) > 1:
            yield from combinations(positions, 2)


def _count_new(grid: Grid[str], cells: set[Position]) -> int:
    # Cells already showing an antinode mark on the map are not counted again.
    return sum(grid[cell] != ANTINODE for cell in cells)


def count_antinodes(grid: Grid[str], antennas: Antennas) -> int:
    """Distinct cells one pair-distance beyond either antenna of a pair."""
    found: set[Position] = set()
    for (row1, col1), (row2, col2) in _pairs(antennas):
        drow, dcol = row2 - row1, col2 - col1
        for cell in ((row1 - drow, col1 - dcol), (row2 + drow, col2 + dcol)):
            if _inside(grid, *cell):
                found.add(cell)
    return _count_new(grid, found)


def count_resonant_antinodes(grid: Grid[str], antennas: Antennas) -> int:
    """Distinct cells on the line through each pair, antennas included.

    Multiples of the pair distance are tried up to the smaller grid side.
    """
    limit = min(grid.num_rows, grid.num_columns)
    found: set[Position] = set()
    for (row1, col1), (row2, col2) in _pairs(antennas):
        found.update(((row1, col1), (row2, col2)))
        drow, dcol = row2 - row1, col2 - col1
        for scale in range(1, limit):
            for cell in (
                (row1 - scale * drow, col1 - scale * dcol),
                (row2 + scale * drow, col2 + scale * dcol),
            ):
                if _inside(grid, *cell):
                    found.add(cell)
    return _count_new(grid, found)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count antenna antinodes.")
    parser.add_argument("path", nargs="?", default="Data.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.path).read_text()
    except OSError:
        print("File error", file=sys.stderr)
        return 1
    grid, antennas = parse_antennas(text)
    print(f"Number of unique antinode locations P1: {count_antinodes(grid, antennas)}")
    print(
        "Number of unique antinode locations P2: "
        f"{count_resonant_antinodes(grid, antennas)}"
    )
    return 0