"""Day 4: word search in a letter grid."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from adventgrid.grid import Grid

_DIRECTIONS = [(-1, -1), (-1, 0), (-1, 1), (0, -1), (0, 1), (1, -1), (1, 0), (1, 1)]


def parse_grid(text: str) -> Grid[str]:
    """One row of characters per line."""
    grid: Grid[str] = Grid()
    for line in text.splitlines():
        grid.add_row(line)
    return grid


def _inside(grid: Grid[str], row: int, col: int) -> bool:
    return 0 <= row < grid.num_rows and 0 <= col < grid.num_columns


def matches_in_direction(
    grid: Grid[str], word: str, row: int, col: int, drow: int, dcol: int
) -> bool:
    """Whether ``word`` reads from (row, col) stepping by (drow, dcol)."""
    last = len(word) - 1
    if not (_inside(grid, row, col) and _inside(grid, row + drow * last, col + dcol * last)):
        return False
    return all(
        grid[row + drow * step, col + dcol * step] == letter
        for step, letter in enumerate(word)
    )


def _start_cells(grid: Grid[str], first: str):
    for row in range(grid.num_rows):
        for col in range(grid.num_columns):
            if grid[row, col] == first:
                yield row, col


def count_words(grid: Grid[str], word: str) -> int:
    """Occurrences of ``word`` in all eight directions."""
    if not word:
        raise ValueError("Received empty match input")
    return sum(
        matches_in_direction(grid, word, row, col, drow, dcol)
        for row, col in _start_cells(grid, word[0])
        for drow, dcol in _DIRECTIONS
    )


def count_words_cross(grid: Grid[str], word: str) -> int:
    """Occurrences of two diagonal copies of ``word`` crossing in an X."""
    if not word:
        raise ValueError("Received empty match input")
    span = len(word) - 1
    count = 0
    for row, col in _start_cells(grid, word[0]):
        if matches_in_direction(grid, word, row, col, 1, 1) and (
            matches_in_direction(grid, word, row, col + span, 1, -1)
            or matches_in_direction(grid, word, row + span, col, -1, 1)
        ):
            count += 1
        if matches_in_direction(grid, word, row, col, -1, -1) and (
            matches_in_direction(grid, word, row - span, col, 1, -1)
            or matches_in_direction(grid, word, row, col - span, -1, 1)
        ):
            count += 1
    return count


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Search a letter grid.")
    parser.add_argument("path", nargs="?", default="Data.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.path).read_text()
    except OSError:
        print("File error", file=sys.stderr)
        return 1
    grid = parse_grid(text)
    print(f'"XMAS" appears {count_words(grid, "XMAS")} times.')
    print(f'"MAS" appears {count_words_cross(grid, "MAS")} times in an X pattern.')
    return 0