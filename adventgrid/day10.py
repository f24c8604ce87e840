"""Day 10: hiking trails climbing from height 0 to height 9."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Sequence
from pathlib import Path

from adventgrid.grid import Grid

TRAILHEAD = 0
PEAK = 9


def parse_heights(text: str) -> Grid[int]:
    """One row of single-digit heights per line."""
    grid: Grid[int] = Grid()
    for line in text.splitlines():
        # Non-digit characters get heights that no trail can step onto.
        grid.add_row(ord(char) - ord("0") for char in line)
    return grid


def build_adjacency(grid: Grid[int]) -> tuple[list[list[int]], list[int]]:
    """Uphill-by-one neighbours of every cell, and the trailhead cells.

    Cells are numbered in row-major order. Neighbours are listed left,
    right, above, below.
    """
    columns = grid.num_columns
    adjacency: list[list[int]] = [[] for _ in range(len(grid) + 1)]
    trailheads: list[int] = []
    for row in range(grid.num_rows):
        for col in range(columns):
            here = grid[row, col]
            index = row * columns + col
            if here == TRAILHEAD:
                trailheads.append(index)
            for near_row, near_col in (
                (row, col - 1),
                (row, col + 1),
                (row - 1, col),
                (row + 1, col),
            ):
                if (
                    0 <= near_row < grid.num_rows
                    and 0 <= near_col < columns
                    and grid[near_row, near_col] == here + 1
                ):
                    adjacency[index].append(near_row * columns + near_col)
    return adjacency, trailheads


def _trail_ends(grid: Grid[int], adjacency: Sequence[Sequence[int]], pos: int) -> Iterator[int]:
    """The peak reached by every distinct trail starting at ``pos``."""
    if grid[divmod(pos, grid.num_columns)] == PEAK:
        yield pos
        return
    for following in adjacency[pos]:
        yield from _trail_ends(grid, adjacency, following)


def trail_totals(
    grid: Grid[int], adjacency: Sequence[Sequence[int]], trailheads: Iterable[int]
) -> tuple[int, int]:
    """Total score (distinct peaks reached) and rating (distinct trails)."""
    score = 0
    rating = 0
    for start in trailheads:
        if not adjacency[start]:
            continue
        ends = list(_trail_ends(grid, adjacency, start))
        rating += len(ends)
        score += len(set(ends))
    return score, rating


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score hiking trails.")
    parser.add_argument("path", nargs="?", default="Data.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.path).read_text()
    except OSError:
        print("File error", file=sys.stderr)
        return 1
    grid = parse_heights(text)
    adjacency, trailheads = build_adjacency(grid)
    score, rating = trail_totals(grid, adjacency, trailheads)
    print(f"Total score sum: {score}")
    print(f"Total rating sum: {rating}")
    return 0