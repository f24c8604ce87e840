"""Day 2: safety of level reports, with and without a problem dampener."""

from __future__ import annotations

import argparse
from itertools import pairwise
from pathlib import Path


def parse_reports(text: str) -> list[list[int]]:
    """One report per non-blank line, levels separated by whitespace."""
    return [[int(level) for level in line.split()] for line in text.splitlines() if line.strip()]


def _violates(previous: int, current: int, direction: int) -> bool:
    return (
        previous == current
        or abs(previous - current) > 3
        or (direction == 1 and previous > current)
        or (direction == -1 and previous < current)
    )


def is_safe(levels: list[int]) -> bool:
    """Levels move strictly one way in steps of 1 to 3."""
    direction = 0
    for previous, current in pairwise(levels):
        if _violates(previous, current, direction):
            return False
        if direction == 0:
            direction = 1 if previous < current else -1
    return True


def _tolerates_one_fault(levels: list[int]) -> bool:
    if not levels:
        return True
    anchor = levels[0]
    direction = 0
    faults = 0
    for current in levels[1:]:
        if _violates(anchor, current, direction):
            faults += 1
            if faults > 1:
                return False
            continue
        if direction == 0:
            direction = 1 if anchor < current else -1
        anchor = current
    return True


def is_safe_with_dampener(levels: list[int]) -> bool:
    """Safe if skipping one faulty level (or the first or second) makes it safe."""
    return (
        _tolerates_one_fault(levels)
        or is_safe(levels[1:])
        or is_safe(levels[:1] + levels[2:])
    )


def count_safe(reports: list[list[int]], dampener: bool = False) -> int:
    check = is_safe_with_dampener if dampener else is_safe
    return sum(1 for report in reports if check(report))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count safe reports.")
    parser.add_argument("path", nargs="?", default="Data.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.path).read_text()
    except OSError:
        text = ""
    reports = parse_reports(text)
    print(f"Number of safe reports: {count_safe(reports)}")
    print(f"Number of safe reports with dampener: {count_safe(reports, dampener=True)}")
    return 0