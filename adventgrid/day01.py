"""Day 1: distance and similarity between two location lists."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """Read whitespace-separated pairs of integers into a left and right list."""
    left: list[int] = []
    right: list[int] = []
    tokens = iter(text.split())
    for first, second in zip(tokens, tokens):
        try:
            a, b = int(first), int(second)
        except ValueError:
            break
        left.append(a)
        right.append(b)
    return left, right


def total_distance(left: list[int], right: list[int]) -> int:
    """Sum of distances between the lists paired up in sorted order."""
    if len(left) != len(right):
        raise ValueError("Both lists must have the same length.")
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: list[int], right: list[int]) -> int:
    """Each left value times how often it appears on the right, summed."""
    counts = Counter(right)
    return sum(value * counts[value] for value in left)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compare two location lists.")
    parser.add_argument("path", nargs="?", default="Lists.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.path).read_text()
    except OSError:
        text = ""
    left, right = parse_lists(text)
    print(f"Total Distance: {total_distance(left, right)}")
    print(f"Similarity Score: {similarity_score(left, right)}")
    return 0