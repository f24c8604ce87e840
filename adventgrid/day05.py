"""Day 5: page ordering rules for safety manual updates."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Mapping, Sequence, Set
from pathlib import Path

_RULE = re.compile(r"(\d+)\|(\d+)")
_PAGE = re.compile(r"\d+")

Rules = Mapping[int, Set[int]]


def parse_input(text: str) -> tuple[dict[int, set[int]], list[list[int]]]:
    """Split the input into ordering rules and page updates.

    Rules come first, one ``a|b`` per line, meaning page ``a`` must be
    printed before page ``b``. After a blank line each line is one update.
    """
    rules: dict[int, set[int]] = {}
    updates: list[list[int]] = []
    in_updates = False
    for line in text.splitlines():
        if not line.strip():
            in_updates = True
            continue
        if not in_updates:
            match = _RULE.search(line)
            if match is None:
                raise ValueError(f"Malformed ordering rule: {line!r}")
            before, after = int(match[1]), int(match[2])
            rules.setdefault(before, set()).add(after)
        else:
            updates.append([int(page) for page in _PAGE.findall(line)])
    return rules, updates


def is_correctly_ordered(rules: Rules, pages: Sequence[int]) -> bool:
    """Whether no page is preceded by a page that the rules say must follow it."""
    return not any(
        earlier in rules.get(page, ())
        for position, page in enumerate(pages)
        for earlier in pages[:position]
    )


def fix_order(rules: Rules, pages: Sequence[int]) -> list[int]:
    """Return the pages reordered by swapping rule violations until none remain."""
    result = list(pages)
    while True:
        for i in range(1, len(result)):
            for j in range(i):
                if result[j] in rules.get(result[i], ()):
                    result[i], result[j] = result[j], result[i]
        if is_correctly_ordered(rules, result):
            return result


def middle_page_sums(rules: Rules, updates: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Sum of middle pages of correct updates, and of incorrect ones once fixed."""
    correct = 0
    fixed = 0
    for pages in updates:
        if is_correctly_ordered(rules, pages):
            correct += pages[len(pages) // 2]
        else:
            reordered = fix_order(rules, pages)
            fixed += reordered[len(reordered) // 2]
    return correct, fixed


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check page update ordering.")
    parser.add_argument("path", nargs="?", default="Data.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.path).read_text()
    except OSError:
        print("File error", file=sys.stderr)
        return 1
    rules, updates = parse_input(text)
    correct, fixed = middle_page_sums(rules, updates)
    print(f"The sum of the middle terms of the correct page updates is {correct}")
    print(f"The sum of the middle terms of the incorrect page updates is {fixed}")
    return 0