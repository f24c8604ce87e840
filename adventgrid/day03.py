"""Day 3: summing multiplication instructions in corrupted memory."""

from __future__ import annotations

import argparse
import re
import sys
from pathlib import Path

_MUL = re.compile(r"mul\((\d{1,3}),(\d{1,3})\)")
_INSTRUCTION = re.compile(
    r"(?P<mul>mul\((?P<a>\d{1,3}),(?P<b>\d{1,3})\))|(?P<dont>don't\(\))|(?P<do>do\(\))"
)


def sum_multiplications(text: str) -> int:
    """Sum the products of every well-formed ``mul(a,b)``."""
    return sum(int(a) * int(b) for a, b in _MUL.findall(text))


def sum_enabled_multiplications(text: str) -> int:
    """Like :func:`sum_multiplications`, honouring ``do()`` and ``don't()``."""
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(text):
        if match["dont"]:
            enabled = False
        elif match["do"]:
            enabled = True
        elif enabled:
            total += int(match["a"]) * int(match["b"])
    return total


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sum multiplication instructions.")
    parser.add_argument("path", nargs="?", default="Data.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.path).read_text()
    except OSError:
        print("File error", file=sys.stderr)
        text = ""
    print(f"Part 1 total is: {sum_multiplications(text)}")
    print(f"Part 2 total is: {sum_enabled_multiplications(text)}")
    return 0