"""Day 7: calibration equations solved with add, multiply and concatenate."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterable, Sequence
from itertools import product
from operator import add, mul
from pathlib import Path

_NUMBER = re.compile(r"\d+")

Operator = Callable[[int, int], int]


def _concat(left: int, right: int) -> int:
    return int(f"{left}{right}")


def parse_equations(text: str) -> list[list[int]]:
    """One equation per non-blank line: the target followed by its operands."""
    equations = []
    for line in text.splitlines():
        numbers = [int(token) for token in _NUMBER.findall(line)]
        if numbers:
            equations.append(numbers)
    return equations


def _evaluate(operands: Sequence[int], operators: Iterable[Operator]) -> int:
    value = operands[0]
    for operator, operand in zip(operators, operands[1:]):
        value = operator(value, operand)
    return value


def _solvable(nums: Sequence[int], operators: Sequence[Operator]) -> bool:
    if len(nums) < 2:
        return False
    target, operands = nums[0], nums[1:]
    return any(
        _evaluate(operands, combination) == target
        for combination in product(operators, repeat=len(operands) - 1)
    )


def is_valid_add_mul(nums: Sequence[int]) -> bool:
    """Whether the target is reached with ``+`` and ``*`` evaluated left to right."""
    return _solvable(nums, (add, mul))


def is_valid_with_concat(nums: Sequence[int]) -> bool:
    """Like :func:`is_valid_add_mul`, also allowing digit concatenation."""
    return _solvable(nums, (add, mul, _concat))


def calibration_totals(equations: Iterable[Sequence[int]]) -> tuple[int, int]:
    """Sum of targets of valid equations without and with concatenation."""
    without_concat = 0
    with_concat = 0
    for nums in equations:
        if is_valid_add_mul(nums):
            without_concat += nums[0]
        if is_valid_with_concat(nums):
            with_concat += nums[0]
    return without_concat, with_concat


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Check calibration equations.")
    parser.add_argument("path", nargs="?", default="Data.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.path).read_text()
    except OSError:
        print("File error", file=sys.stderr)
        return 1
    part1, part2 = calibration_totals(parse_equations(text))
    print(f"Total calibration result Part1: {part1}")
    print(f"Total calibration result Part2: {part2}")
    return 0