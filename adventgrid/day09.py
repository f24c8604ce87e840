"""Day 9: compacting an amphipod's disk and computing its checksum."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

FREE = -1
_DIGITS = frozenset("0123456789")


def create_disk(disk_map: str) -> list[int]:
    """Expand a dense disk map into blocks: file ids, or ``FREE`` for free space."""
    disk: list[int] = []
    for position, char in enumerate(disk_map):
        if char not in _DIGITS:
            raise ValueError(f"Invalid disk map character: {char!r}")
        block = position // 2 if position % 2 == 0 else FREE
        disk.extend([block] * int(char))
    return disk


def compress_blocks(disk: Sequence[int]) -> list[int]:
    """Move file blocks one at a time from the end into the leftmost free block."""
    result = list(disk)
    left, right = 0, len(result) - 1
    while left < right:
        if result[left] != FREE:
            left += 1
        elif result[right] == FREE:
            right -= 1
        else:
            result[left], result[right] = result[right], FREE
    return result


def _free_span(disk: Sequence[int], size: int, limit: int) -> int | None:
    """Start of the leftmost run of ``size`` free blocks ending before ``limit``."""
    run = 0
    for index, block in enumerate(disk[:limit]):
        if block == FREE:
            run += 1
            if run == size:
                return index - size + 1
        else:
            run = 0
    return None


def compress_files(disk: Sequence[int]) -> list[int]:
    """Move whole files, rightmost first, into the leftmost free span that fits."""
    result = list(disk)
    end = len(result)
    while end > 0:
        while end > 0 and result[end - 1] == FREE:
            end -= 1
        if end == 0:
            break
        file_id = result[end - 1]
        start = end - 1
        while start > 0 and result[start - 1] == file_id:
            start -= 1
        size = end - start
        target = _free_span(result, size, start)
        if target is not None:
            result[target:target + size] = [file_id] * size
            result[start:end] = [FREE] * size
        end = start
    return result


def checksum(disk: Sequence[int]) -> int:
    """Sum of position times file id over all used blocks."""
    return sum(position * block for position, block in enumerate(disk) if block != FREE)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Compact a disk map.")
    parser.add_argument("path", nargs="?", default="Data.txt")
    args = parser.parse_args(argv)
    try:
        text = Path(args.path).read_text()
    except OSError:
        print("File error", file=sys.stderr)
        return 1
    lines = text.splitlines()
    disk = create_disk(lines[0] if lines else "")
    print(f"Part 1 checksum: {checksum(compress_blocks(disk))}")
    print(f"Part 2 checksum: {checksum(compress_files(disk))}")
    return 0