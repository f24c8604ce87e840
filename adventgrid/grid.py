"""A rectangular grid stored in row-major order."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Grid(Generic[T]):
    """Rectangular grid of values addressed as ``grid[row, col]``."""

    def __init__(self, columns: int | None = None, data: Iterable[T] | None = None) -> None:
        self._columns = 0
        self._rows = 0
        self._cells: list[T] = []
        if columns is None:
            if data is not None:
                raise ValueError("Grid needs a column count to lay out its data.")
            return
        if columns <= 0:
            raise ValueError("Grid constructor has 0 size.")
        self._columns = columns
        if data is not None:
            cells = list(data)
            if len(cells) % columns:
                raise ValueError(
                    "Grid constructor has invalid data size that does not match column size."
                )
            self._cells = cells
            self._rows = len(cells) // columns

    def __len__(self) -> int:
        return len(self._cells)

    @property
    def num_columns(self) -> int:
        """Number of columns; assigning reshapes the grid."""
        return self._columns

    @num_columns.setter
    def num_columns(self, columns: int) -> None:
        if columns <= 0:
            raise ValueError("Received non-positive column value.")
        if len(self._cells) % columns:
            raise ValueError(
                "Current grid size does not support new column value. Violates rectangle grid."
            )
        self._columns = columns
        self._rows = len(self._cells) // columns

    @property
    def num_rows(self) -> int:
        """Number of rows."""
        return self._rows

    def add_row(self, values: Iterable[T]) -> None:
        """Append a row; the first row of an empty grid fixes the width."""
        row = list(values)
        if self._columns == 0:
            self._columns = len(row)
        elif len(row) != self._columns:
            raise ValueError(
                "Input size differs from current column size. Violates rectangle grid."
            )
        self._cells.extend(row)
        self._rows += 1

    def delete_row(self) -> None:
        """Remove the last row."""
        if self._rows == 0:
            raise IndexError("Cannot delete a row from an empty grid.")
        if self._columns:
            del self._cells[-self._columns:]
        self._rows -= 1

    def clear(self) -> None:
        """Remove every value and forget the width."""
        self._cells.clear()
        self._columns = 0
        self._rows = 0

    def _index(self, key: tuple[int, int]) -> int:
        row, col = key
        if not (0 <= row < self._rows and 0 <= col < self._columns):
            raise IndexError(f"Position ({row}, {col}) is outside the grid.")
        return row * self._columns + col

    def __getitem__(self, key: tuple[int, int]) -> T:
        return self._cells[self._index(key)]

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        self._cells[self._index(key)] = value

    def _iter_rows(self) -> Iterator[list[T]]:
        if not self._columns:
            return
        for start in range(0, len(self._cells), self._columns):
            yield self._cells[start:start + self._columns]

    def __str__(self) -> str:
        body = "".join(
            "".join(str(value) for value in row) + "\n" for row in self._iter_rows()
        )
        return f"Grid: {self._rows}x{self._columns}\n{body}"