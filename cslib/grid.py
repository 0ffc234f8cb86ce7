"""A two-dimensional array stored in row-major order."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Any

from cslib.gtypes import real_to_string


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return real_to_string(value)
    return str(value)


class _GridRow:
    """A view of one row of a grid that supports ``grid[row][col]``."""

    __slots__ = ("_grid", "_row")

    def __init__(self, grid: Grid, row: int) -> None:
        self._grid = grid
        self._row = row

    def __getitem__(self, col: int) -> Any:
        if not self._grid.in_bounds(self._row, col):
            raise IndexError("Grid index values out of range")
        return self._grid._elements[self._row * self._grid.num_cols() + col]

    def __setitem__(self, col: int, value: Any) -> None:
        if not self._grid.in_bounds(self._row, col):
            raise IndexError("Grid index values out of range")
        self._grid._elements[self._row * self._grid.num_cols() + col] = value


class Grid:
    """An indexed, two-dimensional array of values.

    Elements are addressed as ``grid[row, col]`` or ``grid[row][col]``.
    Negative indices are out of bounds; they do not count from the end.
    Iteration visits the elements in row-major order.
    """

    def __init__(self, n_rows: int = 0, n_cols: int = 0, default: Any = None) -> None:
        self._default = default
        self._n_rows = 0
        self._n_cols = 0
        self._elements: list[Any] = []
        self.resize(n_rows, n_cols)

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[Any]]) -> Grid:
        """Build a grid from a sequence of equally long rows."""
        rows = [list(row) for row in rows]
        n_rows = len(rows)
        n_cols = len(rows[0]) if rows else 0
        if any(len(row) != n_cols for row in rows):
            raise ValueError("Grid rows must all have the same length")
        grid = cls(n_rows, n_cols)
        grid._elements = [value for row in rows for value in row]
        return grid

    def num_rows(self) -> int:
        """Return the number of rows."""
        return self._n_rows

    def num_cols(self) -> int:
        """Return the number of columns."""
        return self._n_cols

    def resize(self, n_rows: int, n_cols: int) -> None:
        """Reshape the grid, discarding its contents and refilling with the default."""
        if n_rows < 0 or n_cols < 0:
            raise ValueError(
                f"Attempt to resize grid to invalid size ({n_rows}, {n_cols})"
            )
        self._n_rows = n_rows
        self._n_cols = n_cols
        self._elements = [self._default] * (n_rows * n_cols)

    def in_bounds(self, row: int, col: int) -> bool:
        """Return True if (row, col) lies inside the grid."""
        return 0 <= row < self._n_rows and 0 <= col < self._n_cols

    def get(self, row: int, col: int) -> Any:
        """Return the element at (row, col)."""
        if not self.in_bounds(row, col):
            raise IndexError("get: Grid indices out of bounds")
        return self._elements[row * self._n_cols + col]

    def set(self, row: int, col: int, value: Any) -> None:
        """Replace the element at (row, col)."""
        if not self.in_bounds(row, col):
            raise IndexError("set: Grid indices out of bounds")
        self._elements[row * self._n_cols + col] = value

    def map_all(self, fn: Callable[[Any], Any]) -> None:
        """Call fn on every element in row-major order."""
        for value in self._elements:
            fn(value)

    def __getitem__(self, index: int | tuple[int, int]) -> Any:
        if isinstance(index, tuple):
            row, col = index
            if not self.in_bounds(row, col):
                raise IndexError("Grid index values out of range")
            return self._elements[row * self._n_cols + col]
        return _GridRow(self, index)

    def __setitem__(self, index: tuple[int, int], value: Any) -> None:
        if not isinstance(index, tuple):
            raise TypeError("Grid assignment needs a (row, col) index")
        row, col = index
        if not self.in_bounds(row, col):
            raise IndexError("Grid index values out of range")
        self._elements[row * self._n_cols + col] = value

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._elements))

    def __len__(self) -> int:
        return self._n_rows * self._n_cols

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return (
            self._n_rows == other._n_rows
            and self._n_cols == other._n_cols
            and self._elements == other._elements
        )

    __hash__ = None  # type: ignore[assignment]

    def copy(self) -> Grid:
        """Return a copy that shares no storage with this grid."""
        clone = Grid(0, 0, self._default)
        clone._n_rows = self._n_rows
        clone._n_cols = self._n_cols
        clone._elements = list(self._elements)
        return clone

    def __str__(self) -> str:
        rows = (
            "{"
            + ", ".join(
                _format_value(v)
                for v in self._elements[r * self._n_cols:(r + 1) * self._n_cols]
            )
            + "}"
            for r in range(self._n_rows)
        )
        return "{" + ", ".join(rows) + "}"

    def __repr__(self) -> str:
        return f"Grid({self._n_rows}, {self._n_cols}, {self})"